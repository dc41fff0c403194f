"""Configuração do banco de dados async e sync"""
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool
from sqlalchemy import create_engine
from clubsite.core.config import settings
import logging

logger = logging.getLogger(__name__)

# Base para modelos SQLAlchemy
Base = declarative_base()


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


# Converte URL async para sync (remove +asyncpg / +aiosqlite)
def get_sync_database_url() -> str:
    """Converte URL async para sync"""
    url = settings.database_url
    if url.startswith("postgresql+asyncpg://"):
        return url.replace("postgresql+asyncpg://", "postgresql+psycopg2://")
    elif url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg2://")
    elif url.startswith("sqlite+aiosqlite://"):
        return url.replace("sqlite+aiosqlite://", "sqlite://")
    return url


# Garante que a URL async use um driver async explicitamente
def get_async_database_url() -> str:
    """Garante URL async com asyncpg ou aiosqlite"""
    url = settings.database_url
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://")
    elif url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    elif url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://")
    return url


def _engine_options(url: str, pool_size: int, max_overflow: int) -> dict:
    """SQLite não usa pool persistente; Postgres usa pool com pre-ping"""
    if is_sqlite(url):
        return {"poolclass": NullPool, "echo": settings.DEBUG}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "echo": settings.DEBUG,
    }


async_url = get_async_database_url()
engine = create_async_engine(async_url, **_engine_options(async_url, 20, 10))

# Engine sync para comandos de manutenção (clubsite.manage)
sync_url = get_sync_database_url()
sync_engine = create_engine(sync_url, **_engine_options(sync_url, 5, 5))

# Session factory async
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Session factory sync
SessionLocal = sessionmaker(
    bind=sync_engine,
    class_=Session,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncSession:
    """
    Dependency async para obter sessão do banco de dados.
    Uso: db: AsyncSession = Depends(get_db)
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db():
    """Inicializa o banco de dados criando todas as tabelas"""
    import clubsite.models  # noqa: F401  registra os modelos no metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Banco de dados inicializado")


def init_db_sync():
    """Versão sync de init_db, usada pela linha de comando"""
    import clubsite.models  # noqa: F401

    Base.metadata.create_all(bind=sync_engine)
    logger.info("Banco de dados inicializado (sync)")


async def close_db():
    """Fecha todas as conexões do banco"""
    await engine.dispose()
    logger.info("Conexões do banco de dados fechadas")
