"""Aplicação principal FastAPI"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from clubsite.core.config import settings
from clubsite.core.exceptions import register_exception_handlers
from clubsite.core.logging_config import setup_logging
from clubsite.core.middleware import RequestContextMiddleware
from clubsite.core.rate_limit import limiter
from clubsite.api.api import api_router
import logging

# Configura logging
setup_logging()
logger = logging.getLogger(__name__)

# Cria aplicação FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="API REST do site do clube: elenco, partidas, notícias e galeria",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Estado do limiter
app.state.limiter = limiter
register_exception_handlers(app)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestContextMiddleware)

# Inclui routers
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Endpoint raiz"""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": {
            "auth": f"{settings.API_PREFIX}/auth",
            "players": f"{settings.API_PREFIX}/players",
            "matches": f"{settings.API_PREFIX}/matches",
            "news": f"{settings.API_PREFIX}/news",
            "gallery": f"{settings.API_PREFIX}/gallery"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION
    }


@app.on_event("startup")
async def startup_event():
    """Evento de startup"""
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciando...")

    if settings.AUTO_CREATE_TABLES:
        from clubsite.core.database import init_db
        await init_db()

    if settings.is_production and settings.SECRET_KEY == "dev-secret-key-change-in-production":
        logger.warning("⚠️  SECRET_KEY padrão em produção! Defina SECRET_KEY no .env")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de shutdown"""
    logger.info("Aplicação encerrando...")
    from clubsite.core.database import close_db
    await close_db()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "clubsite.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
