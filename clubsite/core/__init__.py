"""Core modules - configurações principais"""
from clubsite.core.config import settings
from clubsite.core.database import get_db, Base, SessionLocal, AsyncSessionLocal
from clubsite.core.logging_config import setup_logging
from clubsite.core.rate_limit import limiter

__all__ = [
    "settings",
    "get_db",
    "Base",
    "SessionLocal",
    "AsyncSessionLocal",
    "setup_logging",
    "limiter",
]
