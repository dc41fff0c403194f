"""Modelo base para todos os models"""
from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, DateTime, String
from clubsite.core.database import Base


def utcnow() -> datetime:
    """UTC sem tzinfo; é o formato gravado em todas as colunas DateTime"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    return uuid.uuid4().hex


class BaseModel(Base):
    """Classe base abstrata para todos os modelos"""
    __abstract__ = True

    id = Column(String(32), primary_key=True, default=new_id)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
