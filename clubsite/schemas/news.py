"""Schemas de News"""
from datetime import datetime
from typing import Literal, Optional

from clubsite.schemas.common import CamelModel, RequiredStr

NewsCategory = Literal["match", "transfer", "training", "announcement", "other"]


class NewsCreate(CamelModel):
    """Schema para criação de News; o autor vem do token, nunca do payload"""
    title: RequiredStr
    excerpt: RequiredStr
    content: RequiredStr
    image: str = ""
    category: NewsCategory = "other"
    published: bool = True


class NewsUpdate(CamelModel):
    """Schema para atualização parcial de News"""
    title: Optional[RequiredStr] = None
    excerpt: Optional[RequiredStr] = None
    content: Optional[RequiredStr] = None
    image: Optional[str] = None
    category: Optional[NewsCategory] = None
    published: Optional[bool] = None


class AuthorSummary(CamelModel):
    id: str
    name: str


class NewsResponse(NewsCreate):
    """Schema de resposta de News"""
    id: str
    author: Optional[AuthorSummary] = None
    created_at: datetime
