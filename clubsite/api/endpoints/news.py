"""Endpoints de News"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.api.deps import require_admin
from clubsite.core.database import get_db
from clubsite.models.user import User
from clubsite.repositories.news_repository import NewsRepository
from clubsite.schemas.common import MessageResponse
from clubsite.schemas.news import NewsCreate, NewsResponse, NewsUpdate

router = APIRouter()


@router.post("", response_model=NewsResponse, status_code=201)
async def create_news(
    payload: NewsCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Publica notícia; o autor é sempre o admin autenticado"""
    repository = NewsRepository(db)
    return await repository.create(payload.model_dump(), author_id=admin.id)


@router.get("", response_model=List[NewsResponse])
async def list_news(db: AsyncSession = Depends(get_db)):
    """Notícias publicadas, mais recentes primeiro"""
    repository = NewsRepository(db)
    return await repository.list()


@router.get("/{news_id}", response_model=NewsResponse)
async def get_news(news_id: str, db: AsyncSession = Depends(get_db)):
    repository = NewsRepository(db)
    return await repository.get_by_id(news_id)


@router.put("/{news_id}", response_model=NewsResponse)
async def update_news(
    news_id: str,
    payload: NewsUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    repository = NewsRepository(db)
    return await repository.update(news_id, payload.model_dump(exclude_unset=True))


@router.delete("/{news_id}", response_model=MessageResponse)
async def delete_news(
    news_id: str,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    repository = NewsRepository(db)
    await repository.delete(news_id)
    return {"message": "News deleted successfully"}
