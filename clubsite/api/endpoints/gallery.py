"""Endpoints da Galeria"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.api.deps import require_admin
from clubsite.core.database import get_db
from clubsite.models.user import User
from clubsite.repositories.gallery_repository import GalleryRepository
from clubsite.schemas.common import MessageResponse
from clubsite.schemas.gallery import (
    GalleryItemCreate,
    GalleryItemResponse,
    GalleryItemUpdate,
)

router = APIRouter()


@router.post("", response_model=GalleryItemResponse, status_code=201)
async def create_gallery_item(
    payload: GalleryItemCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Adiciona foto (admin)"""
    repository = GalleryRepository(db)
    return await repository.create(payload.model_dump())


@router.get("", response_model=List[GalleryItemResponse])
async def list_gallery(db: AsyncSession = Depends(get_db)):
    """Fotos mais recentes primeiro"""
    repository = GalleryRepository(db)
    return await repository.list()


@router.get("/{item_id}", response_model=GalleryItemResponse)
async def get_gallery_item(item_id: str, db: AsyncSession = Depends(get_db)):
    repository = GalleryRepository(db)
    return await repository.get_by_id(item_id)


@router.put("/{item_id}", response_model=GalleryItemResponse)
async def update_gallery_item(
    item_id: str,
    payload: GalleryItemUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    repository = GalleryRepository(db)
    return await repository.update(item_id, payload.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_gallery_item(
    item_id: str,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    repository = GalleryRepository(db)
    await repository.delete(item_id)
    return {"message": "Gallery item deleted successfully"}
