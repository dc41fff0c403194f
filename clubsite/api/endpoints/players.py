"""Endpoints de Players"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.api.deps import require_admin
from clubsite.core.database import get_db
from clubsite.models.user import User
from clubsite.repositories.player_repository import PlayerRepository
from clubsite.schemas.common import MessageResponse
from clubsite.schemas.player import PlayerCreate, PlayerResponse, PlayerUpdate

router = APIRouter()


@router.post("", response_model=PlayerResponse, status_code=201)
async def create_player(
    payload: PlayerCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Cadastra jogador (admin)"""
    repository = PlayerRepository(db)
    return await repository.create(payload.model_dump())


@router.get("", response_model=List[PlayerResponse])
async def list_players(db: AsyncSession = Depends(get_db)):
    """Lista o elenco pelo número da camisa"""
    repository = PlayerRepository(db)
    return await repository.list()


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: str, db: AsyncSession = Depends(get_db)):
    repository = PlayerRepository(db)
    return await repository.get_by_id(player_id)


@router.put("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: str,
    payload: PlayerUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Atualiza só os campos enviados (admin)"""
    repository = PlayerRepository(db)
    return await repository.update(player_id, payload.model_dump(exclude_unset=True))


@router.delete("/{player_id}", response_model=MessageResponse)
async def delete_player(
    player_id: str,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Remove jogador (admin)"""
    repository = PlayerRepository(db)
    await repository.delete(player_id)
    return {"message": "Player deleted successfully"}
