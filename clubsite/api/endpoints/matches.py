"""Endpoints de Matches"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.api.deps import require_admin
from clubsite.core.database import get_db
from clubsite.models.user import User
from clubsite.repositories.match_repository import MatchRepository
from clubsite.schemas.common import MessageResponse
from clubsite.schemas.match import MatchCreate, MatchResponse, MatchUpdate

router = APIRouter()


@router.post("", response_model=MatchResponse, status_code=201)
async def create_match(
    payload: MatchCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Agenda partida (admin)"""
    repository = MatchRepository(db)
    return await repository.create(payload.model_dump())


@router.get("", response_model=List[MatchResponse])
async def list_matches(db: AsyncSession = Depends(get_db)):
    """Lista todas as partidas em ordem de data"""
    repository = MatchRepository(db)
    return await repository.list()


# Declarada antes de /{match_id} para não ser capturada como id
@router.get("/upcoming", response_model=List[MatchResponse])
async def list_upcoming_matches(db: AsyncSession = Depends(get_db)):
    """Próximas 5 partidas agendadas"""
    repository = MatchRepository(db)
    return await repository.list_upcoming()


@router.get("/{match_id}", response_model=MatchResponse)
async def get_match(match_id: str, db: AsyncSession = Depends(get_db)):
    repository = MatchRepository(db)
    return await repository.get_by_id(match_id)


@router.put("/{match_id}", response_model=MatchResponse)
async def update_match(
    match_id: str,
    payload: MatchUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Atualiza placar, status, artilheiros etc. (admin)"""
    repository = MatchRepository(db)
    return await repository.update(match_id, payload.model_dump(exclude_unset=True))


@router.delete("/{match_id}", response_model=MessageResponse)
async def delete_match(
    match_id: str,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    repository = MatchRepository(db)
    await repository.delete(match_id)
    return {"message": "Match deleted successfully"}
