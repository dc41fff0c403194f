"""Endpoints de autenticação"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.api.deps import get_current_user
from clubsite.core.config import settings
from clubsite.core.database import get_db
from clubsite.core.rate_limit import limiter
from clubsite.models.user import User
from clubsite.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
)
from clubsite.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def register(
    request: Request,
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """Cria conta (papel user) e devolve o token"""
    service = AuthService(db)
    return await service.register(payload.name, payload.email, payload.password)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(
    request: Request,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """Troca email/senha por um token"""
    service = AuthService(db)
    return await service.login(payload.email, payload.password)


@router.get("/me", response_model=CurrentUserResponse)
async def me(user: User = Depends(get_current_user)):
    """Usuário dono do token (sem a senha)"""
    return user
