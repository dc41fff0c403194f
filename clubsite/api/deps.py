"""Dependencies de autenticação: protect (token -> usuário) e admin (papel)"""
from typing import Optional
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.core.database import get_db
from clubsite.core.exceptions import AuthError
from clubsite.core.security import NO_TOKEN_MESSAGE, Role, authorize
from clubsite.models.user import User
from clubsite.services.auth_service import AuthService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Lê `Authorization: Bearer <token>` e resolve o usuário.
    401 se não houver token, se ele não verificar ou se o usuário não existir mais.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError(NO_TOKEN_MESSAGE)

    user = await AuthService(db).resolve_token(credentials.credentials)
    request.state.user = user
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Composto depois de get_current_user; 403 para quem não é admin"""
    decision = authorize(user, Role.ADMIN)
    if not decision.allowed:
        logger.warning(f"Acesso admin negado para usuário {user.id}")
        raise AuthError(decision.message, status_code=decision.status_code)
    return user
