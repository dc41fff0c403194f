"""Service de autenticação (Async): registro, login e resolução de token"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from clubsite.core.exceptions import AuthError, ConflictError
from clubsite.core.security import (
    TOKEN_FAILED_MESSAGE,
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)
from clubsite.models.user import User
from clubsite.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"

# Hash usado quando o email não existe, para que o tempo de resposta
# do login não revele se a conta existe
_DUMMY_HASH: Optional[str] = None


def _dummy_hash() -> str:
    global _DUMMY_HASH
    if _DUMMY_HASH is None:
        _DUMMY_HASH = hash_password("not-a-real-password")
    return _DUMMY_HASH


def public_user(user: User) -> dict:
    """Projeção pública: id, name, email, role"""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
    }


class AuthService:
    """Service async para credenciais e tokens"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = UserRepository(db)

    async def register(self, name: str, email: str, password: str) -> dict:
        """Cria o usuário e devolve a projeção pública com um token novo"""
        if await self.repository.get_by_email(email):
            raise ConflictError("User already exists")

        try:
            user = await self.repository.create(
                name=name,
                email=email,
                password_hash=hash_password(password),
            )
        except IntegrityError as e:
            # Outro registro com o mesmo email entrou entre a checagem e o insert
            await self.db.rollback()
            raise ConflictError("User already exists") from e

        logger.info(f"Usuário registrado: {user.id}")
        return {**public_user(user), "token": issue_token(user.id)}

    async def login(self, email: str, password: str) -> dict:
        """Mesma resposta para email desconhecido e senha errada"""
        user = await self.repository.get_by_email(email)
        if user is None:
            verify_password(password, _dummy_hash())
            logger.info("Login recusado: credenciais inválidas")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        if not verify_password(password, user.password):
            logger.info("Login recusado: credenciais inválidas")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        return {**public_user(user), "token": issue_token(user.id)}

    async def resolve_token(self, token: str) -> User:
        """Token -> usuário atual; AuthError se inválido ou se o usuário sumiu"""
        user_id = verify_token(token)
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise AuthError(TOKEN_FAILED_MESSAGE)
        return user
