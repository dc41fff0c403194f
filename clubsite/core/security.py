"""Hash de senha, tokens JWT e autorização por papel"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

import bcrypt
import jwt

from clubsite.core.config import settings
from clubsite.core.exceptions import AuthError

# bcrypt só considera os primeiros 72 bytes da senha
BCRYPT_MAX_BYTES = 72

NO_TOKEN_MESSAGE = "Not authorized, no token"
TOKEN_FAILED_MESSAGE = "Not authorized, token failed"
NOT_ADMIN_MESSAGE = "Not authorized as admin"


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


ROLE_LEVELS = {Role.USER: 1, Role.ADMIN: 2}


def hash_password(password: str) -> str:
    """Gera hash bcrypt com salt"""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(
            password.encode("utf-8")[:BCRYPT_MAX_BYTES],
            password_hash.encode("utf-8"),
        )
    except ValueError:
        # hash corrompido no banco
        return False


def issue_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Assina um token com o id do usuário, válido por JWT_EXPIRES_DAYS"""
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.JWT_EXPIRES_DAYS)
    payload = {
        "id": user_id,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> str:
    """Retorna o id do usuário embutido no token ou levanta AuthError"""
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "id"]},
        )
    except jwt.PyJWTError as e:
        raise AuthError(TOKEN_FAILED_MESSAGE) from e

    user_id = payload.get("id")
    if not isinstance(user_id, str) or not user_id:
        raise AuthError(TOKEN_FAILED_MESSAGE)
    return user_id


@dataclass(frozen=True)
class AuthDecision:
    """Resultado de authorize(); status_code/message só fazem sentido quando negado"""
    allowed: bool
    status_code: int = 200
    message: str = ""


def authorize(user, required_role: Role) -> AuthDecision:
    """
    Decide se `user` pode acessar um recurso que exige `required_role`.

    Sem usuário -> 401. Papel abaixo do exigido -> 403. Papéis desconhecidos
    são tratados como o nível mais baixo.
    """
    if user is None:
        return AuthDecision(allowed=False, status_code=401, message=NO_TOKEN_MESSAGE)

    try:
        user_level = ROLE_LEVELS[Role(user.role)]
    except ValueError:
        user_level = 0

    if user_level < ROLE_LEVELS[required_role]:
        message = NOT_ADMIN_MESSAGE if required_role == Role.ADMIN else "Not authorized"
        return AuthDecision(allowed=False, status_code=403, message=message)

    return AuthDecision(allowed=True)
