"""Schemas de autenticação"""
from datetime import datetime
from typing import Annotated, Literal

from pydantic import EmailStr, Field, StringConstraints, field_validator

from clubsite.schemas.common import CamelModel, RequiredStr


class RegisterRequest(CamelModel):
    name: RequiredStr
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=6)]

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class LoginRequest(CamelModel):
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=1)]

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class UserResponse(CamelModel):
    """Projeção pública do usuário (nunca inclui a senha)"""
    id: str
    name: str
    email: str
    role: Literal["user", "admin"]


class CurrentUserResponse(UserResponse):
    created_at: datetime


class AuthResponse(UserResponse):
    token: str = Field(..., description="Bearer token (JWT)")
