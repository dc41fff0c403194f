"""Repository de User (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional
from clubsite.models.user import User


class UserRepository:
    """Repository async para operações de banco com User"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Obtém usuário por ID"""
        result = await self.db.execute(
            select(User).filter(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Obtém usuário por email (já normalizado em minúsculas)"""
        result = await self.db.execute(
            select(User).filter(User.email == email)
        )
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str, password_hash: str, role: str = "user") -> User:
        """Cria novo usuário"""
        user = User(name=name, email=email, password=password_hash, role=role)
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user
