"""Modelo User"""
from sqlalchemy import Column, String
from clubsite.models.base import BaseModel


class User(BaseModel):
    """Conta de acesso ao site; `password` guarda apenas o hash bcrypt"""
    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
