"""Modelo Player"""
from sqlalchemy import Column, Integer, String, Text
from clubsite.models.base import BaseModel


class Player(BaseModel):
    """Jogador do elenco"""
    __tablename__ = "players"

    name = Column(String(255), nullable=False)
    position = Column(String(20), nullable=False)
    # sem unique: o elenco aceita números repetidos
    number = Column(Integer, nullable=False, index=True)
    age = Column(Integer, nullable=False)
    nationality = Column(String(100), nullable=False)

    goals = Column(Integer, nullable=False, default=0)
    assists = Column(Integer, nullable=False, default=0)

    bio = Column(Text, nullable=False, default="")
    image = Column(Text, nullable=False, default="")  # URL ou data URI

    def __repr__(self):
        return f"<Player(name='{self.name}', number={self.number}, position='{self.position}')>"
