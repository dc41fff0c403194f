"""Schemas de Player"""
from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import Field

from clubsite.schemas.common import CamelModel, Count, RequiredStr

Position = Literal["Goalkeeper", "Defender", "Midfielder", "Forward"]
JerseyNumber = Annotated[int, Field(ge=1, le=99)]
Age = Annotated[int, Field(ge=0, le=120)]


class PlayerBase(CamelModel):
    """Schema base de Player"""
    name: RequiredStr
    position: Position
    number: JerseyNumber
    age: Age
    nationality: RequiredStr


class PlayerCreate(PlayerBase):
    """Schema para criação de Player"""
    goals: Count = 0
    assists: Count = 0
    bio: str = ""
    image: str = ""


class PlayerUpdate(CamelModel):
    """Schema para atualização parcial de Player"""
    name: Optional[RequiredStr] = None
    position: Optional[Position] = None
    number: Optional[JerseyNumber] = None
    age: Optional[Age] = None
    nationality: Optional[RequiredStr] = None
    goals: Optional[Count] = None
    assists: Optional[Count] = None
    bio: Optional[str] = None
    image: Optional[str] = None


class PlayerResponse(PlayerCreate):
    """Schema de resposta de Player"""
    id: str
    created_at: datetime
