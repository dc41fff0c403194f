"""Schemas de Match"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from clubsite.schemas.common import INT32_MAX, CamelModel, Count, RequiredStr, to_naive_utc

MatchStatus = Literal["scheduled", "live", "completed", "cancelled"]


class GoalScorer(CamelModel):
    player_name: RequiredStr
    goals: int = Field(1, ge=1, le=INT32_MAX)
    team: Literal["home", "away"]
    player: Optional[str] = Field(None, description="Player id, opcional")


class MatchCreate(CamelModel):
    """Schema para criação de Match"""
    home_team: RequiredStr
    away_team: RequiredStr
    date: datetime
    time: RequiredStr
    venue: RequiredStr
    competition: str = "League"
    home_score: Optional[Count] = None
    away_score: Optional[Count] = None
    status: MatchStatus = "scheduled"
    goal_scorers: List[GoalScorer] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class MatchUpdate(CamelModel):
    """Schema para atualização parcial de Match"""
    home_team: Optional[RequiredStr] = None
    away_team: Optional[RequiredStr] = None
    date: Optional[datetime] = None
    time: Optional[RequiredStr] = None
    venue: Optional[RequiredStr] = None
    competition: Optional[str] = None
    home_score: Optional[Count] = None
    away_score: Optional[Count] = None
    status: Optional[MatchStatus] = None
    goal_scorers: Optional[List[GoalScorer]] = None


class MatchResponse(MatchCreate):
    """Schema de resposta de Match"""
    id: str
    created_at: datetime
