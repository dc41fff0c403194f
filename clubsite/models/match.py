"""Modelo Match"""
from sqlalchemy import Column, DateTime, Integer, JSON, String
from clubsite.models.base import BaseModel


class Match(BaseModel):
    """Partida do clube"""
    __tablename__ = "matches"

    home_team = Column(String(255), nullable=False)
    away_team = Column(String(255), nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    time = Column(String(20), nullable=False)
    venue = Column(String(255), nullable=False)
    competition = Column(String(255), nullable=False, default="League")

    # Placar (None = ainda não jogada)
    home_score = Column(Integer, nullable=True)
    away_score = Column(Integer, nullable=True)

    status = Column(String(20), nullable=False, default="scheduled", index=True)

    # Lista ordenada de {player_name, goals, team, player}
    goal_scorers = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return (
            f"<Match(id={self.id}, {self.home_team} vs {self.away_team}, "
            f"status='{self.status}')>"
        )
