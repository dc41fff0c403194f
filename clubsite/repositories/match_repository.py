"""Repository de Match (Async)"""
from typing import List

from sqlalchemy import Select

from clubsite.models.base import utcnow
from clubsite.models.match import Match
from clubsite.repositories.base import CrudRepository
from clubsite.schemas.match import MatchCreate

UPCOMING_LIMIT = 5


class MatchRepository(CrudRepository):
    """Calendário de partidas, sempre em ordem cronológica"""

    model = Match
    create_schema = MatchCreate
    label = "Match"

    def list_query(self) -> Select:
        return self.base_query().order_by(Match.date.asc())

    async def list_upcoming(self, limit: int = UPCOMING_LIMIT) -> List[Match]:
        """Próximas partidas agendadas (date >= agora, status scheduled)"""
        result = await self.db.execute(
            self.base_query()
            .filter(Match.date >= utcnow(), Match.status == "scheduled")
            .order_by(Match.date.asc())
            .limit(limit)
        )
        return list(result.scalars().all())
