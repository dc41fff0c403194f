"""Repository de Player (Async)"""
from sqlalchemy import Select

from clubsite.models.player import Player
from clubsite.repositories.base import CrudRepository
from clubsite.schemas.player import PlayerCreate


class PlayerRepository(CrudRepository):
    """Elenco ordenado pelo número da camisa"""

    model = Player
    create_schema = PlayerCreate
    label = "Player"

    def list_query(self) -> Select:
        return self.base_query().order_by(Player.number.asc())
