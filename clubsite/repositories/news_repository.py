"""Repository de News (Async)"""
from sqlalchemy import Select
from sqlalchemy.orm import selectinload

from clubsite.models.news import News
from clubsite.repositories.base import CrudRepository
from clubsite.schemas.news import NewsCreate


class NewsRepository(CrudRepository):
    """Notícias com o autor carregado; a listagem pública só mostra as publicadas"""

    model = News
    create_schema = NewsCreate
    label = "News"

    def base_query(self) -> Select:
        return super().base_query().options(selectinload(News.author))

    def list_query(self) -> Select:
        return (
            self.base_query()
            .filter(News.published.is_(True))
            .order_by(News.created_at.desc())
        )

    async def create(self, payload: dict, author_id: str) -> News:
        news = await super().create(payload, author_id=author_id)
        # Recarrega para trazer o autor (relationship não é carregada no insert)
        result = await self.db.execute(
            self.base_query()
            .filter(News.id == news.id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()
