"""Repository de GalleryItem (Async)"""
from sqlalchemy import Select

from clubsite.models.gallery import GalleryItem
from clubsite.repositories.base import CrudRepository
from clubsite.schemas.gallery import GalleryItemCreate


class GalleryRepository(CrudRepository):
    model = GalleryItem
    create_schema = GalleryItemCreate
    label = "Gallery item"

    def list_query(self) -> Select:
        return self.base_query().order_by(GalleryItem.created_at.desc())
