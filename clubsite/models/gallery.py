"""Modelo GalleryItem"""
from sqlalchemy import Column, String, Text
from clubsite.models.base import BaseModel


class GalleryItem(BaseModel):
    """Foto da galeria"""
    __tablename__ = "gallery"

    title = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(20), nullable=False, default="other")

    def __repr__(self):
        return f"<GalleryItem(id={self.id}, title='{self.title}', category='{self.category}')>"
