"""Modelo News"""
from sqlalchemy import Boolean, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from clubsite.models.base import BaseModel


class News(BaseModel):
    """Notícia publicada por um admin"""
    __tablename__ = "news"

    title = Column(String(255), nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    image = Column(Text, nullable=False, default="")
    category = Column(String(20), nullable=False, default="other")
    published = Column(Boolean, nullable=False, default=True, index=True)

    author_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    author = relationship("User", lazy="raise")

    def __repr__(self):
        return f"<News(id={self.id}, title='{self.title}', published={self.published})>"
