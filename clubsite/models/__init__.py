"""Models - modelos SQLAlchemy"""
from clubsite.models.user import User
from clubsite.models.player import Player
from clubsite.models.match import Match
from clubsite.models.news import News
from clubsite.models.gallery import GalleryItem

__all__ = [
    "User",
    "Player",
    "Match",
    "News",
    "GalleryItem",
]
