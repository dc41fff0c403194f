"""Router principal da API"""
from fastapi import APIRouter
from clubsite.api.endpoints import auth, players, matches, news, gallery

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(players.router, prefix="/players", tags=["players"])
api_router.include_router(matches.router, prefix="/matches", tags=["matches"])
api_router.include_router(news.router, prefix="/news", tags=["news"])
api_router.include_router(gallery.router, prefix="/gallery", tags=["gallery"])
