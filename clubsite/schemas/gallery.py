"""Schemas de GalleryItem"""
from datetime import datetime
from typing import Literal, Optional

from clubsite.schemas.common import CamelModel, RequiredStr

GalleryCategory = Literal["match", "training", "team", "events", "other"]


class GalleryItemCreate(CamelModel):
    title: RequiredStr
    image_url: RequiredStr
    description: str = ""
    category: GalleryCategory = "other"


class GalleryItemUpdate(CamelModel):
    title: Optional[RequiredStr] = None
    image_url: Optional[RequiredStr] = None
    description: Optional[str] = None
    category: Optional[GalleryCategory] = None


class GalleryItemResponse(GalleryItemCreate):
    id: str
    created_at: datetime
