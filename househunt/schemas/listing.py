"""Pydantic schemas for accommodation listings (public view, no verdict)."""
from typing import Optional

from pydantic import BaseModel


class ListingOutSchema(BaseModel):
    id: int
    title: str
    location: str
    price: str
    deposit: str
    description: str
    image: Optional[str] = None

    class Config:
        from_attributes = True
