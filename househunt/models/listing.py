"""Listing model: one accommodation offer with a hidden scam/legitimate verdict."""
from sqlalchemy import Boolean, Column, Integer, String, Text

from househunt.db.session import Base


class Listing(Base):
    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    price = Column(String(64), nullable=False)  # display string, e.g. "850€/month"
    deposit = Column(String(64), nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(512), nullable=True)
    is_scam = Column(Boolean, nullable=False)
    # JSON arrays of strings; red flags only for scams, green flags only for legit offers
    red_flags_json = Column(Text, nullable=False, default="[]")
    green_flags_json = Column(Text, nullable=False, default="[]")
