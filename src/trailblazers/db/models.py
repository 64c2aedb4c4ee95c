"""
SQLAlchemy ORM Models

Tables populated by the startup seeding pipeline and served by the API.
Column names match the seed record attributes so records convert with
Model(**record.to_dict()).
"""
from typing import Optional

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.trailblazers.db.base import Base, SeededAtMixin


class Fauna(Base, SeededAtMixin):
    """Animal species found in Missouri state parks."""
    __tablename__ = "fauna"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    scientific_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    common_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    current_distribution: Mapped[Optional[str]] = mapped_column(
        String(2048),
        nullable=True,
        comment="Counties / regions where the species currently occurs"
    )
    family: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Federal listing status"
    )
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    photo_credit: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Fauna(id={self.id}, common_name='{self.common_name}')>"


class Plant(Base, SeededAtMixin):
    """Plant species found in Missouri state parks."""
    __tablename__ = "plants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    scientific_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    common_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    current_distribution: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    family: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    federal_listing_status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    photo_credit: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Plant(id={self.id}, common_name='{self.common_name}')>"


class Geolocation(Base, SeededAtMixin):
    """State park location."""
    __tablename__ = "geolocations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    park_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    short_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Geolocation(id={self.id}, name='{self.name}')>"
