"""
Seed Record Definitions

Immutable, typed records produced by the entity mappers and handed to the
store in one batch per source. Text attributes are either None or a
non-empty trimmed string.
"""
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class EntityKind(str, Enum):
    """Kinds of records the seeding pipeline loads."""
    FAUNA = "fauna"
    PLANT = "plant"
    PARK = "park"


@dataclass(frozen=True)
class FaunaRecord:
    """One animal species observed in the state parks."""
    scientific_name: Optional[str] = None
    common_name: Optional[str] = None
    current_distribution: Optional[str] = None
    family: Optional[str] = None
    status: Optional[str] = None
    image: Optional[str] = None
    photo_credit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PlantRecord:
    """One plant species observed in the state parks."""
    scientific_name: Optional[str] = None
    common_name: Optional[str] = None
    current_distribution: Optional[str] = None
    family: Optional[str] = None
    federal_listing_status: Optional[str] = None
    image: Optional[str] = None
    photo_credit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ParkRecord:
    """
    One state park location.

    Attributes:
        latitude: WGS84 latitude (required)
        longitude: WGS84 longitude (required)
        name: Park name
        park_type: Park classification (state park, historic site, ...)
        url: Park web page
        short_name: Abbreviated park name
    """
    latitude: float
    longitude: float
    name: Optional[str] = None
    park_type: Optional[str] = None
    url: Optional[str] = None
    short_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SeedRecord = Union[FaunaRecord, PlantRecord, ParkRecord]
