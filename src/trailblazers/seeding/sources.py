"""
Seed Source Definitions

Static description of every file the seeding pipeline loads: where it lives
under the base path, which headers it must carry, and how its rows map to
records.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Tuple

from src.trailblazers.seeding.decoder import HeaderedRow
from src.trailblazers.seeding.mappers import (
    PARK_NUMERIC_COLUMNS,
    map_fauna,
    map_park,
    map_plant,
)
from src.trailblazers.seeding.records import EntityKind, SeedRecord


@dataclass(frozen=True)
class SourceSpec:
    """
    One seed source.

    Attributes:
        kind: Entity kind the source populates
        subpath: File location relative to the seed base path
        required_headers: Columns whose absence fails the whole source
        mapper: Row → record conversion
    """
    kind: EntityKind
    subpath: str
    required_headers: Tuple[str, ...]
    mapper: Callable[[HeaderedRow], SeedRecord]

    def resolve(self, base_path: Path) -> Path:
        return base_path / self.subpath


FAUNA_SOURCE = SourceSpec(
    kind=EntityKind.FAUNA,
    subpath="animal_information/animals_mo_state_parks.csv",
    required_headers=(),
    mapper=map_fauna,
)

PLANT_SOURCE = SourceSpec(
    kind=EntityKind.PLANT,
    subpath="plant_information/plants_mo_state_parks.csv",
    required_headers=(),
    mapper=map_plant,
)

PARK_SOURCE = SourceSpec(
    kind=EntityKind.PARK,
    subpath="park_locations/MO_State_Park.csv",
    required_headers=tuple(PARK_NUMERIC_COLUMNS),
    mapper=map_park,
)

# Processing order
DEFAULT_SOURCES: Tuple[SourceSpec, ...] = (FAUNA_SOURCE, PLANT_SOURCE, PARK_SOURCE)
