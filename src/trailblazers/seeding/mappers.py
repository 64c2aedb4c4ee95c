"""
Entity Mappers

Convert a HeaderedRow into a typed seed record. Mappers are pure: they
neither touch shared state nor perform I/O, and signal an unusable row by
raising RowRejectedError.
"""
import math
import re
from typing import Dict, Optional

from src.trailblazers.errors import RowRejectedError
from src.trailblazers.seeding.decoder import HeaderedRow
from src.trailblazers.seeding.records import FaunaRecord, ParkRecord, PlantRecord

# CSV column name → record attribute
FAUNA_COLUMNS: Dict[str, str] = {
    "Scientific Name": "scientific_name",
    "Common Name": "common_name",
    "CurrentDistribution": "current_distribution",
    "Family": "family",
    "Federal Listing Status": "status",
    "image": "image",
    "photo_credit": "photo_credit",
}

PLANT_COLUMNS: Dict[str, str] = {
    "scientific_name": "scientific_name",
    "common_name": "common_name",
    "current_distribution": "current_distribution",
    "family": "family",
    "federal_listing_status": "federal_listing_status",
    "image": "image",
    "photo_credit": "photo_credit",
}

PARK_TEXT_COLUMNS: Dict[str, str] = {
    "name": "name",
    "PARK_TYPE": "park_type",
    "URL": "url",
    "short_name": "short_name",
}

# Plain ASCII decimal or scientific notation; no digit grouping
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

PARK_NUMERIC_COLUMNS: Dict[str, str] = {
    "latitude": "latitude",
    "longitude": "longitude",
}


def text_value(row: HeaderedRow, column: str) -> Optional[str]:
    """
    Extract a trimmed text value.

    Absent columns, empty strings and whitespace-only strings all map to None.
    """
    value = row.get(column)
    if value is None:
        return None
    value = value.strip()
    return value or None


def decimal_value(row: HeaderedRow, column: str) -> float:
    """
    Extract a required finite decimal value.

    Raises:
        RowRejectedError: If the value is missing, unparsable or not finite
    """
    value = text_value(row, column)
    if value is None:
        raise RowRejectedError(
            column, "missing numeric value", raw=row.raw, line_number=row.line_number
        )
    if not DECIMAL_PATTERN.fullmatch(value):
        raise RowRejectedError(
            column, f"not a decimal number: {value!r}", raw=row.raw, line_number=row.line_number
        )
    number = float(value)
    if not math.isfinite(number):
        raise RowRejectedError(
            column, f"not a finite number: {value!r}", raw=row.raw, line_number=row.line_number
        )
    return number


def _text_fields(row: HeaderedRow, columns: Dict[str, str]) -> Dict[str, Optional[str]]:
    return {attr: text_value(row, column) for column, attr in columns.items()}


def map_fauna(row: HeaderedRow) -> FaunaRecord:
    return FaunaRecord(**_text_fields(row, FAUNA_COLUMNS))


def map_plant(row: HeaderedRow) -> PlantRecord:
    return PlantRecord(**_text_fields(row, PLANT_COLUMNS))


def map_park(row: HeaderedRow) -> ParkRecord:
    """Map a park row; both coordinates must be present and numeric."""
    coordinates = {attr: decimal_value(row, column) for column, attr in PARK_NUMERIC_COLUMNS.items()}
    return ParkRecord(**coordinates, **_text_fields(row, PARK_TEXT_COLUMNS))
