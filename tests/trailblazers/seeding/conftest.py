"""
Shared fixtures for seeding tests: a temporary seed directory laid out the
way the application expects it.
"""
from pathlib import Path

import pytest

FAUNA_CSV = """Scientific Name,Common Name,CurrentDistribution,Family,Federal Listing Status,image,photo_credit
Lynx rufus,Bobcat,Statewide,Felidae,,bobcat.jpg,MDC
Lontra canadensis,North American River Otter,"Ozarks, Mississippi Lowlands",Mustelidae,,otter.jpg,"Smith, J."
"""

PLANT_CSV = """scientific_name,common_name,current_distribution,family,federal_listing_status,image,photo_credit
Quercus alba,White oak,Statewide,Fagaceae,,oak.jpg,USDA
Echinacea paradoxa,Bush's purple coneflower,Ozarks,Asteraceae,,,
Asclepias meadii,Mead's milkweed,Ozarks,Apocynaceae,Threatened,milkweed.jpg,USFWS
"""

PARK_CSV = """name,latitude,longitude,PARK_TYPE,URL,short_name
Ha Ha Tonka State Park,37.9735,-92.7679,State Park,https://mostateparks.com/park/ha-ha-tonka-state-park,HHT
Elephant Rocks State Park,37.6532,-90.6885,State Park,https://mostateparks.com/park/elephant-rocks-state-park,
Johnson's Shut-Ins State Park,north,-90.8439,State Park,,JSI
Katy Trail State Park,38.5767,-92.1735,Trail,"https://mostateparks.com/park/katy-trail-state-park",KATY
Bennett Spring State Park,37.7166,-92.8572,State Park,,
"""


def write_source(base: Path, subpath: str, content: str) -> Path:
    path = base / subpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def seed_dir(tmp_path):
    """Seed base directory with valid fauna (2), plant (3) and park (4 valid of 5) files."""
    write_source(tmp_path, "animal_information/animals_mo_state_parks.csv", FAUNA_CSV)
    write_source(tmp_path, "plant_information/plants_mo_state_parks.csv", PLANT_CSV)
    write_source(tmp_path, "park_locations/MO_State_Park.csv", PARK_CSV)
    return tmp_path


@pytest.fixture
def write_seed():
    """Write (or overwrite) one source file under a base directory."""
    return write_source
