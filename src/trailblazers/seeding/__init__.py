"""
Seeding Package

Loads the fauna, plant and state park CSV files into the database at startup.
"""

from src.trailblazers.seeding.config import SeedConfig, load_seed_config
from src.trailblazers.seeding.orchestrator import run_seeding_pipeline, seed_database
from src.trailblazers.seeding.records import EntityKind, FaunaRecord, ParkRecord, PlantRecord
from src.trailblazers.seeding.report import SeedingSummary, SourceOutcome, SourceState
from src.trailblazers.seeding.store import InMemoryStore, RecordStore, RepositoryStore, sqlalchemy_stores

__all__ = [
    "SeedConfig",
    "load_seed_config",
    "run_seeding_pipeline",
    "seed_database",
    "EntityKind",
    "FaunaRecord",
    "PlantRecord",
    "ParkRecord",
    "SeedingSummary",
    "SourceOutcome",
    "SourceState",
    "InMemoryStore",
    "RecordStore",
    "RepositoryStore",
    "sqlalchemy_stores",
]
