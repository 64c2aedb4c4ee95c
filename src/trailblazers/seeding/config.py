"""
Seed Configuration

Immutable value object handed to the seeding pipeline. Built once from
SeedSettings; decoding and mapping never read configuration themselves.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from config.settings import SeedSettings, load_seed_settings
from src.trailblazers.errors import ConfigurationInvalidError


@dataclass(frozen=True)
class SeedConfig:
    """
    Validated seeding configuration.

    Attributes:
        enabled: When False the pipeline is a no-op
        refresh: Delete existing records and reload instead of skipping
        base_path: Absolute directory that source sub-paths resolve against
    """
    enabled: bool = True
    refresh: bool = False
    base_path: Path = Path("../databases")

    @classmethod
    def from_settings(cls, seed_settings: SeedSettings) -> "SeedConfig":
        return cls(
            enabled=seed_settings.enabled,
            refresh=seed_settings.refresh,
            base_path=Path(seed_settings.base_path).expanduser().resolve(),
        )


def load_seed_config(
    enabled: Optional[bool] = None,
    refresh: Optional[bool] = None,
    base_path: Optional[str] = None,
) -> SeedConfig:
    """
    Build a SeedConfig from the environment plus explicit overrides.

    Raises:
        ConfigurationInvalidError: If a flag or the base path is malformed
    """
    try:
        seed_settings = load_seed_settings(enabled=enabled, refresh=refresh, base_path=base_path)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ConfigurationInvalidError(f"Invalid seed configuration: {problems}") from e
    return SeedConfig.from_settings(seed_settings)
