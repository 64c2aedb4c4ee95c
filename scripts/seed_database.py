"""
CLI helper to seed the database from the fauna, plant and park CSV files.
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.trailblazers.db.session import create_all_tables
from src.trailblazers.errors import ConfigurationInvalidError
from src.trailblazers.seeding import load_seed_config, run_seeding_pipeline, sqlalchemy_stores
from src.trailblazers.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the TrailBlazers database from CSV files")
    parser.add_argument(
        "--refresh",
        action="store_true",
        default=None,
        help="Delete existing records and reload every source",
    )
    parser.add_argument(
        "--base-path",
        default=None,
        help="Directory containing the seed CSV folders (default: DATA_SEED_BASE_PATH or ../databases)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create database tables before seeding",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging()

    try:
        # An explicit command-line run always seeds, whatever DATA_SEED_ENABLED says
        config = load_seed_config(enabled=True, refresh=args.refresh, base_path=args.base_path)
    except ConfigurationInvalidError as e:
        logger.error("seeding_configuration_invalid", error=str(e))
        print(f"\nInvalid configuration: {e}")
        return 2

    if args.create_tables:
        create_all_tables()

    summary = run_seeding_pipeline(config, sqlalchemy_stores())

    print(f"\nSeeding finished ({config.base_path}):")
    for kind, outcome in summary.outcomes.items():
        line = f"  {kind.value:<6} {outcome.state.value:<8} inserted={outcome.inserted}"
        if outcome.rejections:
            line += f" rejected={len(outcome.rejections)}"
        if outcome.error:
            line += f" error={outcome.error}"
        print(line)

    return 1 if summary.failed_kinds() else 0


if __name__ == "__main__":
    sys.exit(main())
