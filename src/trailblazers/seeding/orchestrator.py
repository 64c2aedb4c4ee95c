"""
Seeding Orchestrator

Loads every configured seed source into its store, one source at a time.

Per source: count existing records, skip when present (unless refreshing),
clear the store when refreshing, stream the file through the decoder and
mapper, and save the accepted records in one batch. Rejected rows are
recorded and skipped; a failing source is recorded and the run moves on to
the next one. Nothing raises out of run_seeding_pipeline.
"""
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from src.trailblazers.errors import (
    ConfigurationInvalidError,
    RowRejectedError,
    SeedingError,
    SourceFormatError,
    SourceNotFoundError,
    SourceReadError,
)
from src.trailblazers.seeding.config import SeedConfig, load_seed_config
from src.trailblazers.seeding.decoder import RowDecoder
from src.trailblazers.seeding.records import EntityKind, SeedRecord
from src.trailblazers.seeding.report import RowRejection, SeedingSummary, SourceOutcome, SourceState
from src.trailblazers.seeding.sources import DEFAULT_SOURCES, SourceSpec
from src.trailblazers.seeding.store import RecordStore, sqlalchemy_stores
from src.trailblazers.utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_ENCODING = "utf-8-sig"


def read_source(source: SourceSpec, path: Path, outcome: SourceOutcome) -> List[SeedRecord]:
    """
    Decode and map every row of one source file.

    Rejected rows are appended to outcome.rejections and logged.

    Raises:
        SourceNotFoundError: If the file does not exist
        SourceFormatError: If there is no header or required columns are missing
        SourceReadError: On I/O or UTF-8 decoding failure
    """
    if not path.is_file():
        raise SourceNotFoundError(path)

    batch: List[SeedRecord] = []
    try:
        with path.open("r", encoding=SOURCE_ENCODING, newline="") as fh:
            decoder = RowDecoder(fh)
            if decoder.headers is None:
                raise SourceFormatError(f"Source has no header line: {path}")

            missing = [h for h in source.required_headers if h not in decoder.headers]
            if missing:
                raise SourceFormatError(f"Source {path} is missing required columns: {', '.join(missing)}")

            for row in decoder:
                try:
                    batch.append(source.mapper(row))
                except RowRejectedError as e:
                    rejection = RowRejection(
                        path=path,
                        line_number=row.line_number,
                        column=e.column,
                        reason=e.reason,
                        raw=row.raw,
                    )
                    outcome.rejections.append(rejection)
                    logger.warning(
                        "seed_row_rejected",
                        kind=source.kind,
                        path=path,
                        line=row.line_number,
                        column=e.column,
                        reason=e.reason,
                        raw=row.raw,
                    )
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Failed reading {path}: {e}") from e

    return batch


def seed_source(source: SourceSpec, store: RecordStore, config: SeedConfig) -> SourceOutcome:
    """
    Run one source through the skip / clear / load state machine.

    Source-level failures are caught here and recorded on the outcome.
    """
    path = source.resolve(config.base_path)
    outcome = SourceOutcome(kind=source.kind, path=path)

    try:
        existing = store.count()
        if existing > 0 and not config.refresh:
            outcome.state = SourceState.SKIPPED
            logger.info("seed_source_skipped", kind=source.kind, existing=existing)
            return outcome

        outcome.state = SourceState.LOADING
        if existing > 0:
            store.delete_all()
            logger.info("seed_source_cleared", kind=source.kind, deleted=existing)

        batch = read_source(source, path, outcome)
        store.save_all(batch)

        outcome.inserted = len(batch)
        outcome.state = SourceState.DONE
        logger.info(
            "seed_source_loaded",
            kind=source.kind,
            path=path,
            inserted=outcome.inserted,
            rejected=len(outcome.rejections),
        )
    except SeedingError as e:
        outcome.fail(str(e))
        logger.error(
            "seed_source_failed",
            kind=source.kind,
            path=path,
            error=str(e),
            error_type=type(e).__name__,
        )
    except Exception as e:
        outcome.fail(f"Unexpected: {e}")
        logger.exception(
            "seed_source_failed",
            kind=source.kind,
            path=path,
            error=str(e),
            error_type=type(e).__name__,
        )

    return outcome


def run_seeding_pipeline(
    config: SeedConfig,
    stores: Mapping[EntityKind, RecordStore],
    sources: Sequence[SourceSpec] = DEFAULT_SOURCES,
) -> SeedingSummary:
    """
    Seed every source, in order, into its store.

    Args:
        config: Seeding configuration
        stores: Entity kind → store
        sources: Sources to process (defaults to fauna, plants, parks)

    Returns:
        SeedingSummary with one outcome per source; empty when disabled
    """
    summary = SeedingSummary()
    if not config.enabled:
        logger.info("seeding_disabled")
        return summary

    logger.info("seeding_started", base_path=config.base_path, refresh=config.refresh)

    for source in sources:
        store = stores.get(source.kind)
        if store is None:
            outcome = SourceOutcome(kind=source.kind, path=source.resolve(config.base_path))
            outcome.fail(f"No store configured for {source.kind.value}")
            logger.error("seed_source_failed", kind=source.kind, error=outcome.error)
        else:
            outcome = seed_source(source, store, config)
        summary.outcomes[source.kind] = outcome

    logger.info(
        "seeding_completed",
        inserted=summary.inserted_by_kind(),
        failed=summary.failed_kinds(),
    )
    return summary


def seed_database(
    config: Optional[SeedConfig] = None,
    stores: Optional[Mapping[EntityKind, RecordStore]] = None,
) -> Optional[SeedingSummary]:
    """
    Startup entry point: resolve configuration and stores, then seed.

    Invalid configuration is logged once and treated as seeding disabled.

    Returns:
        SeedingSummary, or None if the configuration was invalid
    """
    if config is None:
        try:
            config = load_seed_config()
        except ConfigurationInvalidError as e:
            logger.error("seeding_configuration_invalid", error=str(e))
            return None

    if stores is None:
        stores = sqlalchemy_stores()

    return run_seeding_pipeline(config, stores)
