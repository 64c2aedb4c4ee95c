"""
Seeding Report

Per-source outcomes and the run-level summary returned by the pipeline.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from src.trailblazers.seeding.records import EntityKind


class SourceState(str, Enum):
    NOT_STARTED = "not_started"
    SKIPPED = "skipped"
    LOADING = "loading"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class RowRejection:
    """Diagnostic for one dropped row."""
    path: Path
    line_number: int
    column: str
    reason: str
    raw: str

    def to_dict(self) -> Dict:
        return {
            "path": str(self.path),
            "line": self.line_number,
            "column": self.column,
            "reason": self.reason,
            "raw": self.raw,
        }


@dataclass
class SourceOutcome:
    kind: EntityKind
    path: Path
    state: SourceState = SourceState.NOT_STARTED
    inserted: int = 0
    rejections: List[RowRejection] = field(default_factory=list)
    error: Optional[str] = None

    def fail(self, error: str):
        self.state = SourceState.FAILED
        self.inserted = 0
        self.error = error

    def to_dict(self) -> Dict:
        return {
            "kind": self.kind.value,
            "path": str(self.path),
            "state": self.state.value,
            "inserted": self.inserted,
            "rejected": len(self.rejections),
            "rejections": [r.to_dict() for r in self.rejections],
            "error": self.error,
        }


@dataclass
class SeedingSummary:
    """Result of one seeding run, one outcome per attempted source."""
    outcomes: Dict[EntityKind, SourceOutcome] = field(default_factory=dict)

    def inserted_by_kind(self) -> Dict[str, int]:
        return {kind.value: outcome.inserted for kind, outcome in self.outcomes.items()}

    @property
    def total_inserted(self) -> int:
        return sum(outcome.inserted for outcome in self.outcomes.values())

    def failed_kinds(self) -> List[EntityKind]:
        return [kind for kind, outcome in self.outcomes.items() if outcome.state is SourceState.FAILED]

    def to_dict(self) -> Dict:
        return {
            "total_inserted": self.total_inserted,
            "sources": {kind.value: outcome.to_dict() for kind, outcome in self.outcomes.items()},
        }
