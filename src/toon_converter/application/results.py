"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OutcomeStatus(str, Enum):
    """Per-entry conversion result."""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionOutcome:
    """Structured outcome of converting one directory entry."""

    status: OutcomeStatus
    source_name: str
    output_path: Path | None = None
    reason: str | None = None


@dataclass
class RunStats:
    """Run-level counters.

    ``processed`` counts entries that reached the conversion step, so
    ``processed == converted + failed`` and skipped entries are counted
    only in ``skipped``.
    """

    processed: int = 0
    converted: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, outcome: ConversionOutcome) -> None:
        """Fold one outcome into the counters."""
        if outcome.status is OutcomeStatus.SKIPPED:
            self.skipped += 1
            return
        self.processed += 1
        if outcome.status is OutcomeStatus.CONVERTED:
            self.converted += 1
        else:
            self.failed += 1


@dataclass(frozen=True)
class BatchResult:
    """Ordered outcomes of one batch run."""

    input_dir: Path
    output_dir: Path
    entries_found: int
    outcomes: tuple[ConversionOutcome, ...] = ()

    @property
    def failed(self) -> tuple[ConversionOutcome, ...]:
        """Outcomes that ended in failure."""
        return tuple(o for o in self.outcomes if o.status is OutcomeStatus.FAILED)
