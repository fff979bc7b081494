"""Run reporter: folds outcomes into stats and renders the summary."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from toon_converter.application.results import (
    BatchResult,
    ConversionOutcome,
    OutcomeStatus,
    RunStats,
)

Echo = Callable[..., None]

EXIT_OK = 0
EXIT_FAILURES = 1


def _display(path: Path, base: Path | None) -> str:
    if base is None:
        return str(path)
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


class RunReporter:
    """Collect per-file outcomes and report on the run.

    Parameters
    ----------
    echo : Callable[..., None]
        Output function with a ``typer.echo``-compatible signature.
    verbose : bool, default=False
        Also list skipped entries.
    base_dir : Path | None, default=None
        Paths are printed relative to this directory when possible.
    """

    def __init__(
        self,
        echo: Echo,
        verbose: bool = False,
        base_dir: Path | None = None,
    ) -> None:
        self.stats = RunStats()
        self._echo = echo
        self._verbose = verbose
        self._base_dir = base_dir

    def __call__(self, outcome: ConversionOutcome) -> None:
        self.record(outcome)

    def record(self, outcome: ConversionOutcome) -> None:
        """Fold one outcome into the stats and print its line.

        Failures are not printed here; the conversion use-case logs them.
        """
        self.stats.record(outcome)
        if outcome.status is OutcomeStatus.CONVERTED:
            target = (
                _display(outcome.output_path, self._base_dir)
                if outcome.output_path is not None
                else "?"
            )
            self._echo(f"   ✓ {outcome.source_name} → {target}")
        elif outcome.status is OutcomeStatus.SKIPPED and self._verbose:
            self._echo(f"   - {outcome.source_name} (skipped: {outcome.reason})")

    def start(self, input_dir: Path, output_dir: Path) -> None:
        """Print the run header."""
        self._echo("Starting batch JSON to TOON conversion...")
        if self._verbose:
            self._echo(f"   input:  {_display(input_dir, self._base_dir)}")
            self._echo(f"   output: {_display(output_dir, self._base_dir)}")

    def finish(self, result: BatchResult) -> int:
        """Print the summary and return the process exit code."""
        if result.entries_found == 0:
            self._echo(
                f"No files found in {_display(result.input_dir, self._base_dir)}."
            )
            self._echo("   Add .json files to the input directory and run again.")
            return EXIT_OK

        stats = self.stats
        self._echo("")
        self._echo("Conversion Summary:")
        self._echo(f"   Processed: {stats.processed}")
        self._echo(f"   Converted: {stats.converted}")
        self._echo(f"   Skipped:   {stats.skipped}")
        self._echo(f"   Failed:    {stats.failed}")

        if stats.converted == 0 and stats.failed == 0:
            self._echo(
                "Warning: no files were converted. Check that input files use "
                "the .json extension and are regular files, not directories.",
                err=True,
            )

        if stats.failed > 0:
            self._echo(f"{stats.failed} file(s) failed to convert.", err=True)
            return EXIT_FAILURES

        self._echo("Batch conversion complete!")
        return EXIT_OK
