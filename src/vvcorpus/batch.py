"""
Sequential batch runner shared by the CLI commands.

Files are processed strictly in the order given, one at a time. By
default the first failure propagates and stops the run; outputs already
written stay on disk. With keep_going, failures are collected instead.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Iterable

from vvcorpus.errors import VvcorpusError

logger = logging.getLogger(__name__)

Operation = Callable[[Path], Any]


class BatchResult:
    """Collects per-file outcomes of a batch run."""

    def __init__(self) -> None:
        self.succeeded: list[tuple[Path, Any]] = []
        self.failed: list[tuple[Path, Exception]] = []

    def success(self, source: Path, output: Any) -> None:
        self.succeeded.append((source, output))

    def fail(self, source: Path, error: Exception) -> None:
        self.failed.append((source, error))

    @property
    def ok(self) -> bool:
        return len(self.failed) == 0

    def summary(self) -> dict[str, Any]:
        return {
            "processed": len(self.succeeded),
            "failures": len(self.failed),
            "ok": self.ok,
            "details": {
                "processed": [str(s) for s, _ in self.succeeded],
                "failures": [(str(s), str(e)) for s, e in self.failed],
            },
        }


def run_batch(
    paths: Iterable[Path],
    operation: Operation,
    keep_going: bool = False,
    on_success: Callable[[Path, Any], None] | None = None,
) -> BatchResult:
    """
    Apply operation to each path in order.

    Args:
        paths: Input files, processed in the given order.
        operation: Maps a source path to its output, usually the
                   destination it wrote.
        keep_going: Record VvcorpusError / OSError failures and continue
                    instead of propagating the first one.
        on_success: Called with (source, output) after each file.

    Returns:
        BatchResult with every processed and failed file.
    """
    result = BatchResult()

    for path in paths:
        path = Path(path)
        try:
            output = operation(path)
        except (VvcorpusError, OSError) as e:
            if not keep_going:
                raise
            logger.error("Failed to process %s: %s", path, e)
            result.fail(path, e)
            continue

        result.success(path, output)
        if on_success:
            on_success(path, output)

    logger.debug(
        "Batch finished: %d processed, %d failed",
        len(result.succeeded), len(result.failed),
    )
    return result
