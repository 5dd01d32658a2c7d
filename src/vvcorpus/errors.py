"""
Error taxonomy for corpus tooling.

Every failure carries the offending file (when known) so the CLI can
report location context. Generic I/O failures are left as OSError.
"""

from pathlib import Path


class VvcorpusError(Exception):
    """Base class for all vvcorpus failures."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class ParseError(VvcorpusError):
    """Project file is not valid JSON."""


class SchemaError(VvcorpusError):
    """Project document lacks a required field or has the wrong shape."""


class UtteranceLookupError(VvcorpusError, LookupError):
    """An audioKeys identifier has no usable item in audioItems."""

    def __init__(self, key: str, message: str, path: Path | str | None = None) -> None:
        self.key = key
        super().__init__(message, path)


class EncodingError(VvcorpusError, ValueError):
    """Text cannot be decoded or encoded in the expected encoding."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        offset: int | None = None,
    ) -> None:
        self.offset = offset
        super().__init__(message, path)


class InvalidArgumentError(VvcorpusError, ValueError):
    """Degenerate input path, e.g. destination equals source."""
