"""
Corpus preprocessing — Shift-JIS Aozora Bunko text to clean UTF-8.

Cleaning is an ordered list of named rules. Order matters: CRLF is
collapsed first so the line-anchored rules see plain LF endings.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from vvcorpus.config import (
    COLOPHON_MARKER,
    LEGACY_ENCODING,
    OUTPUT_ENCODING,
    RAW_SUFFIX,
    RUBY_BASE_MARKER,
)
from vvcorpus.errors import EncodingError, InvalidArgumentError

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────
# Cleaning rules
# ──────────────────────────────────────────────

# ［＃３字下げ］ and the rest of its line
_INDENT_DIRECTIVE_RE = re.compile(r"［＃[０-９]+字下げ］.+$", re.MULTILINE)

_BRACKET_ANNOTATION_RE = re.compile(r"［.+?］")

_RUBY_GLOSS_RE = re.compile(r"《.+?》")

# Greedy across the whole document, newlines included.
_HYPHEN_BLANK_BLOCK_RE = re.compile(r".+-\n\n", re.DOTALL)

_COLOPHON_RE = re.compile(re.escape(COLOPHON_MARKER) + r".+", re.DOTALL)


@dataclass(frozen=True)
class CleaningRule:
    """A named text → text step."""

    name: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


def _remover(pattern: re.Pattern[str]) -> Callable[[str], str]:
    return lambda text: pattern.sub("", text)


CLEANING_RULES: list[CleaningRule] = [
    CleaningRule("crlf", lambda text: text.replace("\r\n", "\n")),
    CleaningRule("indent_directive", _remover(_INDENT_DIRECTIVE_RE)),
    CleaningRule("ruby_base_marker", lambda text: text.replace(RUBY_BASE_MARKER, "")),
    CleaningRule("bracket_annotation", _remover(_BRACKET_ANNOTATION_RE)),
    CleaningRule("ruby_gloss", _remover(_RUBY_GLOSS_RE)),
    CleaningRule("hyphen_blank_block", _remover(_HYPHEN_BLANK_BLOCK_RE)),
    CleaningRule("colophon", _remover(_COLOPHON_RE)),
]


def clean_text(text: str, rules: list[CleaningRule] | None = None) -> str:
    """Apply every cleaning rule in order."""
    for rule in rules if rules is not None else CLEANING_RULES:
        before = len(text)
        text = rule(text)
        if len(text) != before:
            logger.debug("Rule %s removed %d chars", rule.name, before - len(text))
    return text


# ──────────────────────────────────────────────
# File handling
# ──────────────────────────────────────────────


def cleaned_destination(path: Path) -> Path:
    """
    Strip the trailing .raw suffix.

    Raises InvalidArgumentError if nothing would change, or if the
    result has no file name left.
    """
    source = str(path)
    destination = source[: -len(RAW_SUFFIX)] if source.endswith(RAW_SUFFIX) else source

    if destination == source:
        raise InvalidArgumentError("destination equals source", path)
    if Path(source).name == RAW_SUFFIX:
        raise InvalidArgumentError("destination has no file name", path)

    return Path(destination)


def decode_legacy(data: bytes, encoding: str = LEGACY_ENCODING, path: Path | None = None) -> str:
    """Decode raw corpus bytes, reporting the offset of bad sequences."""
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"invalid {encoding} byte sequence at offset {e.start}: {data[e.start:e.end]!r}",
            path,
            offset=e.start,
        ) from e


def preprocess(path: Path, encoding: str = LEGACY_ENCODING) -> Path:
    """
    Clean a raw corpus file and write it next to the source.

    Steps:
    1. Compute the destination by stripping .raw (guarded)
    2. Read bytes, decode from the legacy encoding
    3. Apply CLEANING_RULES in order
    4. Write UTF-8 bytes, overwriting any existing file

    Returns the destination path.
    """
    path = Path(path)
    destination = cleaned_destination(path)

    data = path.read_bytes()
    text = decode_legacy(data, encoding, path)
    cleaned = clean_text(text)

    destination.write_bytes(cleaned.encode(OUTPUT_ENCODING))

    logger.debug(
        "Cleaned %s: %d -> %d chars (%s)", path, len(text), len(cleaned), encoding
    )
    return destination
