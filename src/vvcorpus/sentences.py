"""
Sentence splitting for cleaned corpus text.

Splits on the Japanese full stop and quotation brackets, the units the
cleaned corpus is read back in when checking a text front-end.
"""

import re
from pathlib import Path

from vvcorpus.config import OUTPUT_ENCODING, SENTENCE_DELIMITERS
from vvcorpus.errors import EncodingError

_DELIMITER_RE = re.compile(f"[{re.escape(SENTENCE_DELIMITERS)}]")

_WHITESPACE_RE = re.compile(r"\s+")


def split_sentences(text: str) -> list[str]:
    """
    Split text on 。「」 and drop all whitespace inside each sentence.

    Returns non-empty sentences in document order.
    """
    sentences = (_WHITESPACE_RE.sub("", s) for s in _DELIMITER_RE.split(text))
    return [s for s in sentences if s]


def read_sentences(path: Path) -> list[str]:
    """Read a cleaned UTF-8 corpus file and split it into sentences."""
    path = Path(path)
    try:
        text = path.read_bytes().decode(OUTPUT_ENCODING)
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"invalid {OUTPUT_ENCODING} byte sequence at offset {e.start}",
            path,
            offset=e.start,
        ) from e

    return split_sentences(text)
