"""
Transcript extraction — turn a .vvproj project into a plain-text script.

One utterance per line, each terminated with "。", in audioKeys order.
"""

import logging
from pathlib import Path

from vvcorpus.config import (
    LINE_SEPARATOR,
    OUTPUT_ENCODING,
    PROJECT_SUFFIX,
    TRANSCRIPT_SUFFIX,
    UTTERANCE_TERMINATOR,
)
from vvcorpus.errors import EncodingError, InvalidArgumentError
from vvcorpus.project import TalkRoot, load_project

logger = logging.getLogger(__name__)


def transcript_destination(path: Path) -> Path:
    """
    Replace the trailing .vvproj suffix with .txt.

    Raises InvalidArgumentError when the path has no .vvproj suffix,
    since the destination would then equal the source.
    """
    source = str(path)
    if not source.endswith(PROJECT_SUFFIX):
        raise InvalidArgumentError(
            f"destination equals source (expected a '{PROJECT_SUFFIX}' file)", path
        )

    return Path(source[: -len(PROJECT_SUFFIX)] + TRANSCRIPT_SUFFIX)


def build_transcript(talk: TalkRoot) -> str:
    """Join utterance texts, each with the terminator, one per line."""
    return LINE_SEPARATOR.join(
        f"{text}{UTTERANCE_TERMINATOR}" for text in talk.iter_texts()
    )


def extract(path: Path) -> Path:
    """
    Write the transcript of a project file next to it.

    Steps:
    1. Compute the .txt destination (guarded)
    2. Load and normalize the project document
    3. Build the transcript in utterance order
    4. Write UTF-8, overwriting any existing file

    Returns the destination path.
    """
    path = Path(path)
    destination = transcript_destination(path)

    talk = load_project(path)
    transcript = build_transcript(talk)

    # Destination is only written once encoding succeeds.
    try:
        data = transcript.encode(OUTPUT_ENCODING)
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"utterance text cannot be encoded as {OUTPUT_ENCODING}: {e.reason}",
            path,
            offset=e.start,
        ) from e

    destination.write_bytes(data)

    logger.debug("Wrote %d utterances to %s", len(talk.audio_keys), destination)
    return destination
