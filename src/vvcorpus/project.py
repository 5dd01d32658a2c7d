"""
Project document model — load a .vvproj file and resolve its talk root.

Two schema generations exist:
- older files nest everything under "talk"
- newer files may place audioKeys / audioItems at the document root

Both are normalized into a single TalkRoot here, once, at load time.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from vvcorpus.config import (
    AUDIO_ITEMS_FIELD,
    AUDIO_KEYS_FIELD,
    PROJECT_ENCODING,
    TALK_KEY,
)
from vvcorpus.errors import ParseError, SchemaError, UtteranceLookupError

logger = logging.getLogger(__name__)


class AudioItem(BaseModel):
    """One utterance record. Only the text is needed here."""

    model_config = ConfigDict(extra="allow")

    text: str


class TalkRoot(BaseModel):
    """The record holding utterance order and utterance items."""

    model_config = ConfigDict(extra="allow")

    audio_keys: list[str] = Field(alias=AUDIO_KEYS_FIELD)
    # Items stay raw until looked up so a bad item is a lookup failure.
    audio_items: dict[str, Any] = Field(default_factory=dict, alias=AUDIO_ITEMS_FIELD)

    _source: Path | None = PrivateAttr(default=None)

    def text_of(self, key: str) -> str:
        """Resolve an identifier to its utterance text."""
        if key not in self.audio_items:
            raise UtteranceLookupError(
                key, f"audio item not found for key '{key}'", self._source
            )

        try:
            item = AudioItem.model_validate(self.audio_items[key])
        except ValidationError as e:
            raise UtteranceLookupError(
                key, f"audio item '{key}' has no text: {e.errors()[0]['msg']}", self._source
            ) from e

        return item.text

    def iter_texts(self) -> Iterator[str]:
        """Yield utterance texts lazily, in audioKeys order."""
        for key in self.audio_keys:
            yield self.text_of(key)


def parse_project_document(text: str, source: Path | None = None) -> dict[str, Any]:
    """Parse project file content into a JSON object."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}", source
        ) from e

    if not isinstance(document, dict):
        raise SchemaError(
            f"project document must be a JSON object, got {type(document).__name__}",
            source,
        )

    return document


def resolve_talk_root(document: dict[str, Any], source: Path | None = None) -> TalkRoot:
    """
    Pick the talk root and validate it.

    Uses document["talk"] when present and non-null, otherwise the
    document root itself.
    """
    talk = document.get(TALK_KEY)
    if talk is None:
        logger.debug("No '%s' object in %s, using document root", TALK_KEY, source)
        talk = document
    elif not isinstance(talk, dict):
        raise SchemaError(
            f"'{TALK_KEY}' must be an object, got {type(talk).__name__}", source
        )

    if AUDIO_KEYS_FIELD not in talk:
        raise SchemaError(f"talk root has no '{AUDIO_KEYS_FIELD}'", source)

    try:
        root = TalkRoot.model_validate(talk)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise SchemaError(f"invalid talk root at '{location}': {first['msg']}", source) from e

    root._source = source
    return root


def load_project(path: Path) -> TalkRoot:
    """Read a project file and return its normalized talk root."""
    try:
        text = path.read_bytes().decode(PROJECT_ENCODING)
    except UnicodeDecodeError as e:
        raise ParseError(f"invalid UTF-8 at offset {e.start}", path) from e

    root = resolve_talk_root(parse_project_document(text, path), path)

    logger.debug(
        "Loaded %s: %d keys, %d items",
        path, len(root.audio_keys), len(root.audio_items),
    )
    return root
