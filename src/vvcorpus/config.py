"""
Global configuration and constants.

All magic strings live here.
Pipeline code imports from config — never hardcodes.
"""

from typing import Final

# ──────────────────────────────────────────────
# File extensions
# ──────────────────────────────────────────────

PROJECT_SUFFIX: Final[str] = ".vvproj"
TRANSCRIPT_SUFFIX: Final[str] = ".txt"
RAW_SUFFIX: Final[str] = ".raw"

# ──────────────────────────────────────────────
# Encodings
# ──────────────────────────────────────────────

LEGACY_ENCODING: Final[str] = "shift_jis"
OUTPUT_ENCODING: Final[str] = "utf-8"
PROJECT_ENCODING: Final[str] = "utf-8"

# ──────────────────────────────────────────────
# Transcript
# ──────────────────────────────────────────────

TALK_KEY: Final[str] = "talk"
AUDIO_KEYS_FIELD: Final[str] = "audioKeys"
AUDIO_ITEMS_FIELD: Final[str] = "audioItems"

UTTERANCE_TERMINATOR: Final[str] = "。"
LINE_SEPARATOR: Final[str] = "\n"

# ──────────────────────────────────────────────
# Corpus annotations (Aozora Bunko notation)
# ──────────────────────────────────────────────

RUBY_BASE_MARKER: Final[str] = "｜"
COLOPHON_MARKER: Final[str] = "底本："

SENTENCE_DELIMITERS: Final[str] = "。「」"

# ──────────────────────────────────────────────
# Console
# ──────────────────────────────────────────────

PROGRESS_FORMAT: Final[str] = "{source} -> {destination}"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
