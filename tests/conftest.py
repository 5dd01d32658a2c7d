"""Shared test fixtures for vvcorpus."""

import sys
import json
import pytest
from pathlib import Path

# Fix ModuleNotFoundError when running locally without editable install
sys.path.insert(0, str(Path(__file__).parents[1] / "src"))


@pytest.fixture
def talk_document() -> dict:
    """A project document in the nested 'talk' schema."""
    return {
        "appVersion": "0.14.0",
        "talk": {
            "audioKeys": ["a", "b"],
            "audioItems": {
                "a": {"text": "Hello", "voice": {"speakerId": "x"}},
                "b": {"text": "World"},
            },
        },
    }


@pytest.fixture
def write_project(tmp_path: Path):
    """Write a document to <tmp>/<name>.vvproj and return its path."""

    def _write(document, name: str = "project") -> Path:
        path = tmp_path / f"{name}.vvproj"
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_raw(tmp_path: Path):
    """Write text as Shift-JIS bytes to <tmp>/<name>.raw and return its path."""

    def _write(text: str, name: str = "corpus.txt") -> Path:
        path = tmp_path / f"{name}.raw"
        path.write_bytes(text.encode("shift_jis"))
        return path

    return _write
