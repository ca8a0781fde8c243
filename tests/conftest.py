"""
conftest.py
-----------
Shared pytest fixtures for keepdoc tests.

Provides fixtures for:
- Temporary workspaces laid out like a takeout (keep/, generated/)
- Note file factories
- A Pandoc stand-in that writes a placeholder PDF
"""
import json

import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """
    Working directory with keep/ and generated/ subdirectories.

    The test runs from inside the workspace so relative paths behave the
    way they do for a real run.
    """
    (tmp_path / "keep").mkdir()
    (tmp_path / "generated").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ----- Note Fixtures -----

@pytest.fixture
def write_note():
    """Factory writing a note dict (or raw text) as JSON into a directory."""

    def _write(directory: Path, name: str, note=None, raw: str = None) -> Path:
        path = directory / name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(note), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_note():
    """A typical exported note with labels and a trailing source line."""
    return {
        "title": "Sourdough starter",
        "textContent": "Feed daily with equal parts flour and water.\n"
                       "Source: https://example.com/starter",
        "labels": [{"name": "Cooking"}, {"name": "Bread"}],
        "isTrashed": False,
    }


# ----- Renderer Fixtures -----

def _fake_convert_text(source, to, format=None, extra_args=(), outputfile=None, **kwargs):
    Path(outputfile).write_bytes(b"%PDF-1.4\n" + source.encode("utf-8"))
    return ""


@pytest.fixture
def fake_pandoc():
    """Patch Pandoc so PDFs are written without a TeX engine."""
    with patch(
        "keepdoc.builders.note_writers.convert_text",
        side_effect=_fake_convert_text,
    ) as mock_convert:
        yield mock_convert
