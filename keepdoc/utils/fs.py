#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for note discovery and loading.

Functions:
    find_note_files: Enumerate exported note files in a directory
    read_note_json: Load one note file as a JSON object

Usage:
    from keepdoc.utils.fs import find_note_files, read_note_json

    for path in find_note_files(Path("keep")):
        raw = read_note_json(path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, List

# --- Local imports ---
from keepdoc.core.exceptions import NoteParseError, NoteReadError


def find_note_files(directory: Path, pattern: str = "*.json") -> List[Path]:
    """
    Find note files directly inside ``directory`` (non-recursive).

    Paths are returned joined onto ``directory`` as given, so a relative
    input directory yields relative paths (``keep/a.json``). Sorted by name
    for a stable processing order.

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    if not directory.exists():
        raise FileNotFoundError(f"Note directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def read_note_json(file_path: Path) -> Any:
    """
    Read and decode a note file.

    Args:
        file_path: Path to the exported note

    Returns:
        The decoded JSON value (a dict for well-formed notes)

    Raises:
        NoteReadError: If the file is missing, unreadable or not UTF-8
        NoteParseError: If the content is not valid JSON
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise NoteReadError(f"Cannot read note {file_path}: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise NoteParseError(f"Invalid JSON in {file_path}: {e}") from e
