"""
Utility helpers for keepdoc.

- fs: note discovery and JSON loading
- slugify: title → filename stem
"""

from keepdoc.utils.fs import find_note_files, read_note_json
from keepdoc.utils.slugify import to_slug

__all__ = [
    "find_note_files",
    "read_note_json",
    "to_slug",
]
