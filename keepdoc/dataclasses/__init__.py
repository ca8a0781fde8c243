"""
Data structures for keepdoc.

- KeepNote: an exported note with its fields extracted and normalised
"""

from keepdoc.dataclasses.keep_note import KeepNote

__all__ = ["KeepNote"]
