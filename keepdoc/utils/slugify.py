#!/usr/bin/env python3
"""
slugify.py
----------
Turn note titles into filesystem-safe filename stems.

The rules are deliberately narrow so output names stay recognisable:
    - Drop every character that is not an ASCII letter, digit,
      underscore or space
    - Collapse each run of whitespace into a single underscore

No lowercasing, no length limit and no collision handling: two titles that
reduce to the same slug share an output file.

Usage:
    from keepdoc.utils.slugify import to_slug

    to_slug("Recipe: Pão de Queijo!")  # "Recipe_Po_de_Queijo"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re


_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_ ]")
_WHITESPACE_RUN = re.compile(r"\s+")


def to_slug(title: str) -> str:
    """
    Convert a note title to a filename stem.

    Args:
        title: Arbitrary title text

    Returns:
        String containing only ``[A-Za-z0-9_]``

    Examples:
        >>> to_slug("Shopping list")
        'Shopping_list'
        >>> to_slug("  Trip   to Lisbon (2019) ")
        '_Trip_to_Lisbon_2019_'
        >>> to_slug("!!!")
        ''
    """
    text = _UNSAFE_CHARS.sub("", title)
    return _WHITESPACE_RUN.sub("_", text)
