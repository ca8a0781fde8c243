#!/usr/bin/env python3
"""
keep_note.py
-------------------

Defines the KeepNote dataclass representing one exported note after its
fields have been extracted from the raw JSON.

Each KeepNote instance contains:
- title (from the note, or the file name)
- heading (True when the body already opens with a Markdown heading,
  otherwise the text to use as one)
- content (body with the ``Source:`` line stripped)
- source (URL from the body, the note's annotations, or "N/A")
- labels (comma-joined label names)
- filename (slug of the title)

It supports construction from a decoded note file and rendering to the
Markdown document that is handed to the PDF renderer.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import re
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

# ---- Third party ----
from ftfy import fix_text as ftfy_fix_text  # type: ignore

# ---- Local imports ----
from keepdoc.utils.fs import read_note_json
from keepdoc.utils.slugify import to_slug


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
SOURCE_PATTERN = re.compile(r"Source:\s+(?P<path>.*)", re.IGNORECASE)
"""
Trailing ``Source: <url>`` marker many notes carry.

Matches anywhere in the body, case-insensitively; the captured path runs to
the end of the line. Only the first occurrence is used.
"""

HEADING_PATTERN = re.compile(r"# (.*)")
"""Markdown heading marker looked for near the top of the body."""

HEADING_SCAN_LINES = 3
"""Number of leading body lines inspected for an existing heading."""

NO_SOURCE = "N/A"
"""Source value when neither the body nor the annotations provide one."""

RULE = "----"
"""Horizontal rule separating the body from the footer."""


# ----- Dataclass -----
@dataclass
class KeepNote:
    """
    Represents a single exported note, normalised for rendering.

    Attributes:
        title (str): Note title, falling back to the file name.
        heading (bool | str): ``True`` if the content supplies its own
            heading, otherwise the heading text to synthesise.
        content (str): Body text without the ``Source:`` line.
        source (str): Source URL(s) or ``"N/A"``.
        labels (str): Comma-joined label names, empty if none.
        filename (str): Filesystem-safe stem for the output files.
    """

    # ---- Attributes ----
    title: str
    heading: Union[bool, str]
    content: str
    source: str
    labels: str
    filename: str

    # ---- Public constructors ----
    @classmethod
    def from_raw(
        cls,
        path: Path,
        raw: Dict[str, Any],
        fix_text: bool = False,
    ) -> KeepNote:
        """
        Extract the note fields from a decoded note file.

        The steps run in a fixed order because later ones see the output of
        earlier ones: source stripping changes the lines heading detection
        looks at.

        Args:
            path: Path of the note file (used for the title fallback)
            raw: Decoded JSON of the note
            fix_text: Repair mojibake in title and body with ftfy

        Returns:
            KeepNote instance

        Raises:
            KeyError: If the note has no ``textContent``
        """
        content: str = raw["textContent"]
        title: Optional[str] = raw.get("title")

        if fix_text:
            content = ftfy_fix_text(content)
            if title:
                title = ftfy_fix_text(title)

        if not title:
            title = Path(path).stem
            logger.debug(f"No title in {path}, using file name '{title}'")

        content, source = cls._extract_source(content)
        if source is None:
            source = cls._annotation_source(raw)

        return cls(
            title=title,
            heading=cls._detect_heading(content, title),
            content=content,
            source=source,
            labels=cls._join_labels(raw),
            filename=to_slug(title),
        )

    @classmethod
    def from_file(cls, path: Path, fix_text: bool = False) -> KeepNote:
        """
        Read and parse a note file.

        Raises:
            NoteReadError: If the file cannot be read
            NoteParseError: If the file is not valid JSON
            KeyError: If the note has no ``textContent``
        """
        return cls.from_raw(path, read_note_json(path), fix_text=fix_text)

    # ---- Rendering ----
    def to_document(self) -> str:
        """
        Render the note as the Markdown document sent to the PDF renderer.

        Layout::

            # {heading}          (only when the body has no heading)

            {content}

            ----
            Source: {source}

            Labels: {labels}
        """
        doc = f"# {self.heading}\n\n" if self.heading is not True else ""
        doc += f"{self.content}\n\n{RULE}\nSource: {self.source}\n\nLabels: {self.labels}"
        return doc

    # ---- Field extraction ----
    @staticmethod
    def _extract_source(content: str) -> Tuple[str, Optional[str]]:
        """
        Pull the first ``Source: ...`` marker out of the body.

        Returns:
            (content without the marker, captured source) or
            (content unchanged, None) when there is no marker
        """
        match = SOURCE_PATTERN.search(content)
        if match is None:
            return content, None
        stripped = content[: match.start()] + content[match.end():]
        return stripped, match.group("path")

    @staticmethod
    def _annotation_source(raw: Dict[str, Any]) -> str:
        """Join annotation URLs, or fall back to ``NO_SOURCE``."""
        if "annotations" not in raw:
            return NO_SOURCE
        return ", ".join(a["url"] for a in raw["annotations"])

    @staticmethod
    def _detect_heading(content: str, title: str) -> Union[bool, str]:
        """``True`` if a heading appears in the first lines, else the title."""
        head = ",".join(content.split("\n")[:HEADING_SCAN_LINES])
        return True if HEADING_PATTERN.search(head) else title

    @staticmethod
    def _join_labels(raw: Dict[str, Any]) -> str:
        return ", ".join(label["name"] for label in raw.get("labels") or [])
