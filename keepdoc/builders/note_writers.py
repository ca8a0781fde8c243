#!/usr/bin/env python3
"""
note_writers.py
-------------------
Output sinks for converted notes.

Two writers, both keyed by the note's filename stem:
1. NotePdfWriter - Renders the templated Markdown document to PDF with Pandoc
2. NoteMdWriter - Saves the note body as a Markdown file

Usage:
    pdf_writer = NotePdfWriter(Path("generated"), pdf_engine="tectonic")
    md_writer = NoteMdWriter(Path("generated"))

    pdf_writer.write(note.filename, note.to_document())
    md_writer.write(note.filename, note.content)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Third party ---
from pypandoc import convert_text

from keepdoc.builders.base import BaseWriter
from keepdoc.core.exceptions import NoteWriteError, PdfRenderError
from keepdoc.core.logging_manager import KeepDocLogger


PANDOC_ENGINE = "tectonic"
"""Default Pandoc PDF engine (tectonic is a modern, self-contained LaTeX engine)."""

PANDOC_FORMAT = "markdown"
"""Pandoc input format for note documents."""


class NotePdfWriter(BaseWriter):
    """
    Render Markdown documents to PDF using Pandoc.

    pypandoc runs pandoc as a subprocess and waits for it without a
    timeout, so long renders are never cut short.

    Attributes:
        pdf_engine: Pandoc ``--pdf-engine`` value
        extra_args: Additional Pandoc arguments appended to every call
    """

    suffix = ".pdf"

    def __init__(
        self,
        output_dir: Path,
        pdf_engine: str = PANDOC_ENGINE,
        extra_args: Optional[List[str]] = None,
        logger: Optional[KeepDocLogger] = None,
    ):
        super().__init__(output_dir, logger)
        self.pdf_engine = pdf_engine
        self.extra_args = list(extra_args or [])

    def _pandoc_args(self) -> List[str]:
        return ["--pdf-engine", self.pdf_engine, *self.extra_args]

    def write(self, filename: str, content: str) -> Path:
        """
        Render ``content`` to ``{output_dir}/{filename}.pdf``.

        Raises:
            PdfRenderError: If Pandoc or the PDF engine fails
        """
        out_pdf = self.target(filename)
        self._log_debug(f"Running Pandoc: {filename} → {out_pdf}")

        try:
            convert_text(
                content,
                to="pdf",
                format=PANDOC_FORMAT,
                outputfile=str(out_pdf),
                extra_args=self._pandoc_args(),
            )
        except (OSError, RuntimeError) as e:
            raise PdfRenderError(f"Pandoc conversion failed: {out_pdf}: {e}") from e

        self._log_operation("pdf_created", {"file": str(out_pdf)})
        return out_pdf


class NoteMdWriter(BaseWriter):
    """Save note bodies as Markdown files, unrendered."""

    suffix = ".md"

    def write(self, filename: str, content: str) -> Path:
        """
        Write ``content`` to ``{output_dir}/{filename}.md``.

        Raises:
            NoteWriteError: If the file cannot be written
        """
        out_md = self.target(filename)
        try:
            out_md.write_text(content, encoding="utf-8")
        except OSError as e:
            raise NoteWriteError(f"Cannot write {out_md}: {e}") from e

        self._log_operation("md_created", {"file": str(out_md)})
        return out_md
