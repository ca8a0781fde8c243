"""
Builders package for keepdoc.

Provides the output sinks for converted notes:
- NotePdfWriter: Render the templated note to PDF with Pandoc
- NoteMdWriter: Save the note body as Markdown

All writers follow the interface defined by BaseWriter.
"""

from keepdoc.builders.base import BaseWriter
from keepdoc.builders.note_writers import NoteMdWriter, NotePdfWriter

__all__ = [
    "BaseWriter",
    "NotePdfWriter",
    "NoteMdWriter",
]
