#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the keepdoc project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in each pipeline stage.

Exception Hierarchy:
    Exception (built-in)
    └── KeepDocError - Base for all keepdoc errors
        ├── NoteReadError - Note file missing or unreadable
        ├── NoteParseError - Note file is not valid JSON
        ├── PdfRenderError - Pandoc failed to render a PDF
        ├── NoteWriteError - Markdown output could not be written
        └── LedgerError - Processed ledger could not be loaded or saved

Usage:
    from keepdoc.core.exceptions import NoteParseError, PdfRenderError

    try:
        raw = read_note_json(path)
    except NoteParseError as e:
        logger.log_error(e, {"file": str(path)})
"""


class KeepDocError(Exception):
    """
    Base exception for keepdoc errors.

    Catch this to handle any failure raised deliberately by the pipeline,
    or catch specific subclasses for more granular error handling.

    See Also:
        NoteReadError, NoteParseError, PdfRenderError, NoteWriteError,
        LedgerError
    """

    pass


class NoteReadError(KeepDocError):
    """
    Exception for note files that cannot be read.

    Raised when:
    - The note file does not exist
    - Permission is denied
    - The file is not valid UTF-8

    Examples:
        >>> raise NoteReadError("Cannot read note keep/a.json: No such file")
    """

    pass


class NoteParseError(KeepDocError):
    """
    Exception for note files that are not valid JSON.

    Examples:
        >>> raise NoteParseError("Invalid JSON in keep/a.json: line 1 column 2")
    """

    pass


class PdfRenderError(KeepDocError):
    """
    Exception for PDF rendering failures.

    Raised when pandoc (through pypandoc) fails to produce a PDF:
    - pandoc or the PDF engine is not installed
    - LaTeX errors on unusual Markdown
    - Destination not writable

    Pipeline Stage: note → pdf

    Examples:
        >>> raise PdfRenderError("Pandoc conversion failed: generated/a.pdf")
    """

    pass


class NoteWriteError(KeepDocError):
    """
    Exception for Markdown output write failures.

    Pipeline Stage: note → md

    Examples:
        >>> raise NoteWriteError("Cannot write generated/a.md: disk full")
    """

    pass


class LedgerError(KeepDocError):
    """
    Exception for processed-ledger failures.

    Unlike per-note errors, these end the run: without a readable ledger
    the skip decisions are meaningless, and without a saved ledger the
    run's progress is lost.

    Examples:
        >>> raise LedgerError("Cannot write processed.txt: permission denied")
    """

    pass
