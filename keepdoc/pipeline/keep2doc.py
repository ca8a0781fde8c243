#!/usr/bin/env python3
"""
keep2doc.py
-------------------
Convert exported notes (one JSON file per note) into PDF and Markdown.

    ./
    ├── keep/
    │   └── <note>.json
    ├── generated/
    │   ├── <slug>.pdf
    │   └── <slug>.md
    └── processed.txt

Each run loads the ledger, walks the note directory, converts every note
the ledger does not list yet, and rewrites the ledger. A note that fails at
any stage is reported and left out of the ledger so the next run retries
it; it never stops the batch.

Programmatic API:
    from keepdoc.pipeline.keep2doc import convert_notes

    stats = convert_notes(Path("keep"), Path("generated"), Path("processed.txt"))
    print(stats.notes_converted)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, List, Optional, Set

# --- Third party ---
import click

# --- Local imports ---
from keepdoc.builders.note_writers import PANDOC_ENGINE, NoteMdWriter, NotePdfWriter
from keepdoc.core.cli import ConversionStats
from keepdoc.core.logging_manager import KeepDocLogger, safe_logger
from keepdoc.core.paths import NOTE_PATTERN
from keepdoc.dataclasses.keep_note import KeepNote
from keepdoc.pipeline.ledger import ProcessedLedger
from keepdoc.utils.fs import find_note_files


# --- Conversion ---
def process_note(
    note_path: Path,
    pdf_writer: NotePdfWriter,
    md_writer: NoteMdWriter,
    fix_text: bool = False,
    logger: Optional[KeepDocLogger] = None,
) -> KeepNote:
    """
    Run one note through read → parse → template → PDF → Markdown.

    Args:
        note_path: Path to the note JSON file
        pdf_writer: Sink for the rendered document
        md_writer: Sink for the note body
        fix_text: Repair mojibake before parsing
        logger: Optional logger

    Returns:
        The parsed note

    Raises:
        NoteReadError, NoteParseError: If the file cannot be loaded
        PdfRenderError: If Pandoc fails
        NoteWriteError: If the Markdown file cannot be written
        KeyError, TypeError: If the note JSON lacks the expected shape
    """
    note = KeepNote.from_file(note_path, fix_text=fix_text)
    safe_logger(logger).log_debug(
        f"Parsed {note_path}", {"title": note.title, "filename": note.filename}
    )

    pdf_writer.write(note.filename, note.to_document())
    md_writer.write(note.filename, note.content)
    return note


def pending_notes(
    input_dir: Path,
    processed: Set[str],
    pattern: str = NOTE_PATTERN,
) -> List[Path]:
    """Note files in ``input_dir`` that the ledger does not list."""
    return [p for p in find_note_files(input_dir, pattern) if str(p) not in processed]


def convert_notes(
    input_dir: Path,
    output_dir: Path,
    ledger_path: Path,
    pattern: str = NOTE_PATTERN,
    pdf_engine: str = PANDOC_ENGINE,
    force: bool = False,
    dry_run: bool = False,
    fix_text: bool = False,
    logger: Optional[KeepDocLogger] = None,
) -> ConversionStats:
    """
    Convert every note not yet recorded in the ledger.

    Processing Flow:
    1. Load the ledger
    2. Enumerate note files (non-recursive)
    3. Per file: skip if recorded, otherwise convert; failures are echoed,
       logged and kept out of the ledger
    4. Save the ledger, whatever the outcome of individual notes

    Ledger and enumeration failures are not caught here: without them the
    run has nothing meaningful to do.

    Args:
        input_dir: Directory with note JSON files
        output_dir: Existing directory receiving PDF and Markdown files
        ledger_path: Ledger file location
        pattern: Glob for note files
        pdf_engine: Pandoc PDF engine
        force: Convert notes even if the ledger lists them
        dry_run: Report what would be converted; write nothing
        fix_text: Repair mojibake in titles and bodies
        logger: Optional logger

    Returns:
        ConversionStats; ``notes_converted`` is the count of notes converted
        successfully in this run

    Raises:
        LedgerError: If the ledger cannot be read or written
        FileNotFoundError: If ``input_dir`` does not exist
    """
    stats = ConversionStats()
    log = safe_logger(logger)

    ledger = ProcessedLedger(ledger_path, logger)
    processed = ledger.load()

    notes = find_note_files(input_dir, pattern)
    log.log_operation(
        "convert_notes_start",
        {
            "input": str(input_dir),
            "output": str(output_dir),
            "files_found": len(notes),
            "already_processed": len(processed),
            "force": force,
            "dry_run": dry_run,
        },
    )

    pdf_writer = NotePdfWriter(output_dir, pdf_engine=pdf_engine, logger=logger)
    md_writer = NoteMdWriter(output_dir, logger=logger)

    # slug -> note path written under it this run
    written: Dict[str, str] = {}

    for note_path in notes:
        npath = str(note_path)
        stats.files_processed += 1

        if npath in processed and not force:
            click.echo(f'>> Skipping "{npath}"...')
            stats.notes_skipped += 1
            continue

        if dry_run:
            click.echo(f'>> Would process "{npath}"...')
            continue

        click.echo(f'>> Processing "{npath}"...')
        try:
            note = process_note(note_path, pdf_writer, md_writer, fix_text, logger)
        except Exception as e:
            stats.errors += 1
            stats.failed.append(npath)
            click.echo(f'>> Error "{npath}"...\n\tMessage: "{e}"')
            log.log_error(e, {"operation": "process_note", "file": npath})
            continue

        if note.filename in written:
            log.log_warning(
                f"Slug collision: {npath} overwrote output of {written[note.filename]}",
                {"filename": note.filename},
            )
        written[note.filename] = npath

        processed.add(npath)
        stats.notes_converted += 1

    if dry_run:
        log.log_info("Dry run, ledger left untouched")
    else:
        ledger.save(processed)

    log.log_operation("convert_notes_complete", {"stats": stats.summary()})
    return stats
