"""
Note Conversion Commands
-------------------------

Commands for converting exported notes to PDF and Markdown.

Commands:
    - convert: Convert pending notes (json → pdf + md)
    - status: Show how many notes are converted and pending
"""
from __future__ import annotations

import json
import sys

import click
from pathlib import Path

from keepdoc.builders.note_writers import PANDOC_ENGINE
from keepdoc.core.cli_options import (
    dry_run_option,
    force_option,
    input_option,
    ledger_option,
    output_option,
)
from keepdoc.core.logging_manager import KeepDocLogger, handle_cli_error
from keepdoc.pipeline import keep2doc
from keepdoc.pipeline.ledger import ProcessedLedger
from keepdoc.utils.fs import find_note_files


@click.command()
@input_option
@output_option
@ledger_option
@click.option(
    "--pdf-engine",
    default=PANDOC_ENGINE,
    show_default=True,
    help="Pandoc PDF engine",
)
@force_option
@dry_run_option
@click.option("--fix-text", is_flag=True, help="Repair mojibake in note text with ftfy")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any note failed")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Format of the run summary",
)
@click.pass_context
def convert(
    ctx: click.Context,
    input: str,
    output: str,
    ledger: str,
    pdf_engine: str,
    force: bool,
    dry_run: bool,
    fix_text: bool,
    strict: bool,
    output_format: str,
) -> None:
    """
    Convert exported notes to PDF and Markdown.

    Notes already listed in the ledger are skipped. Notes that fail are
    reported and retried on the next run.
    """
    logger: KeepDocLogger = ctx.obj["logger"]
    output_dir = Path(output)

    try:
        if not dry_run:
            output_dir.mkdir(parents=True, exist_ok=True)

        stats = keep2doc.convert_notes(
            input_dir=Path(input),
            output_dir=output_dir,
            ledger_path=Path(ledger),
            pdf_engine=pdf_engine,
            force=force,
            dry_run=dry_run,
            fix_text=fix_text,
            logger=logger,
        )

        if output_format == "json":
            click.echo(json.dumps(stats.to_dict()))
        else:
            click.echo(f"Completed! Processed {stats.notes_converted} notes")
            if stats.notes_skipped:
                click.echo(f"  Skipped: {stats.notes_skipped}")
            if stats.errors:
                click.echo(f"  ⚠️  Errors: {stats.errors}")
            click.echo(f"  Duration: {stats.duration():.2f}s")

        if strict and stats.errors:
            sys.exit(1)

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "convert",
            additional_context={"input": input, "ledger": ledger},
        )


@click.command()
@input_option
@ledger_option
@click.pass_context
def status(ctx: click.Context, input: str, ledger: str) -> None:
    """Show converted and pending note counts."""
    logger: KeepDocLogger = ctx.obj["logger"]

    try:
        processed = ProcessedLedger(Path(ledger), logger).load()
        total = len(find_note_files(Path(input)))
        pending = keep2doc.pending_notes(Path(input), processed)

        click.echo(f"📁 Notes in {input}: {total}")
        click.echo(f"  Converted: {total - len(pending)}")
        click.echo(f"  Pending: {len(pending)}")
        for path in pending:
            click.echo(f"    {path}")

    except Exception as e:
        handle_cli_error(ctx, e, "status", additional_context={"input": input})


__all__ = ["convert", "status"]
