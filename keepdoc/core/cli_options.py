#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from keepdoc.core.cli_options import input_option, ledger_option

    @cli.command()
    @input_option
    @ledger_option
    def my_command(input, ledger):
        pass
"""
import click
from keepdoc.core.paths import GENERATED_DIR, KEEP_DIR, LEDGER_PATH, LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show tracebacks for CLI errors"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    show_default=True,
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# FILE OPERATION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

input_option = click.option(
    "-i", "--input",
    type=click.Path(),
    default=str(KEEP_DIR),
    show_default=True,
    help="Directory with exported note JSON files"
)

output_option = click.option(
    "-o", "--output",
    type=click.Path(),
    default=str(GENERATED_DIR),
    show_default=True,
    help="Output directory for PDF and Markdown files"
)

ledger_option = click.option(
    "--ledger",
    type=click.Path(),
    default=str(LEDGER_PATH),
    show_default=True,
    help="File listing already converted notes"
)

force_option = click.option(
    "-f", "--force",
    is_flag=True,
    help="Convert notes even if the ledger lists them"
)

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Preview conversions without writing files or the ledger"
)
