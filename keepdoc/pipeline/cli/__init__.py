"""
keepdoc CLI
-----------

Command-line interface for converting exported notes.

Commands:
    - convert: Convert pending notes to PDF and Markdown
    - status: Show converted/pending counts

Usage:
    keepdoc convert
    keepdoc convert -i takeout/Keep -o out --strict
    keepdoc status
"""
from __future__ import annotations

import click
from pathlib import Path

from keepdoc.core.cli import setup_logger
from keepdoc.core.cli_options import log_dir_option, verbose_option


@click.group()
@log_dir_option
@verbose_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Convert exported notes to PDF and Markdown"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "keepdoc")


# Import and register commands from submodules
from .convert import convert, status

cli.add_command(convert)
cli.add_command(status)


if __name__ == "__main__":
    cli(obj={})
