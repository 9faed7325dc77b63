"""Command line interface for attachment-sizer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from attachment_sizer.config import AppConfig
from attachment_sizer.errors import AttachmentSizerError
from attachment_sizer.report.ranker import process_attachments

# sysexits.h EX_DATAERR; os.EX_DATAERR is unavailable on Windows.
EXIT_DATA_ERROR = 65

err_console = Console(stderr=True)
app = typer.Typer(help="attachment-sizer - list GitHub archive attachments, largest first")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def main(
    working_dir: Optional[Path] = typer.Argument(
        None, help="Directory of the extracted archive (defaults to the current directory)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print every attachment with its pull request, issue or comment, largest first."""
    _setup_logging(verbose)
    config = AppConfig(working_dir=working_dir if working_dir is not None else Path("."))

    try:
        lines = process_attachments(config)
    except AttachmentSizerError as exc:
        err_console.print(f"Error: {exc}", style="bold red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=EXIT_DATA_ERROR) from exc

    for line in lines:
        typer.echo(line)
