"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from linediff.config import Settings, load_config
from linediff.core.pipeline import render, run_diff, summary_line, write_lines
from linediff.errors import InternalDiffError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the configured log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:  # pydantic ValidationError is a ValueError
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def diff_cmd(
    org: Annotated[Path, typer.Argument(help="Original file")],
    rev: Annotated[Path, typer.Argument(help="Revised file")],
    context: Annotated[Optional[int], typer.Option("--context", "-U", help="Context lines around changes")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", "-f", help="unified, listing, numbered or json")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Input text encoding")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write output to this file")] = None,
    org_label: Annotated[Optional[str], typer.Option("--org-label", help="Name shown for the original")] = None,
    rev_label: Annotated[Optional[str], typer.Option("--rev-label", help="Name shown for the revision")] = None,
    ):
    """Compare two files line by line."""
    settings = _settings(overrides={"context": context, "output_format": fmt, "encoding": encoding})
    try:
        change_set = run_diff(org, rev, settings.encoding, org_label, rev_label)
        lines = render(change_set, settings.output_format, settings.context)
    except InternalDiffError:
        raise  # engine bug; never reported as a user error
    except (RuntimeError, ValueError) as e:
        _fail(str(e))

    if out:
        write_lines(out, lines)
        typer.echo(f"{summary_line(change_set)} -> {out}")
        return
    for line in lines:
        typer.echo(line)


def stat_cmd(
    org: Annotated[Path, typer.Argument(help="Original file")],
    rev: Annotated[Path, typer.Argument(help="Revised file")],
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Input text encoding")] = None,
    ):
    """Print added/deleted/unchanged line counts."""
    settings = _settings(overrides={"encoding": encoding})
    try:
        change_set = run_diff(org, rev, settings.encoding)
    except InternalDiffError:
        raise
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(summary_line(change_set))
