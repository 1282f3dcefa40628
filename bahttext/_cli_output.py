"""Console messages for bahttext commands.

Messages go to stderr so that stdout carries only the baht text.
"""

from __future__ import annotations

from typing import NoReturn

import typer


def warn(message: str, *, err: bool = True) -> None:
    """Print a warning message."""
    typer.secho(f"[warn] {message}", fg=typer.colors.YELLOW, err=err)


def error(message: str, *, err: bool = True) -> None:
    """Print an error message."""
    typer.secho(f"[error] {message}", fg=typer.colors.RED, err=err)


def fatal(message: str, *, code: int = 1, err: bool = True) -> NoReturn:
    """Print an error message and terminate the command."""
    error(message, err=err)
    raise typer.Exit(code=code)
