"""Shared Typer setup for bahttext commands."""

from __future__ import annotations

from typing import Any

import typer

HELP_OPTION_NAMES = ("-h", "--help")

# Lets amounts such as -12.5 reach the command as values instead of options
NUMERIC_ARGS_SETTINGS = {"ignore_unknown_options": True}


def new_typer_app(**kwargs: Any) -> typer.Typer:
    """Create a Typer app with consistent help flag shortcuts."""
    context_settings = dict(kwargs.pop("context_settings", {}) or {})
    context_settings.setdefault("help_option_names", list(HELP_OPTION_NAMES))
    return typer.Typer(context_settings=context_settings, **kwargs)
