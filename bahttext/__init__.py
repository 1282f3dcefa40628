"""bahttext package: Thai cheque wording for baht amounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from . import baht, converter
from ._cli_common import NUMERIC_ARGS_SETTINGS
from .converter import InvalidAmount, baht_text


@dataclass(frozen=True)
class ToolCommand:
    """Declarative CLI registration entry for a bahttext subcommand."""

    name: str
    callback: Callable[..., None]
    context_settings: Dict[str, Any] = field(default_factory=dict)


TOOL_COMMANDS: tuple[ToolCommand, ...] = (
    ToolCommand(name="baht", callback=baht.baht, context_settings=NUMERIC_ARGS_SETTINGS),
)


__all__ = [
    "baht",
    "converter",
    "baht_text",
    "InvalidAmount",
    "ToolCommand",
    "TOOL_COMMANDS",
]
