#!/usr/bin/env python3
"""bahttext CLI entry point.

This aggregates the subcommands registered in bahttext.TOOL_COMMANDS using Typer.

Subcommands:
    - baht:    write amounts as Thai cheque wording (baht text)

Examples:
    py cli.py baht 100.25              # หนึ่งร้อยบาทยี่สิบห้าสตางค์
    py cli.py baht 21 1000000 0.5      # table of several amounts
    py cli.py baht -b 10000000680000.51
    py cli.py baht -12.5               # negative amounts
"""

from bahttext import TOOL_COMMANDS
from bahttext._cli_common import new_typer_app


# Root Typer app; expose -h/--help on all levels
app = new_typer_app()


@app.callback()
def main():
    """Thai baht text tools."""


# Register each tool under its command name
for tool in TOOL_COMMANDS:
    app.command(tool.name, context_settings=dict(tool.context_settings))(tool.callback)


if __name__ == '__main__':
    # Delegate to Typer's CLI runner
    app()
