from typing import List

import typer
from rich import print
from rich.table import Table

from bahttext._cli_common import NUMERIC_ARGS_SETTINGS, new_typer_app
from bahttext._cli_output import fatal, warn
from bahttext.converter import (
    BAHT,
    NEGATIVE,
    SATANG,
    InvalidAmount,
    baht_text,
    group_to_text,
    satang_text,
    split_amount,
    split_into_groups,
)


# User can access help message with shortcut -h
app = new_typer_app()


@app.command(context_settings=NUMERIC_ARGS_SETTINGS)
def baht(
    amounts: List[float] = typer.Argument(..., help="Amount(s) in baht, satang as two decimals (e.g. 100.25). Negatives such as -12.5 are accepted."),
    table: bool = typer.Option(False, "-t", "--table", help="Show amounts and wording as a table"),
    breakdown: bool = typer.Option(False, "-b", "--breakdown", help="Show how each 6-digit group is read"),
):
    """CLI: write amounts the way they appear on a Thai cheque.

    Contract:
    - Input: one or more numbers (baht; fractional part is satang).
    - Output: one line of Thai words per amount, e.g. หนึ่งร้อยบาทยี่สิบห้าสตางค์
      With several amounts or --table, a table of amount and wording.
    - Error: NaN or infinity -> [error] on stderr, exit code 1.
    """
    rows = []
    for amount in amounts:
        try:
            rows.append((amount, baht_text(amount)))
        except InvalidAmount as exc:
            fatal(str(exc))
        if round(amount, 2) != amount:
            negative, integer_digits, satang = split_amount(amount)
            sign = "-" if negative else ""
            warn(f"{amount!r} has more than two decimals, read as {sign}{integer_digits}.{satang}")

    if table or len(rows) > 1:
        print(_amounts_table(rows))
    else:
        typer.echo(rows[0][1])

    if breakdown:
        for amount, _ in rows:
            print(_breakdown_table(amount))


# --- Rendering helpers -----------------------------------------------------


def _format_amount(amount: float) -> str:
    # Same rounding as the wording, so 1.005 shows as 1.01
    negative, integer_digits, satang = split_amount(amount)
    return f"{'-' if negative else ''}{int(integer_digits):,}.{satang}"


def _amounts_table(rows) -> Table:
    out = Table(show_header=True, header_style="bold")
    out.add_column("Amount", justify="right", style="cyan")
    out.add_column("Baht text")
    for amount, text in rows:
        out.add_row(_format_amount(amount), text)
    return out


def _breakdown_table(amount: float) -> Table:
    """One row per reading step: sign, each million group, then satang."""
    negative, integer_digits, satang = split_amount(amount)

    out = Table(title=_format_amount(amount), show_header=True, header_style="bold")
    out.add_column("Part")
    out.add_column("Digits", justify="right", style="cyan")
    out.add_column("Reading")

    if negative:
        out.add_row("sign", "-", NEGATIVE)
    groups = split_into_groups(integer_digits)
    for index, group in enumerate(groups):
        # Count of ล้าน that follow this group
        millions = len(groups) - index - 1
        out.add_row(f"group x10^{6 * millions}", group, group_to_text(group) or "-")
    out.add_row("unit", "", BAHT)
    out.add_row("satang", satang, (satang_text(satang) + SATANG) if satang != "00" else "-")
    return out


# Entry point for running the script directly
if __name__ == '__main__':
    app()
