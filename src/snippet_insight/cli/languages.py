"""Languages command: list the detection table."""

import json

import typer
from rich.table import Table

from ..scanning.languages import DEFAULT_LANGUAGE, LANGUAGES
from . import app
from ._common import console


@app.command()
def languages(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    List supported languages in detection precedence order.

    When two languages tie on signature count, the one listed first wins.
    """
    if json_output:
        print(
            json.dumps(
                [
                    {
                        "name": profile.name,
                        "family": profile.family,
                        "nesting_mode": profile.nesting_mode,
                        "native_parser": profile.native_parser,
                        "default": profile.name == DEFAULT_LANGUAGE,
                    }
                    for profile in LANGUAGES.values()
                ],
                indent=2,
            )
        )
        return

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("#", justify="right")
    table.add_column("Language", min_width=12)
    table.add_column("Family")
    table.add_column("Nesting")
    table.add_column("Native parse")

    for position, profile in enumerate(LANGUAGES.values(), start=1):
        name = profile.name
        if name == DEFAULT_LANGUAGE:
            name = f"{name} [dim](default)[/dim]"
        table.add_row(
            str(position),
            name,
            profile.family,
            profile.nesting_mode,
            "yes" if profile.native_parser else "no",
        )

    console.print(table)
