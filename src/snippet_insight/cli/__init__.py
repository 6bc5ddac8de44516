"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="snippet-insight",
    help="Snippet Insight - Structural Complexity Analyzer for Code Snippets",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"snippet-insight {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Estimate the structural complexity of a code snippet."""


def main() -> None:
    app()


# Import subcommands to register them
from .analyze import analyze_command as _analyze  # noqa: F401, E402
from .languages import languages as _languages  # noqa: F401, E402
