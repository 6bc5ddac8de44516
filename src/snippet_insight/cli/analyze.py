"""Analyze command: score one snippet from a file or stdin."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..api import analyze
from ..exceptions import SnippetInsightError
from ..formatters import FORMATTERS, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import err_console, read_source, resolve_config


@app.command("analyze")
def analyze_command(
    path: str = typer.Argument(
        "-",
        help="Source file to analyze, or '-' to read from stdin",
        show_default=True,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format",
        click_type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Skip detection and analyze as this language",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    fail_above: Optional[int] = typer.Option(
        None,
        "--fail-above",
        help="Exit 1 if the complexity score is higher than this",
        min=0,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Analyze a code snippet and report its structural complexity.

    [bold cyan]Examples:[/bold cyan]

      snippet-insight analyze app.js

      cat snippet.py | snippet-insight analyze -

      snippet-insight analyze main.cpp --format json

      snippet-insight analyze handler.js --fail-above 50
    """
    level = "verbose" if verbose else "quiet" if quiet else "normal"
    log_path = str(log_file) if log_file else None
    logger = setup_logging(level, log_file=log_path)

    try:
        engine_config = resolve_config(
            config=config, language=language, verbose=verbose, quiet=quiet
        )
        source = read_source(path)

    except SnippetInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        err_console.print(f"[red]Error:[/red] cannot read {path}: {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    # Config files and SNIPPET_VERBOSITY may raise or lower the level
    if engine_config.verbosity != level:
        setup_logging(engine_config.verbosity, log_file=log_path)

    result = analyze(source, config=engine_config)
    get_formatter(output_format.lower()).render(result)

    if fail_above is not None and result.score > fail_above:
        err_console.print(
            f"[red]--fail-above {fail_above}:[/red] score {result.score} ({result.rank.value})"
        )
        raise typer.Exit(1)
