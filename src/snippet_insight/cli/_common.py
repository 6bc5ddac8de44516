"""Shared CLI helpers."""

import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import EngineConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    language: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> EngineConfig:
    """Build an EngineConfig from CLI options."""
    overrides = {}
    if language is not None:
        overrides["language"] = language.lower()
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def read_source(path: str) -> str:
    """Read a snippet from a file, or from stdin when ``path`` is "-"."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")
