"""Output formatters for Snippet Insight.

Each formatter is registered under its ``name``, which is also the value
accepted by ``snippet-insight analyze --format``.
"""

from typing import Dict, Type

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .quiet_formatter import QuietFormatter
from .rich_formatter import RichFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    cls.name: cls for cls in (RichFormatter, JsonFormatter, QuietFormatter)
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered as ``name``.

    Raises:
        ValueError: If name is not recognized
    """
    try:
        cls = FORMATTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}"
        ) from None
    return cls()


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "QuietFormatter",
    "FORMATTERS",
    "get_formatter",
]
