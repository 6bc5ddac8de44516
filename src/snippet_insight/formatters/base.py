"""Formatter interface shared by every output style."""

from abc import ABC, abstractmethod
from typing import ClassVar

import typer

from ..models import AnalysisResult


class BaseFormatter(ABC):
    """Turns an AnalysisResult into text.

    Subclasses set ``name`` (the ``--format`` value) and implement
    ``format``. ``render`` writes that text to stdout; formatters that draw
    directly to a terminal override it.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return the result as a string."""

    def render(self, result: AnalysisResult) -> None:
        typer.echo(self.format(result))
