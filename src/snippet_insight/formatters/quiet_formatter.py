"""Quiet formatter: one summary line."""

from ..models import AnalysisResult
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """``<language> <score> <rank>``, for shell pipelines."""

    name = "quiet"

    def format(self, result: AnalysisResult) -> str:
        return f"{result.language} {result.score} {result.rank.value}"
