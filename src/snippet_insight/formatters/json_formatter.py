"""JSON output: the result's ``to_dict()`` form, pretty-printed."""

import json

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    name = "json"

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
