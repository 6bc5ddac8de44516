"""Tests for output formatters."""

import json

import pytest

from snippet_insight import analyze
from snippet_insight.formatters import (
    FORMATTERS,
    JsonFormatter,
    QuietFormatter,
    RichFormatter,
    get_formatter,
)
from snippet_insight.models import AnalysisResult


class TestGetFormatter:
    @pytest.mark.parametrize(
        "name,cls", [("rich", RichFormatter), ("json", JsonFormatter), ("quiet", QuietFormatter)]
    )
    def test_known_names(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_registry_keyed_by_name(self):
        assert all(name == cls.name for name, cls in FORMATTERS.items())

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_render_writes_stdout(self, capsys, js_snippet):
        JsonFormatter().render(analyze(js_snippet))
        assert json.loads(capsys.readouterr().out)["language"] == "javascript"

    def test_matches_to_dict(self, js_snippet):
        result = analyze(js_snippet)
        data = json.loads(JsonFormatter().format(result))
        assert data == result.to_dict()
        assert data["rank"] == "Moderate"
        assert data["findings"][0] == {
            "category": "function",
            "label": "sumEven",
            "line": 2,
            "weight": 2,
        }


class TestQuietFormatter:
    def test_one_line(self, js_snippet):
        assert QuietFormatter().format(analyze(js_snippet)) == "javascript 24 Moderate"

    def test_empty_result(self):
        assert QuietFormatter().format(AnalysisResult()) == "javascript 0 No Input"


class TestRichFormatter:
    def test_empty_result_shows_placeholder(self):
        text = RichFormatter().format(AnalysisResult())
        assert "No data to display" in text
        assert "No syntax issues detected" in text
        assert "No Input" in text

    def test_findings_and_metrics(self, js_snippet):
        text = RichFormatter().format(analyze(js_snippet))
        assert "Metrics" in text
        assert "sumEven" in text
        assert "L4" in text
        assert "O(n)" in text
        assert "javascript" in text

    def test_errors_listed(self):
        text = RichFormatter().format(analyze("function f(){ if(x){ "))
        assert "1 syntax issue(s)" in text
        assert "line 1: Unclosed '{'" in text
