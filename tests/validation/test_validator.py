"""Tests for per-family validation dispatch and the issue cap."""

import pytest

from snippet_insight.exceptions import UnsupportedLanguageError
from snippet_insight.validation.native import native_parse_issues
from snippet_insight.validation.validator import MAX_ERRORS, validate_syntax


class TestValidateSyntax:
    """validate_syntax picks a checker by language family."""

    def test_blank_text_has_no_issues(self):
        assert validate_syntax("   \n", "javascript") == ()

    def test_unknown_language_raises(self):
        with pytest.raises(UnsupportedLanguageError):
            validate_syntax("x", "cobol")

    def test_brace_family(self):
        issues = validate_syntax("function f(){ if(x){ ", "javascript")
        assert len(issues) == 1
        assert issues[0].message == "Unclosed '{'"
        assert issues[0].line == 1

    def test_markup_family(self):
        issues = validate_syntax("<div><span></div>", "html")
        assert [i.message for i in issues] == ["Mismatched closing tag </div>, expected </span>"]

    def test_css_uses_brace_checks(self):
        assert [i.message for i in validate_syntax("a { color: red;", "css")] == ["Unclosed '{'"]

    def test_returns_tuple(self):
        assert isinstance(validate_syntax("}", "java"), tuple)


class TestIssueCap:
    """At most MAX_ERRORS issues, in detection order."""

    def test_default_cap(self):
        issues = validate_syntax("}" * 8, "javascript")
        assert len(issues) == MAX_ERRORS == 5
        assert all(i.message == "Unexpected closing '}'" for i in issues)

    def test_lower_cap(self):
        assert len(validate_syntax("}" * 8, "cpp", max_errors=2)) == 2

    def test_cap_never_exceeds_five(self):
        assert len(validate_syntax("}" * 8, "javascript", max_errors=9)) == 5


class TestPythonValidation:
    """Colon checks plus the native parser."""

    def test_colon_line_not_reported_twice(self):
        """The parser's complaint about the same line is dropped."""
        issues = validate_syntax("if x > 1\n    pass\n", "python")
        assert [(i.message, i.line) for i in issues] == [("Expected ':' at end of 'if' line", 1)]

    def test_native_parser_issue(self):
        issues = validate_syntax("x = (1 +\n", "python")
        assert len(issues) == 1
        assert issues[0].message.startswith("SyntaxError: ")
        assert issues[0].line == 1

    def test_native_parse_can_be_disabled(self):
        assert validate_syntax("x = (1 +\n", "python", native_parse=False) == ()

    def test_valid_python(self, python_snippet):
        assert validate_syntax(python_snippet, "python") == ()

    def test_native_parse_never_executes(self, tmp_path):
        marker = tmp_path / "ran"
        source = f"open({str(marker)!r}, 'w').write('x')\n"
        assert native_parse_issues(source) == []
        assert not marker.exists()
