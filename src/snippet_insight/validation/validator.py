"""Per-family syntax validation with a capped issue list."""

from __future__ import annotations

from ..models import ValidationIssue
from ..scanning.languages import INDENT, MARKUP, get_language_profile
from .delimiters import check_delimiters
from .indentation import check_block_colons
from .markup import check_markup
from .native import native_parse_issues

MAX_ERRORS = 5


def validate_syntax(
    text: str,
    language: str,
    max_errors: int = MAX_ERRORS,
    native_parse: bool = True,
) -> tuple[ValidationIssue, ...]:
    """Likely structural defects of a snippet, in detection order.

    Args:
        text: Raw source text
        language: Detected language name (must be in the language table)
        max_errors: Cap on returned issues, never above MAX_ERRORS
        native_parse: Also try the native parser where one exists

    Returns:
        At most ``max_errors`` issues. The cap truncates; it is not a sample.

    Raises:
        UnsupportedLanguageError: If the language is not in the table
    """
    profile = get_language_profile(language)
    if not text.strip():
        return ()

    if profile.family == MARKUP:
        issues = check_markup(text)
    elif profile.family == INDENT:
        issues = check_block_colons(text, profile.comments)
        if native_parse and profile.native_parser:
            reported = {issue.line for issue in issues}
            for issue in native_parse_issues(text):
                if issue.line is None or issue.line not in reported:
                    issues.append(issue)
    else:
        issues = check_delimiters(text, profile.comments)

    limit = max(0, min(max_errors, MAX_ERRORS))
    return tuple(issues[:limit])
