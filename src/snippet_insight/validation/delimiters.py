"""Delimiter balance for brace/paren/bracket languages."""

from __future__ import annotations

from ..models import ValidationIssue
from ..scanning.languages import C_STYLE, CommentSyntax
from ..scanning.normalizer import normalize
from ..scanning.patterns import LineIndex

DELIMITER_PAIRS: tuple[tuple[str, str], ...] = (("{", "}"), ("(", ")"), ("[", "]"))


def check_delimiters(text: str, syntax: CommentSyntax = C_STYLE) -> list[ValidationIssue]:
    """Three independent balance checks, one per delimiter pair.

    Each premature close is reported where it occurs. Leftover opens are
    reported once per pair, at the earliest one still unmatched. Delimiters
    inside comments and strings are ignored.
    """
    masked = normalize(text, syntax)
    lines = LineIndex(text)
    issues: list[ValidationIssue] = []

    for opener, closer in DELIMITER_PAIRS:
        opens: list[int] = []
        for i, ch in enumerate(masked):
            if ch == opener:
                opens.append(i)
            elif ch == closer:
                if opens:
                    opens.pop()
                else:
                    issues.append(ValidationIssue(f"Unexpected closing '{closer}'", lines.line_of(i)))
        if opens:
            issues.append(ValidationIssue(f"Unclosed '{opener}'", lines.line_of(opens[0])))

    return issues
