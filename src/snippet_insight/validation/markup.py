"""Stack-based tag matching for markup."""

from __future__ import annotations

import re

from ..models import ValidationIssue
from ..scanning.languages import CommentSyntax
from ..scanning.normalizer import normalize
from ..scanning.patterns import LineIndex

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Their bodies are not markup; scanning jumps straight to the closing tag.
RAW_TEXT_TAGS = frozenset({"script", "style"})

_COMMENTS_ONLY = CommentSyntax(line_comment=None, block_comment=("<!--", "-->"), quotes="")
_TAG = re.compile(r"<(/?)([A-Za-z][\w:\-]*)\b[^<>]*?(/?)>")


def check_markup(text: str) -> list[ValidationIssue]:
    """Report mismatched closing tags and tags left open at the end.

    A mismatched closing tag whose name is open further down the stack
    closes everything above it silently, so one stray tag is one issue.
    """
    masked = normalize(text, _COMMENTS_ONLY)
    lines = LineIndex(text)
    issues: list[ValidationIssue] = []
    stack: list[tuple[str, int]] = []
    pos = 0

    while True:
        match = _TAG.search(masked, pos)
        if match is None:
            break
        pos = match.end()
        name = match.group(2).lower()
        line = lines.line_of(match.start())

        if match.group(1):
            if not stack:
                issues.append(ValidationIssue(f"Unexpected closing tag </{name}>", line))
            elif stack[-1][0] == name:
                stack.pop()
            else:
                issues.append(
                    ValidationIssue(
                        f"Mismatched closing tag </{name}>, expected </{stack[-1][0]}>", line
                    )
                )
                open_names = [open_name for open_name, _ in stack]
                if name in open_names:
                    del stack[len(open_names) - 1 - open_names[::-1].index(name) :]
            continue

        if match.group(3) or name in VOID_TAGS:
            continue

        if name in RAW_TEXT_TAGS:
            close = re.compile(rf"</{name}\s*>", re.IGNORECASE).search(masked, pos)
            if close is None:
                stack.append((name, line))
                break
            pos = close.end()
            continue

        stack.append((name, line))

    if stack:
        names = ", ".join(f"<{open_name}>" for open_name, _ in stack)
        issues.append(ValidationIssue(f"Unclosed tag(s): {names}", stack[0][1]))

    return issues
