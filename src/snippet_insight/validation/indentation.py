"""Block-colon checks for indentation languages."""

from __future__ import annotations

import re

from ..models import ValidationIssue
from ..scanning.languages import HASH_STYLE, CommentSyntax
from ..scanning.normalizer import normalize

_BLOCK_KEYWORD = re.compile(
    r"(?:async\s+)?(if|elif|else|for|while|def|class|try|except|finally|with)\b"
)


def check_block_colons(text: str, syntax: CommentSyntax = HASH_STYLE) -> list[ValidationIssue]:
    """Every block-opening line must end with ':'.

    A header that leaves brackets open continues on the following lines; the
    colon is expected at the end of its last line. Lines inside an open
    bracket (comprehension clauses, call arguments) are never headers.
    Issues point at the line the header starts on.
    """
    physical = normalize(text, syntax).split("\n")
    issues: list[ValidationIssue] = []
    depth = 0
    i = 0

    while i < len(physical):
        stripped = physical[i].strip()
        start = i
        i += 1

        if depth > 0:
            depth = max(0, depth + _open_brackets(stripped))
            continue

        match = _BLOCK_KEYWORD.match(stripped)
        if not match:
            depth = max(0, _open_brackets(stripped))
            continue

        header = stripped
        while _open_brackets(header) > 0 and i < len(physical):
            header = f"{header} {physical[i].strip()}".rstrip()
            i += 1

        if not header.endswith(":"):
            issues.append(
                ValidationIssue(f"Expected ':' at end of '{match.group(1)}' line", start + 1)
            )

    return issues


def _open_brackets(line: str) -> int:
    return sum(line.count(c) for c in "([{") - sum(line.count(c) for c in ")]}")
