"""Construct scanner: a single pass per rule over normalized text.

Behavior is driven entirely by the rule table in rules.py.
"""

from __future__ import annotations

import re
from operator import attrgetter
from typing import Iterable, Optional

from ..logging_config import get_logger
from ..models import Category, Finding
from .patterns import LineIndex, compile_pattern
from .rules import CONSTRUCT_RULES, ConstructRule

logger = get_logger(__name__)


def scan_constructs(
    normalized: str,
    raw: Optional[str] = None,
    rules: Iterable[ConstructRule] = CONSTRUCT_RULES,
) -> list[Finding]:
    """Find functions, conditionals and loops.

    Args:
        normalized: Comment/string-masked text to match against
        raw: Unmasked text for line lookups (same length as normalized)
        rules: Ordered rule table

    Returns:
        Findings in discovery order (rule by rule, left to right). Function
        rules share one set of claimed offsets, so two variants matching the
        same construct at the same start yield one finding.
    """
    lines = LineIndex(normalized if raw is None else raw)
    findings: list[Finding] = []
    function_offsets: set[int] = set()

    for rule in rules:
        pattern = compile_pattern(rule.pattern, rule.flags)
        if pattern is None:
            continue

        for match in pattern.finditer(normalized):
            start = match.start()
            if rule.category is Category.FUNCTION:
                if start in function_offsets:
                    continue
                function_offsets.add(start)

            findings.append(
                Finding(
                    category=rule.category,
                    label=_label_for(rule, match),
                    line=lines.line_of(start),
                    weight=rule.weight,
                    offset=start,
                )
            )

    logger.debug(f"Scanned {len(findings)} constructs")
    return findings


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Order by line; sorted() is stable so same-line findings keep discovery order."""
    return sorted(findings, key=attrgetter("line"))


def count_by_category(findings: Iterable[Finding]) -> dict[Category, int]:
    counts = {category: 0 for category in Category}
    for finding in findings:
        counts[finding.category] += 1
    return counts


def _label_for(rule: ConstructRule, match: re.Match[str]) -> str:
    captured = match.group(1) if match.re.groups else None
    if captured is None:
        return rule.name
    captured = captured.strip()
    if not captured:
        return rule.name
    if rule.label_format:
        return rule.label_format.format(captured)
    return captured
