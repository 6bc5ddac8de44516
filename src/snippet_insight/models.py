"""Result models produced by the analysis engine.

All records are frozen: one call to ``analyze()`` builds one
``AnalysisResult`` and nothing mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Category(Enum):
    """Kind of structural construct a finding describes."""

    FUNCTION = "function"
    CONDITIONAL = "conditional"
    LOOP = "loop"


class Rank(Enum):
    """Discrete complexity category derived from the numeric score."""

    NO_INPUT = "No Input"
    SIMPLE = "Simple"
    MODERATE = "Moderate"
    HIGH = "High"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class Finding:
    """One detected construct.

    Attributes:
        category: Function, Conditional or Loop
        label: Captured identifier/clause, or the rule name
        line: 1-indexed line in the source text
        weight: Fixed weight of the matching rule
        offset: Character offset of the match start
    """

    category: Category
    label: str
    line: int
    weight: int
    offset: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "label": self.label,
            "line": self.line,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class ValidationIssue:
    """A likely structural defect. ``line`` is None when it cannot be resolved."""

    message: str
    line: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "line": self.line}


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the engine knows about one snippet."""

    line_count: int = 0
    function_count: int = 0
    conditional_count: int = 0
    loop_count: int = 0
    max_nesting_depth: int = 0
    max_loop_depth: int = 0
    score: int = 0
    rank: Rank = Rank.NO_INPUT
    findings: tuple[Finding, ...] = field(default_factory=tuple)
    language: str = "javascript"
    errors: tuple[ValidationIssue, ...] = field(default_factory=tuple)
    time_complexity: str = "O(1)"
    space_complexity: str = "O(1)"

    @property
    def is_clean(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-safe dict."""
        return {
            "language": self.language,
            "line_count": self.line_count,
            "function_count": self.function_count,
            "conditional_count": self.conditional_count,
            "loop_count": self.loop_count,
            "max_nesting_depth": self.max_nesting_depth,
            "max_loop_depth": self.max_loop_depth,
            "score": self.score,
            "rank": self.rank.value,
            "time_complexity": self.time_complexity,
            "space_complexity": self.space_complexity,
            "findings": [f.to_dict() for f in self.findings],
            "errors": [e.to_dict() for e in self.errors],
        }
