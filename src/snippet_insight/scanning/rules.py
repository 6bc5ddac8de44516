"""Construct rules: which patterns count as functions, conditionals and loops.

The table is data. Order matters twice: function rules are deduplicated by
match start (the first rule to record an offset keeps it), and findings on
the same line keep the order in which rules discovered them.
"""

import re as _re
from dataclasses import dataclass
from typing import Optional

from ..models import Category

FUNCTION_WEIGHT = 2
CONDITIONAL_WEIGHT = 3
LOOP_WEIGHT = 3


@dataclass(frozen=True)
class ConstructRule:
    """One pattern in the construct table.

    Group 1, when it participates in a match, becomes the finding label
    (through ``label_format`` if set). Otherwise the rule name is used.
    """

    name: str
    pattern: str
    category: Category
    weight: int
    flags: int = 0
    label_format: Optional[str] = None


# Control keywords that look like calls followed by a block.
_NOT_A_METHOD = (
    r"(?!(?:if|for|while|switch|catch|with|return|function|else|do|try|new|typeof|sizeof)\b)"
)
_ASSIGNED_TO = r"(?:([\w$]+)\s*[:=]\s*)"
_ARROW_PARAMS = r"(?:\([^()]*\)|[\w$]+)\s*=>"
# Rest of a colon-block header up to its first colon outside brackets, so
# one-line bodies (`if x: return y`) and CRLF line ends both match.
_HEADER_TO_COLON = (
    r"(?:[^\n:()\[\]{}]"
    r"|\((?:[^()\n]|\([^()\n]*\))*\)"
    r"|\[(?:[^\[\]\n]|\[[^\[\]\n]*\])*\]"
    r"|\{[^{}\n]*\})*:"
)

FUNCTION_RULES: tuple[ConstructRule, ...] = (
    ConstructRule(
        name="Function",
        pattern=r"\bfunction\s*\*?\s*([\w$]+)\s*\(",
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
    ConstructRule(
        name="Function (Assigned)",
        pattern=_ASSIGNED_TO + r"function\b\s*\*?\s*[\w$]*\s*\(",
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
    # Starts at the assigned name when there is one, so it collapses onto
    # the rule above instead of adding a second finding.
    ConstructRule(
        name="Function (Anon)",
        pattern=_ASSIGNED_TO + r"?\bfunction\s*\*?\s*\(",
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
    ConstructRule(
        name="Arrow Function",
        pattern=_ASSIGNED_TO + r"(?:async\s*)?" + _ARROW_PARAMS,
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
    ConstructRule(
        name="Arrow Function (Anon)",
        pattern=_ASSIGNED_TO + r"?(?:\basync\s*)?" + _ARROW_PARAMS,
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
    ConstructRule(
        name="Function (def)",
        pattern=r"\bdef\s+(\w+)\s*\(",
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
    # The optional keyword prefix makes `function name(...) {` start at the
    # same offset as the named-function rule.
    ConstructRule(
        name="Method",
        pattern=r"(?:\bfunction\s*\*?\s*)?" + _NOT_A_METHOD + r"\b([\w$]+)\s*\([^()]*\)\s*\{",
        category=Category.FUNCTION,
        weight=FUNCTION_WEIGHT,
    ),
)

CONDITIONAL_RULES: tuple[ConstructRule, ...] = (
    ConstructRule(
        name="if",
        pattern=r"\bif\s*\(",
        category=Category.CONDITIONAL,
        weight=CONDITIONAL_WEIGHT,
    ),
    ConstructRule(
        name="if",
        pattern=r"^[ \t]*(elif\b|if\b(?![ \t]*\())" + _HEADER_TO_COLON,
        category=Category.CONDITIONAL,
        weight=CONDITIONAL_WEIGHT,
        flags=_re.MULTILINE,
    ),
    ConstructRule(
        name="else",
        pattern=r"\belse\b",
        category=Category.CONDITIONAL,
        weight=CONDITIONAL_WEIGHT,
    ),
    ConstructRule(
        name="switch",
        pattern=r"\bswitch\s*\(",
        category=Category.CONDITIONAL,
        weight=CONDITIONAL_WEIGHT,
    ),
    ConstructRule(
        name="case",
        pattern=r"\bcase\s+([^:\n]+):",
        category=Category.CONDITIONAL,
        weight=CONDITIONAL_WEIGHT,
        label_format="case {}",
    ),
    ConstructRule(
        name="ternary (?)",
        pattern=r"(?<!\?)\?(?![.?])",
        category=Category.CONDITIONAL,
        weight=CONDITIONAL_WEIGHT,
    ),
)

LOOP_RULES: tuple[ConstructRule, ...] = (
    ConstructRule(
        name="for",
        pattern=r"\bfor\s*\(",
        category=Category.LOOP,
        weight=LOOP_WEIGHT,
    ),
    ConstructRule(
        name="for",
        pattern=r"^[ \t]*(?:async[ \t]+)?(for|while)\b(?![ \t]*\()" + _HEADER_TO_COLON,
        category=Category.LOOP,
        weight=LOOP_WEIGHT,
        flags=_re.MULTILINE,
    ),
    ConstructRule(
        name="while",
        pattern=r"\bwhile\s*\(",
        category=Category.LOOP,
        weight=LOOP_WEIGHT,
    ),
    ConstructRule(
        name="do-while",
        pattern=r"\bdo\s*\{",
        category=Category.LOOP,
        weight=LOOP_WEIGHT,
    ),
)

CONSTRUCT_RULES: tuple[ConstructRule, ...] = FUNCTION_RULES + CONDITIONAL_RULES + LOOP_RULES
