"""Compile-only validation with Python's own parser.

``ast.parse`` builds a syntax tree and stops there: nothing is compiled to
bytecode and nothing runs, so untrusted input is safe to hand it.
"""

from __future__ import annotations

import ast
import warnings

from ..logging_config import get_logger
from ..models import ValidationIssue

logger = get_logger(__name__)


def native_parse_issues(text: str) -> list[ValidationIssue]:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            ast.parse(text)
        except SyntaxError as e:
            return [ValidationIssue(f"{type(e).__name__}: {e.msg}", e.lineno or None)]
        except (ValueError, RecursionError, MemoryError) as e:
            logger.debug(f"Native parser gave up: {e!r}")
            return [ValidationIssue(f"Parser error: {e}", None)]
    return []
