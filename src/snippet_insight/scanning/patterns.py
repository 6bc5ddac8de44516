"""Pattern compilation and offset-to-line lookup shared by the scanners."""

from __future__ import annotations

import re
from bisect import bisect_left
from functools import lru_cache
from typing import Optional

from ..logging_config import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def compile_pattern(pattern: str, flags: int = 0) -> Optional[re.Pattern[str]]:
    """Compile a table pattern once; None (and a warning) if it is invalid.

    Compiled patterns are stateless. Callers always iterate with a fresh
    ``finditer`` so no match position survives between scans.
    """
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        logger.warning(f"Pattern failed to compile ({e}): {pattern!r}")
        return None


class LineIndex:
    """Maps character offsets to 1-indexed line numbers."""

    def __init__(self, text: str):
        self._newlines = [i for i, ch in enumerate(text) if ch == "\n"]

    def line_of(self, offset: int) -> int:
        # Number of newlines strictly before offset, plus one.
        return bisect_left(self._newlines, offset) + 1
