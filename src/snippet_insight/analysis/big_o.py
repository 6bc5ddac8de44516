"""Coarse Big-O estimates.

Time comes straight from the active loop depth. Space is a guess from how
many collections the snippet builds and whether any function recurses.
Absence of a signal always degrades to constant complexity.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from typing import Iterable, Optional

from ..models import Category, Finding

CONSTANT = "O(1)"
LINEAR = "O(n)"
RECURSIVE = "O(n) (Recursion)"

# More collection literals/constructors than this reads as linear space.
COLLECTION_THRESHOLD = 5

_TIME_LABELS = {0: CONSTANT, 1: LINEAR, 2: "O(n²)", 3: "O(n³)"}

_COLLECTIONS = re.compile(
    r"\bnew\s+(?:Array|Map|Set|WeakMap|WeakSet|ArrayList|LinkedList|HashMap|HashSet|TreeMap|Vector)\b"
    r"|\bnew\s+\w+\s*\["
    r"|\bArray\.(?:from|of)\s*\("
    r"|\b(?:list|dict|set|defaultdict|deque)\s*\("
    r"|\bstd::(?:vector|map|set|unordered_map|unordered_set|list|deque)\b"
    r"|(?:[=(,:]|\breturn)[ \t]*[\[{]"
)
_RECURSION_MARKER = re.compile(r"\barguments\.callee\b|\brecurs(?:e|ive|ion)\w*\s*\(")
_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")
_CALL = re.compile(r"(?<![\w$])([A-Za-z_$][\w$]*)\s*\(")
_ARROW = re.compile(r"=>")
_OPENS_BLOCK = re.compile(r"\s*\{")
_DEF_KEYWORD = re.compile(r"def\b")


def time_complexity(loop_depth: int) -> str:
    if loop_depth <= 0:
        return CONSTANT
    return _TIME_LABELS.get(loop_depth, f"O(n^{loop_depth})")


def count_collections(raw: str) -> int:
    return sum(1 for _ in _COLLECTIONS.finditer(raw))


def has_recursion(normalized: str, findings: Iterable[Finding]) -> bool:
    """True if a named function calls itself in its own body, or a marker is present.

    Call sites are collected in one pass and body extents come from
    ``BodySpans``, so the check stays linear even when every body is left
    unclosed.
    """
    if _RECURSION_MARKER.search(normalized):
        return True

    definitions: dict[str, int] = {}
    for finding in findings:
        if finding.category is Category.FUNCTION and _IDENTIFIER.fullmatch(finding.label):
            definitions.setdefault(finding.label, finding.offset)
    if not definitions:
        return False

    calls: dict[str, list[int]] = {}
    for match in _CALL.finditer(normalized):
        name = match.group(1)
        if name in definitions:
            calls.setdefault(name, []).append(match.start())

    spans = BodySpans(normalized)
    for name, offset in definitions.items():
        sites = calls.get(name)
        if not sites:
            continue
        start, end = spans.body_of(offset)
        i = bisect_left(sites, start)
        if i < len(sites) and sites[i] < end:
            return True
    return False


def space_complexity(raw: str, normalized: str, findings: Iterable[Finding]) -> str:
    if count_collections(raw) > COLLECTION_THRESHOLD:
        return LINEAR
    if has_recursion(normalized, findings):
        return RECURSIVE
    return CONSTANT


class BodySpans:
    """Best-effort ``(start, end)`` body extents for definitions in one text.

    Brace pairs, newlines and ``=>`` positions are indexed once up front;
    indentation blocks are indexed on the first ``def`` lookup. Unclosed
    bodies run to the end of the text.
    """

    def __init__(self, text: str):
        self.text = text
        self._newlines = [i for i, ch in enumerate(text) if ch == "\n"]
        self._arrows = [m.start() for m in _ARROW.finditer(text)]
        self._opens: list[int] = []
        self._close_of: dict[int, int] = {}
        self._block_end: Optional[dict[int, int]] = None

        stack: list[int] = []
        for i, ch in enumerate(text):
            if ch == "{":
                self._opens.append(i)
                stack.append(i)
            elif ch == "}" and stack:
                self._close_of[stack.pop()] = i

    def body_of(self, offset: int) -> tuple[int, int]:
        if _DEF_KEYWORD.match(self.text, offset):
            return self._indented_body(offset)

        eol = self._line_end(offset)
        k = bisect_left(self._opens, offset)
        brace = self._opens[k] if k < len(self._opens) else -1
        a = bisect_left(self._arrows, offset)
        arrow = self._arrows[a] if a < len(self._arrows) and self._arrows[a] < eol else -1

        if arrow != -1 and (brace == -1 or arrow < brace):
            if not _OPENS_BLOCK.match(self.text, arrow + 2):
                return arrow + 2, eol
        if brace == -1:
            return offset, offset
        return brace + 1, self._close_of.get(brace, len(self.text))

    def _line_end(self, offset: int) -> int:
        k = bisect_left(self._newlines, offset)
        return self._newlines[k] if k < len(self._newlines) else len(self.text)

    def _indented_body(self, offset: int) -> tuple[int, int]:
        k = bisect_left(self._newlines, offset)
        if k == len(self._newlines):
            # Header is the last line: nothing below it
            return offset, offset
        line_start = self._newlines[k - 1] + 1 if k else 0
        if self._block_end is None:
            self._block_end = _indent_block_ends(self.text)
        return self._newlines[k] + 1, self._block_end[line_start]


def _indent_block_ends(text: str) -> dict[int, int]:
    """Map each non-blank line start to where its indented block ends.

    A block ends at the next non-blank line indented no deeper than the
    header; blank lines never end one.
    """
    ends: dict[int, int] = {}
    open_headers: list[tuple[int, int]] = []
    start = 0
    for line in text.split("\n"):
        content = line.lstrip()
        if content.strip():
            indent = len(line) - len(content)
            while open_headers and open_headers[-1][0] >= indent:
                ends[open_headers.pop()[1]] = start
            open_headers.append((indent, start))
        start += len(line) + 1
    for _, line_start in open_headers:
        ends[line_start] = len(text)
    return ends
