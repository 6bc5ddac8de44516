"""Normalizer: masks comments and string contents without moving anything.

The output always has the same length as the input and keeps every newline,
so a match offset in normalized text is also a valid offset in the raw text
and line numbers can be computed against either.
"""

from __future__ import annotations

from .languages import C_STYLE, CommentSyntax


def normalize(text: str, syntax: CommentSyntax = C_STYLE) -> str:
    """Blank out comments and string-literal contents.

    Comments are replaced entirely; strings keep their quote characters and
    lose their contents. Everything is scanned in one left-to-right pass so
    a comment marker inside a string (or a quote inside a comment) is inert.

    Unterminated block comments run to end of text; unterminated single-line
    strings run to end of line.

    Args:
        text: Raw source text
        syntax: Comment and quote rules of the language

    Returns:
        Masked text of identical length
    """
    out = list(text)
    n = len(text)
    line_marker = syntax.line_comment
    block = syntax.block_comment
    i = 0

    while i < n:
        ch = text[i]

        if block is not None and text.startswith(block[0], i):
            end = text.find(block[1], i + len(block[0]))
            stop = n if end == -1 else end + len(block[1])
            _blank(out, i, stop)
            i = stop
            continue

        if line_marker is not None and text.startswith(line_marker, i):
            end = text.find("\n", i)
            stop = n if end == -1 else end
            _blank(out, i, stop)
            i = stop
            continue

        if ch in syntax.quotes:
            triple = ch * 3
            if syntax.triple_quotes and text.startswith(triple, i):
                close = _find_triple_close(text, i + 3, triple)
                _blank(out, i + 3, close)
                i = min(close + 3, n)
                continue

            close = _find_string_close(text, i + 1, ch)
            _blank(out, i + 1, close)
            if close < n and text[close] == ch:
                i = close + 1
            else:
                i = close
            continue

        i += 1

    return "".join(out)


def _blank(out: list[str], start: int, stop: int) -> None:
    for k in range(start, min(stop, len(out))):
        if out[k] != "\n":
            out[k] = " "


def _find_string_close(text: str, start: int, quote: str) -> int:
    """Index of the closing quote, or of the newline/end that cuts the string off."""
    j = start
    n = len(text)
    while j < n:
        c = text[j]
        if c == "\\":
            j += 2
            continue
        if c == quote or c == "\n":
            return j
        j += 1
    return n


def _find_triple_close(text: str, start: int, triple: str) -> int:
    j = start
    n = len(text)
    while j < n:
        if text[j] == "\\":
            j += 2
            continue
        if text.startswith(triple, j):
            return j
        j += 1
    return n
