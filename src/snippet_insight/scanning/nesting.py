"""Nesting and loop-depth tracking.

Brace mode makes two passes over normalized text:

1. Raw block nesting: +1 per ``{``, -1 per ``}`` (never below zero).
2. Active loop depth: a loop keyword arms a pending flag, the next ``{``
   opens a loop scope. A ``;`` outside parentheses disarms the flag, so a
   braceless single-statement loop body never gets a scope.

Indent mode replaces both passes with one indentation-scope stack for
colon-block languages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_LOOP_TOKENS = re.compile(r"\b(?:for|while|do)\b|[{}();]")
_INDENT_LOOP_HEADER = re.compile(r"(?:async\s+)?(?:for|while)\b")


@dataclass(frozen=True)
class ScopeFrame:
    """One open block during a single tracker pass."""

    is_loop_scope: bool
    indent: int = -1
    outer_parens: int = 0


@dataclass(frozen=True)
class NestingReport:
    max_nesting_depth: int = 0
    max_loop_depth: int = 0


def max_block_nesting(text: str) -> int:
    depth = 0
    deepest = 0
    for ch in text:
        if ch == "{":
            depth += 1
            if depth > deepest:
                deepest = depth
        elif ch == "}":
            depth = max(0, depth - 1)
    return deepest


def max_loop_depth(text: str) -> int:
    """Maximum number of simultaneously open loop-body scopes."""
    stack: list[ScopeFrame] = []
    pending = False
    active = 0
    deepest = 0
    parens = 0

    for match in _LOOP_TOKENS.finditer(text):
        token = match.group()
        if token == "(":
            parens += 1
        elif token == ")":
            parens = max(0, parens - 1)
        elif token == ";":
            if parens == 0:
                pending = False
        elif token == "{":
            stack.append(ScopeFrame(is_loop_scope=pending, outer_parens=parens))
            if pending:
                active += 1
                deepest = max(deepest, active)
                pending = False
            parens = 0
        elif token == "}":
            if stack:
                frame = stack.pop()
                parens = frame.outer_parens
                if frame.is_loop_scope:
                    active -= 1
        else:
            pending = True

    return deepest


def indent_nesting(text: str) -> NestingReport:
    """Scope depths for languages whose blocks open with a trailing colon."""
    stack: list[ScopeFrame] = []
    deepest = 0
    loops = 0
    deepest_loops = 0

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        expanded = line.expandtabs(4)
        indent = len(expanded) - len(expanded.lstrip())

        while stack and indent <= stack[-1].indent:
            if stack.pop().is_loop_scope:
                loops -= 1

        if stripped.endswith(":"):
            is_loop = _INDENT_LOOP_HEADER.match(stripped) is not None
            stack.append(ScopeFrame(is_loop_scope=is_loop, indent=indent))
            if is_loop:
                loops += 1
            deepest = max(deepest, len(stack))
            deepest_loops = max(deepest_loops, loops)

    return NestingReport(max_nesting_depth=deepest, max_loop_depth=deepest_loops)


def track_nesting(normalized: str, mode: str = "brace") -> NestingReport:
    """Compute nesting and loop depth in the given mode ("brace" or "indent")."""
    if mode == "brace":
        return NestingReport(
            max_nesting_depth=max_block_nesting(normalized),
            max_loop_depth=max_loop_depth(normalized),
        )
    if mode == "indent":
        return indent_nesting(normalized)
    raise ValueError(f"Unknown nesting mode: {mode!r}")
