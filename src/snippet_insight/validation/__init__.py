"""Lightweight syntax sanity checks."""

from .delimiters import check_delimiters
from .indentation import check_block_colons
from .markup import VOID_TAGS, check_markup
from .native import native_parse_issues
from .validator import MAX_ERRORS, validate_syntax

__all__ = [
    "validate_syntax",
    "MAX_ERRORS",
    "check_markup",
    "check_delimiters",
    "check_block_colons",
    "native_parse_issues",
    "VOID_TAGS",
]
