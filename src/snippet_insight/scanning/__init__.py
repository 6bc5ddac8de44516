"""Language-aware snippet scanning."""

from .detector import count_signature, detect_language, score_languages
from .languages import (
    BRACE,
    C_STYLE,
    DEFAULT_LANGUAGE,
    INDENT,
    LANGUAGES,
    MARKUP,
    CommentSyntax,
    LanguageProfile,
    get_language_profile,
    supported_languages,
)
from .nesting import NestingReport, ScopeFrame, track_nesting
from .normalizer import normalize
from .patterns import LineIndex, compile_pattern
from .rules import CONSTRUCT_RULES, ConstructRule
from .scanner import count_by_category, scan_constructs, sort_findings

__all__ = [
    # Language table
    "LanguageProfile",
    "CommentSyntax",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "MARKUP",
    "BRACE",
    "INDENT",
    "C_STYLE",
    "get_language_profile",
    "supported_languages",
    # Stages
    "normalize",
    "detect_language",
    "score_languages",
    "count_signature",
    "scan_constructs",
    "sort_findings",
    "count_by_category",
    "track_nesting",
    "NestingReport",
    "ScopeFrame",
    # Rules and helpers
    "ConstructRule",
    "CONSTRUCT_RULES",
    "LineIndex",
    "compile_pattern",
]
