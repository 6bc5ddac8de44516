"""Signature-vote language detection.

A bag-of-signals classifier: each language's signature is counted over the
raw text and the highest count wins. It never raises; a broken signature
simply gets no votes.
"""

from __future__ import annotations

from typing import Optional

from ..logging_config import get_logger
from .languages import DEFAULT_LANGUAGE, LANGUAGES, LanguageProfile
from .patterns import compile_pattern

logger = get_logger(__name__)


def count_signature(text: str, profile: LanguageProfile) -> int:
    """Number of non-overlapping signature matches of one language."""
    pattern = compile_pattern(profile.signature, profile.signature_flags)
    if pattern is None:
        return 0
    return sum(1 for _ in pattern.finditer(text))


def score_languages(
    text: str, profiles: Optional[dict[str, LanguageProfile]] = None
) -> dict[str, int]:
    """Signature counts for every candidate, in table order."""
    table = LANGUAGES if profiles is None else profiles
    return {name: count_signature(text, profile) for name, profile in table.items()}


def detect_language(
    text: str,
    default: str = DEFAULT_LANGUAGE,
    profiles: Optional[dict[str, LanguageProfile]] = None,
) -> str:
    """Guess the language of a snippet.

    Args:
        text: Raw (not normalized) source text
        default: Returned for blank input or when nothing matches
        profiles: Candidate table, defaults to LANGUAGES

    Returns:
        Name of the candidate with the strictly highest count; the earlier
        candidate wins a tie.
    """
    if not text.strip():
        return default

    best_name = default
    best_score = 0
    for name, score in score_languages(text, profiles).items():
        if score > best_score:
            best_name, best_score = name, score

    logger.debug(f"Detected language: {best_name} ({best_score} signals)")
    return best_name
