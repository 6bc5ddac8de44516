"""Public API for Snippet Insight.

This module provides the main entry point for analysis. Users should call
analyze() instead of wiring the scanning, analysis and validation stages
together by hand.

Example:
    >>> from snippet_insight import analyze
    >>>
    >>> result = analyze("for (let i = 0; i < n; i++) { total += i; }")
    >>> result.time_complexity
    'O(n)'
    >>>
    >>> # With customization
    >>> from snippet_insight import load_config
    >>> result = analyze(source, config=load_config(language="python"))
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .analysis import compute_score, rank_for, space_complexity, time_complexity
from .analysis.big_o import CONSTANT
from .config import DEFAULT_CONFIG, EngineConfig
from .exceptions import EngineFault
from .logging_config import get_logger
from .models import AnalysisResult, Category, Rank
from .scanning import (
    NestingReport,
    count_by_category,
    detect_language,
    get_language_profile,
    normalize,
    scan_constructs,
    sort_findings,
    track_nesting,
)
from .validation import validate_syntax

logger = get_logger(__name__)

T = TypeVar("T")


def _run_stage(stage: str, fallback: T, func: Callable[..., T], *args, **kwargs) -> T:
    """Run one pipeline stage; log and return ``fallback`` if it fails."""
    try:
        return func(*args, **kwargs)
    except Exception as e:
        fault = EngineFault(stage, f"{type(e).__name__}: {e}")
        logger.warning(f"{fault}; continuing with neutral values")
        return fallback


def count_lines(text: str) -> int:
    """Number of lines containing at least one non-whitespace character."""
    return sum(1 for line in text.split("\n") if line.strip())


def analyze(text: str, config: Optional[EngineConfig] = None) -> AnalysisResult:
    """Analyze one source snippet.

    Pipeline:
    1. Detect the language on raw text (or use ``config.language``)
    2. Normalize with that language's comment syntax
    3. Scan constructs and sort them by line
    4. Track nesting and active loop depth
    5. Score, rank and estimate Big-O
    6. Validate syntax (capped at ``config.max_errors``)

    Each stage is isolated: an internal failure is logged at WARNING and
    replaced by neutral values, so this function never raises on any input
    text.

    Args:
        text: Source snippet of unknown language
        config: Optional EngineConfig (default: built-in defaults)

    Returns:
        A fully built, immutable AnalysisResult
    """
    if config is None:
        config = DEFAULT_CONFIG

    if not text.strip():
        logger.debug("Blank input, returning empty result")
        return AnalysisResult(rank=Rank.NO_INPUT, language=config.default_language)

    line_count = count_lines(text)

    if config.language is not None:
        language = config.language
    else:
        language = _run_stage(
            "detect", config.default_language, detect_language, text, config.default_language
        )

    profile = get_language_profile(language)

    normalized = _run_stage("normalize", text, normalize, text, profile.comments)

    findings = _run_stage("scan", [], scan_constructs, normalized, text)
    findings = _run_stage("sort", findings, sort_findings, findings)
    counts = count_by_category(findings)

    nesting = _run_stage("nesting", NestingReport(), track_nesting, normalized, profile.nesting_mode)

    score = _run_stage(
        "score",
        0,
        compute_score,
        line_count=line_count,
        function_count=counts[Category.FUNCTION],
        conditional_count=counts[Category.CONDITIONAL],
        loop_count=counts[Category.LOOP],
        max_nesting_depth=nesting.max_nesting_depth,
    )
    rank = rank_for(score)

    time_big_o = _run_stage("time_complexity", CONSTANT, time_complexity, nesting.max_loop_depth)
    space_big_o = _run_stage(
        "space_complexity", CONSTANT, space_complexity, text, normalized, findings
    )

    errors = _run_stage(
        "validate",
        (),
        validate_syntax,
        text,
        language,
        max_errors=config.max_errors,
        native_parse=config.native_parse,
    )

    logger.debug(
        f"Analyzed {line_count} lines as {language}: score={score} ({rank.value}), "
        f"{len(findings)} findings, {len(errors)} errors"
    )

    return AnalysisResult(
        line_count=line_count,
        function_count=counts[Category.FUNCTION],
        conditional_count=counts[Category.CONDITIONAL],
        loop_count=counts[Category.LOOP],
        max_nesting_depth=nesting.max_nesting_depth,
        max_loop_depth=nesting.max_loop_depth,
        score=score,
        rank=rank,
        findings=tuple(findings),
        language=language,
        errors=tuple(errors),
        time_complexity=time_big_o,
        space_complexity=space_big_o,
    )
