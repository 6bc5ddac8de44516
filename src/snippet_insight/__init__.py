"""
Snippet Insight - Structural Complexity Analysis for Code Snippets

Takes a snippet of unknown language, guesses the language, counts functions,
conditionals and loops, measures nesting, and turns that into a weighted
score, a rank, rough Big-O estimates and a short list of likely syntax
problems. Heuristic by nature: regex tables, not parsers.
"""

__version__ = "0.1.0"

from .api import analyze
from .config import EngineConfig, load_config
from .models import AnalysisResult, Category, Finding, Rank, ValidationIssue

__all__ = [
    "analyze",  # Main entry point
    "AnalysisResult",
    "Finding",
    "ValidationIssue",
    "Category",
    "Rank",
    "EngineConfig",
    "load_config",
]
