"""Exception hierarchy for Snippet Insight.

SnippetInsightError
├── ConfigurationError
│   ├── ConfigFileError
│   └── InvalidConfigError
└── AnalysisError
    ├── UnsupportedLanguageError
    └── EngineFault
"""

from .analysis import AnalysisError, EngineFault, UnsupportedLanguageError
from .base import SnippetInsightError
from .config import ConfigFileError, ConfigurationError, InvalidConfigError

__all__ = [
    "SnippetInsightError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidConfigError",
    "AnalysisError",
    "UnsupportedLanguageError",
    "EngineFault",
]
