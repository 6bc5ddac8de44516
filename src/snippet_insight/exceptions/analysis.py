"""Analysis-related exceptions: unknown languages, failing pipeline stages."""

import difflib
from typing import List, Optional

from .base import SnippetInsightError


class AnalysisError(SnippetInsightError):
    """Failures tied to a language lookup or a pipeline stage."""


class UnsupportedLanguageError(AnalysisError):
    """A language name that is not in the language table.

    ``suggestion`` holds the closest known name for typos such as "pyhton".
    """

    def __init__(self, language: str, supported_languages: List[str]):
        matches = difflib.get_close_matches(language, supported_languages, n=1)
        self.suggestion: Optional[str] = matches[0] if matches else None

        message = f"Unsupported language: {language}"
        if self.suggestion:
            message += f" (did you mean {self.suggestion}?)"
        super().__init__(message, details={"supported": ", ".join(supported_languages)})
        self.language = language
        self.supported_languages = supported_languages


class EngineFault(AnalysisError):
    """An internal failure inside one pipeline stage.

    The pipeline never lets this escape ``analyze()``; it is logged and the
    stage falls back to neutral values.
    """

    def __init__(self, stage: str, reason: str):
        super().__init__(
            f"Analysis stage '{stage}' failed",
            details={"stage": stage, "reason": reason},
        )
        self.stage = stage
        self.reason = reason
