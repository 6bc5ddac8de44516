"""Root exception for Snippet Insight."""

from typing import Any, Mapping, Optional


class SnippetInsightError(Exception):
    """Every error Snippet Insight raises on purpose derives from this.

    ``details`` carries structured context (config key, stage, language)
    and is rendered after the message as ``(key=value, ...)``.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
