"""Errors raised while building an EngineConfig."""

from pathlib import Path
from typing import Any, Union

from .base import SnippetInsightError


class ConfigurationError(SnippetInsightError):
    """Configuration could not be assembled from its sources."""


class ConfigFileError(ConfigurationError):
    """A TOML config file is missing, unreadable or malformed."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Cannot load config file {path}", details={"reason": reason})
        self.path = Path(path)
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A single setting has a value outside its allowed range."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for {key}: {value!r}",
            details={"key": key, "value": value, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
