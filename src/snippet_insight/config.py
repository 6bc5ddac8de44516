"""Configuration loading and management for Snippet Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in EngineConfig)
    2. Global config (~/.snippet-insight.toml)
    3. Project config (./snippet-insight.toml)
    4. Explicit config file
    5. Environment variables (SNIPPET_* prefix)
    6. Overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, max_errors=3)
    >>> config.verbosity
    'verbose'
    >>> config.max_errors
    3
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_args, get_origin, get_type_hints

from .exceptions import ConfigFileError, ConfigurationError, InvalidConfigError
from .scanning.languages import DEFAULT_LANGUAGE, LANGUAGES
from .validation.validator import MAX_ERRORS

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITIES = ("quiet", "normal", "verbose")

ENV_PREFIX = "SNIPPET_"

_TRUTHY = frozenset({"true", "1", "yes", "on"})
_FALSY = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for one analysis run.

    Attributes:
        default_language: Language used when detection finds no signal
        language: Force a language and skip detection (None = detect)
        max_errors: Cap on reported syntax issues (1 to 5)
        native_parse: Allow compile-only native parsing where available
        verbosity: Logging verbosity level
    """

    default_language: str = DEFAULT_LANGUAGE
    language: Optional[str] = None
    max_errors: int = MAX_ERRORS
    native_parse: bool = True
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.default_language not in LANGUAGES:
            raise InvalidConfigError(
                "default_language", self.default_language, "not a known language"
            )
        if self.language is not None and self.language not in LANGUAGES:
            raise InvalidConfigError("language", self.language, "not a known language")
        if not 1 <= self.max_errors <= MAX_ERRORS:
            raise InvalidConfigError(
                "max_errors", self.max_errors, f"must be between 1 and {MAX_ERRORS}"
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )


DEFAULT_CONFIG = EngineConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> EngineConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are mapped onto ``verbosity``.

    Returns:
        Validated EngineConfig instance

    Raises:
        ConfigFileError: If a config file is missing or malformed
        ConfigurationError: If a key is unknown or an env var cannot be parsed
        InvalidConfigError: If a value is out of range
    """
    merged: dict = {}

    for discovered in (Path.home() / ".snippet-insight.toml", Path.cwd() / "snippet-insight.toml"):
        if discovered.exists():
            merged.update(_load_toml_file(discovered))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigFileError(config_file, "not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # CLI flags: --verbose wins over --quiet
    verbose = overrides.pop("verbose", False)
    quiet = overrides.pop("quiet", False)
    if verbose or quiet:
        overrides["verbosity"] = "verbose" if verbose else "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - {f.name for f in fields(EngineConfig)})
    if unknown:
        raise ConfigurationError(f"Invalid configuration: unknown key(s) {', '.join(unknown)}")
    try:
        return EngineConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Collect ``SNIPPET_<FIELD>`` environment variables.

    Supported environment variables:
        SNIPPET_DEFAULT_LANGUAGE: str
        SNIPPET_LANGUAGE: str
        SNIPPET_MAX_ERRORS: int
        SNIPPET_NATIVE_PARSE: bool (true/false, 1/0, yes/no, on/off)
        SNIPPET_VERBOSITY: quiet/normal/verbose
    """
    hints = get_type_hints(EngineConfig)
    found: dict[str, Any] = {}

    for f in fields(EngineConfig):
        env_key = ENV_PREFIX + f.name.upper()
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            found[f.name] = _parse_env_value(raw, hints[f.name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return found


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Convert an environment string to ``type_hint``; Optional is unwrapped."""
    if get_origin(type_hint) is Union:
        type_hint = next(arg for arg in get_args(type_hint) if arg is not type(None))

    if type_hint is bool:
        flag = value.strip().lower()
        if flag in _TRUTHY:
            return True
        if flag in _FALSY:
            return False
        raise ValueError(f"expected a boolean, got {value!r}")

    if type_hint is int:
        return int(value)

    # str and Literal fields are validated by EngineConfig itself
    return value



def _load_toml_file(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(path, f"invalid TOML: {e}")
    except OSError as e:
        raise ConfigFileError(path, e.strerror or str(e))
