"""Environment configuration for component-assigns.

Every setting is an `EnvVar` member carrying an `EnvConfig` record. Values are
read through `get_environment`, which resolves override > environment >
default and converts the raw string to the type of the default.

Example:
    >>> from assigns.config import EnvVar, get_environment
    >>> get_environment(EnvVar.ASSIGNS_CHECK_INIT_CONTEXT)
    True
    >>> get_environment(EnvVar.ASSIGNS_DOCS_HEADING, override="## Props")
    '## Props'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, overload

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for one environment variable.

    Attributes:
        name: Variable name as read from the environment.
        default: Value used when the variable is unset or unparsable. Its
            type decides how raw strings are converted.
        description: One-line description shown by the CLI.
        category: Group name (logging, checks, docs).
    """

    name: str
    default: Any
    description: str = ""
    category: str = "general"

    @property
    def var_type(self) -> type:
        return type(self.default)


class EnvVar(Enum):
    """Settings read by component-assigns."""

    ASSIGNS_LOG_LEVEL = EnvConfig(
        "ASSIGNS_LOG_LEVEL",
        "INFO",
        "Log level used by the CLI (DEBUG, INFO, WARNING, ...)",
        "logging",
    )
    ASSIGNS_CHECK_INIT_CONTEXT = EnvConfig(
        "ASSIGNS_CHECK_INIT_CONTEXT",
        True,
        "Warn when a component sets context without init_context",
        "checks",
    )
    ASSIGNS_DOCS_HEADING = EnvConfig(
        "ASSIGNS_DOCS_HEADING",
        "### Properties",
        "Heading of the generated properties documentation block",
        "docs",
    )


def _to_bool(raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(raw)


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    bool: _to_bool,
    int: int,
    str: str,
}


def convert_value(raw: str | None, config: EnvConfig) -> Any:
    """Convert a raw environment string, falling back to the default."""
    if raw is None:
        return config.default
    converter = _CONVERTERS.get(config.var_type, str)
    try:
        return converter(raw)
    except ValueError:
        return config.default


@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a setting: explicit override, then environment, then default."""
    if override is not None:
        return override
    config: EnvConfig = env_var.value
    return convert_value(os.environ.get(config.name), config)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """All settings, or only those in `category`."""
    return [var for var in EnvVar if category in (None, var.value.category)]


def get_log_level(override: str | None = None) -> str:
    """CLI log level name, upper-cased."""
    return str(get_environment(EnvVar.ASSIGNS_LOG_LEVEL, override)).upper()


def init_context_check_enabled(override: bool | None = None) -> bool:
    """Whether component definitions run the init_context check."""
    return bool(get_environment(EnvVar.ASSIGNS_CHECK_INIT_CONTEXT, override))


def get_docs_heading(override: str | None = None) -> str:
    return get_environment(EnvVar.ASSIGNS_DOCS_HEADING, override)


__all__ = [
    "EnvConfig",
    "EnvVar",
    "convert_value",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
    "get_log_level",
    "init_context_check_enabled",
    "get_docs_heading",
]
