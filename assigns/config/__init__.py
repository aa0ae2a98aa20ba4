"""Environment configuration for component-assigns.

Categories:
    logging: CLI log output
    checks: Post-definition component checks
    docs: Generated documentation
"""

from .lib import (
    EnvConfig,
    EnvVar,
    convert_value,
    get_docs_heading,
    get_environment,
    get_environment_info,
    get_log_level,
    init_context_check_enabled,
    list_environment_variables,
)

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
