"""CLI entry point for component-assigns.

Introspection tools for component authors: list the assign types, show the
options a declaration accepts, and dump the finalized assigns of a component.
"""

import argparse
import importlib
import json
import sys

from dotenv import load_dotenv

from assigns.component import is_component
from assigns.config import (
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)
from assigns.core import get_logger, setup_logging
from assigns.errors import AssignDefinitionError
from assigns.schema import (
    ASSIGN_TYPES,
    AssignKind,
    ContextAction,
    get_required_options,
    get_valid_options,
)

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Commands
# =============================================================================


def cmd_types(_args: argparse.Namespace) -> int:
    """Handle the types command."""
    for type_name in ASSIGN_TYPES:
        print(type_name)
    return 0


def cmd_options(args: argparse.Namespace) -> int:
    """Handle the options command."""
    kind = AssignKind(args.kind)
    if kind is AssignKind.CONTEXT and args.action is None:
        logger.error("context options depend on the action; pass --action")
        return 1

    valid = get_valid_options(kind, args.type, args.action)
    required = get_required_options(kind, args.type, args.action)
    for option in valid:
        suffix = " (required)" if option in required else ""
        print(f"{option}{suffix}")
    return 0


def load_component(target: str) -> type:
    """Import a component from a ``module:Class`` reference.

    Raises:
        ValueError: If the reference is malformed or not a component.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected module:Class, got: {target}")

    obj = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not is_component(obj):
        raise ValueError(f"{target} is not a Component subclass")
    return obj


def cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect command."""
    try:
        component = load_component(args.target)
    except AssignDefinitionError as e:
        logger.error(f"Component definition failed: {e}")
        return 1
    except (ImportError, AttributeError, ValueError) as e:
        logger.error(f"Could not load {args.target}: {e}")
        return 1

    component.check_definition()
    schema = component.__assigns__
    if args.format == "docs":
        print(schema.docs)
    else:
        print(json.dumps(schema.to_dict(), indent=2))
    return 0


def cmd_env(args: argparse.Namespace) -> int:
    """Handle the env command."""
    for var in list_environment_variables(args.category):
        info = get_environment_info(var)
        print(f"{info.name}={get_environment(var)!s}  # {info.description}")
    return 0


# =============================================================================
# Parser
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="python -m assigns",
        description="Inspect component assign declarations",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: ASSIGNS_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    types_parser = subparsers.add_parser("types", help="List assign types")
    types_parser.set_defaults(func=cmd_types)

    options_parser = subparsers.add_parser(
        "options",
        help="List the options a declaration accepts",
    )
    options_parser.add_argument(
        "kind",
        type=str,
        choices=[k.value for k in AssignKind],
        help="Assign kind",
    )
    options_parser.add_argument(
        "type",
        type=str,
        nargs="?",
        default="any",
        choices=list(ASSIGN_TYPES),
        help="Assign type (default: any)",
    )
    options_parser.add_argument(
        "--action",
        "-a",
        type=str,
        default=None,
        choices=[a.value for a in ContextAction],
        help="Context action (required for context)",
    )
    options_parser.set_defaults(func=cmd_options)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the finalized assigns of a component",
    )
    inspect_parser.add_argument(
        "target",
        type=str,
        help="Component reference as module:Class",
    )
    inspect_parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="json",
        choices=["json", "docs"],
        help="Output format (default: json)",
    )
    inspect_parser.set_defaults(func=cmd_inspect)

    env_parser = subparsers.add_parser(
        "env",
        help="Show configuration variables and their current values",
    )
    env_parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        choices=sorted({var.value.category for var in EnvVar}),
        help="Only show one category",
    )
    env_parser.set_defaults(func=cmd_env)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(get_log_level(args.log_level))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
