"""Main CLI entry point for modgraph.

Provides commands: order, includes, check, export
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from modgraph.cli.check import check_command
from modgraph.cli.export import export_command
from modgraph.cli.order import includes_command, order_command

logger = logging.getLogger("modgraph.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_project_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command that loads a manifest."""
    parser.add_argument(
        "manifest",
        help="Project manifest (TOML or JSON) declaring modules and flags",
    )
    parser.add_argument(
        "-f",
        "--flag",
        action="append",
        metavar="NAME[=BOOL]",
        help=(
            "Set a build flag for this invocation, overriding the manifest's "
            "[flags] table. Repeatable; NAME alone means NAME=true."
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional resolution settings. Can be a path to a TOML/JSON file "
            "or an inline TOML/JSON string. Replaces the manifest's "
            "[resolution] table."
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modgraph",
        description="Modgraph - Module Dependency Resolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    order_parser = subparsers.add_parser(
        "order",
        help="Print modules in build order (dependencies first)",
    )
    _add_project_arguments(order_parser)

    includes_parser = subparsers.add_parser(
        "includes",
        help="Print include paths propagated by a module",
    )
    _add_project_arguments(includes_parser)
    includes_parser.add_argument(
        "module",
        help="Module to inspect",
    )
    includes_parser.add_argument(
        "--compile",
        action="store_true",
        help="Print the full include search path for compiling the module itself",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate the module graph (exit non-zero on any problem)",
    )
    _add_project_arguments(check_parser)
    check_parser.add_argument(
        "--strict-dynamic",
        action="store_true",
        help="Treat dynamically loaded references to undeclared modules as errors",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Export the build plan or graph as JSON",
    )
    _add_project_arguments(export_parser)
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output file",
    )
    export_parser.add_argument(
        "--format",
        choices=["plan", "graph"],
        default="plan",
        help="Output format (default: plan)",
    )
    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "order":
        return order_command(args)
    elif args.command == "includes":
        return includes_command(args)
    elif args.command == "check":
        return check_command(args)
    elif args.command == "export":
        return export_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
