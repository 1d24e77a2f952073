"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with application services
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from decorum._package import CLI_NAME, __version__
from decorum.application.service import CompositionService
from decorum.cli.formatters import format_output
from decorum.config.manager import ConfigurationManager
from decorum.config.schemas import LoggingConfig
from decorum.infrastructure.error import ErrorMiddleware
from decorum.infrastructure.logging.logger import get_logger, setup_logging
from decorum.interface.command_handlers import CommandHandlers

FORMATS = ["json", "yaml", "table", "list"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description="decorum - compose attribute decorators around immutable subjects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s subjects list                                        # List subject kinds
  %(prog)s decorators list --format table                       # Show decorators as a table
  %(prog)s chain build speaker --set power=110 --set bass=1 --with bass_boost power_boost
  %(prog)s chain check pizza --set cost=1.99 --set "description=thin crust" --with cheese olives
  %(prog)s chain show boosted_speaker                           # Build a chain from config
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument("--format", choices=FORMATS, default="json", help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Resource subparsers
    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # Subjects resource
    subjects_parser = subparsers.add_parser("subjects", help="Registered subject kinds")
    subjects_subparsers = subjects_parser.add_subparsers(dest="action", help="Subject actions")
    subjects_subparsers.add_parser("list", help="List subject kinds and their schemas")

    # Decorators resource
    decorators_parser = subparsers.add_parser("decorators", help="Registered decorator variants")
    decorators_subparsers = decorators_parser.add_subparsers(dest="action", help="Decorator actions")
    decorators_list = decorators_subparsers.add_parser("list", help="List decorator variants")
    decorators_list.add_argument("--kind", help="Only show decorators for this subject kind")

    # Chain resource
    chain_parser = subparsers.add_parser("chain", help="Build and inspect composition chains")
    chain_subparsers = chain_parser.add_subparsers(dest="action", help="Chain actions")

    for action, help_text in (
        ("build", "Build a chain and show its attributes"),
        ("check", "Compare a chain with its reversed decorator order"),
    ):
        chain_action = chain_subparsers.add_parser(action, help=help_text)
        chain_action.add_argument("kind", help="Subject kind")
        chain_action.add_argument(
            "--set",
            action="append",
            metavar="NAME=VALUE",
            help="Starting attribute value (repeatable)",
        )
        chain_action.add_argument(
            "--with",
            dest="decorators",
            nargs="*",
            default=[],
            metavar="DECORATOR",
            help="Decorator names, innermost first",
        )

    chain_show = chain_subparsers.add_parser("show", help="Build a chain declared in configuration")
    chain_show.add_argument("name", help="Chain name")

    # Config resource
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="action", help="Config actions")
    config_subparsers.add_parser("show", help="Show effective configuration")

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, handlers: CommandHandlers) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    command_handlers = handlers.handlers()

    if handler_key not in command_handlers:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return command_handlers[handler_key](args)


def _configure_logging(args: argparse.Namespace, config_manager: ConfigurationManager) -> None:
    logging_config: LoggingConfig = config_manager.get_typed(LoggingConfig)
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)


def run(args: argparse.Namespace) -> None:
    """Run a parsed command and write its formatted output."""
    config_manager = ConfigurationManager(args.config)
    _configure_logging(args, config_manager)
    logger = get_logger(__name__)

    handlers = CommandHandlers(CompositionService(config_manager), config_manager)
    result = execute_command(args, handlers)
    logger.debug("Command executed", resource=args.resource, action=args.action)

    formatted_output = format_output(result, args.format)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(formatted_output)
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        print(formatted_output)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        ErrorMiddleware().wrap_script_handler(run)(args)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
