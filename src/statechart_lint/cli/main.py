"""CLI main entry point.

This module provides the main entry point for the statechart-lint CLI.
"""

import argparse
import sys
import traceback

from statechart_lint.cli.commands import CheckCommand, ValidateCommand
from statechart_lint.cli.formatters import format_reports
from statechart_lint.cli.parser import create_parser
from statechart_lint.cli.validators import validate_args
from statechart_lint.logging_config import configure_logging, get_logger

__all__ = ["main", "CommandDispatcher"]

logger = get_logger(__name__)


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers.

    Attributes:
        _check_cmd: Command handler for analyzing documents.
        _validate_cmd: Command handler for validating documents.

    """

    def __init__(self) -> None:
        """Initialize the command dispatcher with all command handlers."""
        self._check_cmd = CheckCommand()
        self._validate_cmd = ValidateCommand()

    def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch to the appropriate command based on arguments.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for findings or errors).

        """
        if getattr(args, "dry_run", False):
            result = self._validate_cmd.execute(args)
            return result.exit_code

        result = self._check_cmd.execute(args)
        output = format_reports(
            result.reports,
            result.errors,
            json_output=getattr(args, "json_output", False),
        )
        print(output)
        return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for findings or errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=getattr(args, "verbose", False),
        json_output=getattr(args, "json_output", False),
    )

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        dispatcher = CommandDispatcher()
        return dispatcher.dispatch(args)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if getattr(args, "verbose", False):
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
