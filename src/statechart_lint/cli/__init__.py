"""CLI package for statechart-lint.

This package provides the command-line interface. It implements the
Command pattern for its operations (check documents, validate documents).
"""

from statechart_lint.cli.commands import (
    BaseCommand,
    CheckCommand,
    CommandResult,
    ValidateCommand,
)
from statechart_lint.cli.formatters import format_reports
from statechart_lint.cli.main import CommandDispatcher, main
from statechart_lint.cli.parser import create_parser
from statechart_lint.cli.validators import validate_args

__all__ = [
    "BaseCommand",
    "CheckCommand",
    "CommandDispatcher",
    "CommandResult",
    "ValidateCommand",
    "create_parser",
    "format_reports",
    "main",
    "validate_args",
]
