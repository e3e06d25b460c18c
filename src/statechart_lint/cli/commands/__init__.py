"""CLI command implementations."""

from statechart_lint.cli.commands.base import BaseCommand, CommandResult
from statechart_lint.cli.commands.check import CheckCommand
from statechart_lint.cli.commands.validate import ValidateCommand

__all__ = [
    "BaseCommand",
    "CheckCommand",
    "CommandResult",
    "ValidateCommand",
]
