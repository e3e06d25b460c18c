"""Exceptions for the parsing module."""

from statechart_lint.exceptions import StatechartLintError

__all__ = ["FunctionParsingError"]


class FunctionParsingError(StatechartLintError):
    """Raised when inline function source cannot be parsed as a function.

    Attributes:
        source: The offending source text.

    """

    def __init__(self, message: str, source: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            source: The offending source text.

        """
        self.source = source
        super().__init__(message)
