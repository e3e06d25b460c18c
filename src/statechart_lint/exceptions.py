"""Base exceptions for statechart-lint.

This module defines the root exception hierarchy for the package.
All domain-specific exceptions inherit from StatechartLintError.
"""

__all__ = ["StatechartLintError"]


class StatechartLintError(Exception):
    """Base exception for all statechart-lint errors.

    Provides a common exception type for clients to catch framework errors.
    """

    pass
