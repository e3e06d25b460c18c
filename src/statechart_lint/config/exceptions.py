"""Exceptions for config module.

This module defines exceptions related to configuration loading,
parsing, and validation errors.
"""

from statechart_lint.exceptions import StatechartLintError

__all__ = ["ConfigurationError"]


class ConfigurationError(StatechartLintError):
    """Base exception for configuration-related errors."""

    pass
