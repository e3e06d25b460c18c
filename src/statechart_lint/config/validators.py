"""Field validation utilities for machine document parsing.

This module provides a fluent API for validating and extracting fields
from machine configuration mappings with type checking and error handling.
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from statechart_lint.config.exceptions import ConfigurationError

__all__ = ["FieldValidator"]

T = TypeVar("T")


class FieldValidator:
    """Fluent validator for configuration mapping fields.

    Example:
        v = FieldValidator(data, "state 'idle' in machine.yaml")
        v.require_mapping()
        state_id = v.optional("id", str)
        children = v.optional_mapping("states")

    """

    def __init__(self, data: Any, context: str) -> None:
        """Initialize the validator with data and context.

        Args:
            data: Value expected to be a mapping.
            context: Context string for error messages (e.g., "state 'idle'").

        """
        self._data = data
        self._context = context

    @property
    def context(self) -> str:
        """Get the context string for error messages."""
        return self._context

    def require_mapping(self) -> dict[str, Any]:
        """Validate that the data is a dictionary/mapping.

        Returns:
            The data if it's a dict.

        Raises:
            ConfigurationError: If data is not a dict.

        """
        if not isinstance(self._data, dict):
            raise ConfigurationError(
                f"Invalid structure: expected mapping, "
                f"got {type(self._data).__name__} in {self._context}"
            )
        return self._data

    @overload
    def optional(
        self,
        field: str,
        expected_type: type[T],
        *,
        default: T,
    ) -> T: ...

    @overload
    def optional(
        self,
        field: str,
        expected_type: type[T],
        *,
        default: None = None,
    ) -> T | None: ...

    def optional(
        self,
        field: str,
        expected_type: type[T],
        *,
        default: T | None = None,
    ) -> T | None:
        """Validate and extract an optional field.

        A field explicitly set to null counts as absent.

        Args:
            field: Name of the field to validate.
            expected_type: Expected type of the field value.
            default: Default value if field is not present.

        Returns:
            The validated value, or default if not present.

        Raises:
            ConfigurationError: If field is present but has wrong type.

        """
        value = self.require_mapping().get(field)

        if value is None:
            return default

        # bool is an int subclass; a YAML "true" is never a valid integer field.
        if isinstance(value, bool) and expected_type is not bool:
            raise ConfigurationError(
                f"Invalid '{field}': expected {expected_type.__name__}, "
                f"got bool in {self._context}"
            )

        if not isinstance(value, expected_type):
            raise ConfigurationError(
                f"Invalid '{field}': expected {expected_type.__name__}, "
                f"got {type(value).__name__} in {self._context}"
            )

        return value

    def optional_mapping(self, field: str) -> dict[str, Any]:
        """Validate and extract an optional mapping field.

        Args:
            field: Name of the field to validate.

        Returns:
            The mapping, or an empty dict if not present.

        Raises:
            ConfigurationError: If field is present but not a mapping, or has
                non-string keys.

        """
        value = self.optional(field, dict, default={})

        for key in value:
            if not isinstance(key, str):
                raise ConfigurationError(
                    f"Invalid '{field}': keys must be strings, "
                    f"got {type(key).__name__} in {self._context}"
                )

        return value
