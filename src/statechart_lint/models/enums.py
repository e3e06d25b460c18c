"""Enumeration types for statechart-lint.

This module defines the closed vocabularies used by the analyzer:
guard and action shapes, guard dialects, and finding categories.
"""

from enum import Enum

__all__ = [
    "ActionKind",
    "Dialect",
    "FindingCategory",
    "FindingSeverity",
    "GuardKind",
    "ParameterKind",
]


class Dialect(str, Enum):
    """Guard-declaration convention of the analyzed configuration.

    Attributes:
        positional_context: Schema version 4. Guards live under ``cond`` and
            receive the context as their first positional parameter.
        destructured_context: Schema version 5. Guards live under ``guard``
            and receive one object exposing ``context``, ``event`` and friends.
    """

    positional_context = "positional_context"
    destructured_context = "destructured_context"

    @classmethod
    def from_schema_version(cls, version: int) -> "Dialect":
        """Map a declared schema version to its dialect.

        Raises:
            ValueError: If the version has no dialect.

        """
        if version == 4:
            return cls.positional_context
        if version == 5:
            return cls.destructured_context
        raise ValueError(f"No guard dialect for schema version {version}")

    @property
    def schema_version(self) -> int:
        return 4 if self is Dialect.positional_context else 5

    @property
    def guard_property(self) -> str:
        """Name of the transition property that holds the guard."""
        return "cond" if self is Dialect.positional_context else "guard"


class GuardKind(str, Enum):
    """Shape of a guard attached to a transition.

    Attributes:
        named_reference: String naming a guard implemented elsewhere.
        inline_function: A function literal given directly.
        other: Anything else (parameterised objects, calls, unparsable source).
    """

    named_reference = "named_reference"
    inline_function = "inline_function"
    other = "other"


class ActionKind(str, Enum):
    """Shape of an action attached to a transition.

    Attributes:
        context_assignment: The canonical context-update action.
        named_or_referenced: A name or reference whose implementation is unknown.
        opaque: Function literals and built-ins known not to update context.
    """

    context_assignment = "context_assignment"
    named_or_referenced = "named_or_referenced"
    opaque = "opaque"


class ParameterKind(str, Enum):
    """Syntactic form of a function's first parameter."""

    none = "none"
    identifier = "identifier"
    object_pattern = "object_pattern"
    array_pattern = "array_pattern"
    rest = "rest"


class FindingCategory(str, Enum):
    """Classification emitted for a single automatic-transition candidate."""

    unconditional_empty_transition_guaranteed_loop = (
        "unconditional_empty_transition_guaranteed_loop"
    )
    empty_transition_not_first_suspicious = "empty_transition_not_first_suspicious"
    no_target_actions_without_mutation = "no_target_actions_without_mutation"
    unconditional_self_transition_first_guaranteed_loop = (
        "unconditional_self_transition_first_guaranteed_loop"
    )
    unconditional_self_transition_no_mutation = (
        "unconditional_self_transition_no_mutation"
    )
    conditional_self_transition_no_mutation = "conditional_self_transition_no_mutation"
    first_conditional_self_transition_guard_ignores_context = (
        "first_conditional_self_transition_guard_ignores_context"
    )
    guarded_no_target_no_mutation = "guarded_no_target_no_mutation"
    first_guarded_no_target_guard_ignores_context = (
        "first_guarded_no_target_guard_ignores_context"
    )


class FindingSeverity(str, Enum):
    """Severity levels for findings.

    Attributes:
        high: The machine is guaranteed to loop once the state is entered.
        medium: A loop is possible, or the transition can never do anything useful.
    """

    high = "high"
    medium = "medium"
