"""Config tree model consumed by the analyzer.

The loader builds these immutable nodes from a machine document; the
analysis package only ever reads them.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import Field, field_validator, model_validator

from statechart_lint.models.base import BaseSchema
from statechart_lint.models.enums import ActionKind, GuardKind, ParameterKind

__all__ = [
    "ActionRef",
    "Guard",
    "ParameterShape",
    "StateNode",
    "TransitionCandidate",
    "normalize_candidates",
]


class ParameterShape(BaseSchema):
    """Declared parameters of an inline guard function.

    Attributes:
        count: Number of declared parameters.
        first_kind: Syntactic form of the first parameter.
        fields: Property names destructured from the first parameter.
        open_pattern: The first parameter's pattern contains a rest element
            or a computed key, so it may bind fields not listed in ``fields``.

    """

    count: int = Field(default=0, ge=0)
    first_kind: ParameterKind = ParameterKind.none
    fields: frozenset[str] = frozenset()
    open_pattern: bool = False


class Guard(BaseSchema):
    """A predicate gating a transition.

    Attributes:
        kind: Shape of the guard.
        name: Guard name for named references.
        source: Function source for inline guards, when known.
        parameters: Parameter shape for inline guards.

    """

    kind: GuardKind
    name: str | None = None
    source: str | None = None
    parameters: ParameterShape | None = None

    @classmethod
    def named(cls, name: str) -> Guard:
        return cls(kind=GuardKind.named_reference, name=name)

    @classmethod
    def inline(cls, parameters: ParameterShape, source: str | None = None) -> Guard:
        return cls(kind=GuardKind.inline_function, parameters=parameters, source=source)

    @classmethod
    def other(cls) -> Guard:
        return cls(kind=GuardKind.other)

    def describe(self) -> str:
        """Short human-readable label used in messages."""
        if self.kind == GuardKind.named_reference and self.name:
            return self.name
        if self.kind == GuardKind.inline_function:
            return self.source or "<inline function>"
        return "<guard>"


class ActionRef(BaseSchema):
    """One action attached to a transition."""

    kind: ActionKind
    name: str | None = None

    @classmethod
    def assign(cls) -> ActionRef:
        return cls(kind=ActionKind.context_assignment, name="assign")

    @classmethod
    def named(cls, name: str) -> ActionRef:
        return cls(kind=ActionKind.named_or_referenced, name=name)

    @classmethod
    def opaque(cls, name: str | None = None) -> ActionRef:
        return cls(kind=ActionKind.opaque, name=name)


class TransitionCandidate(BaseSchema):
    """One entry of a state's automatic-transition sequence.

    Attributes:
        position: 0-based index within the owning sequence.
        target: Declared target (bare name, dotted path or ``#id`` path).
        guard: Optional guard.
        actions: Actions executed when the transition is taken.

    """

    position: int = Field(default=0, ge=0)
    target: str | None = None
    guard: Guard | None = None
    actions: tuple[ActionRef, ...] = ()

    @field_validator("actions", mode="before")
    @classmethod
    def _wrap_single_action(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (ActionRef, dict)):
            return (value,)
        return value

    @property
    def has_target(self) -> bool:
        return self.target is not None

    @property
    def has_guard(self) -> bool:
        return self.guard is not None


def normalize_candidates(value: Any) -> list[Any]:
    """Normalize an automatic-transition slot to a list.

    A lone candidate (model or mapping) becomes a one-element list and a
    missing slot becomes an empty one. Mappings without an explicit
    ``position`` and candidates built without one are numbered by their index.

    """
    if value is None:
        return []
    if isinstance(value, (TransitionCandidate, dict)):
        value = [value]

    items = []
    for index, item in enumerate(value):
        if isinstance(item, dict) and "position" not in item:
            item = {**item, "position": index}
        elif (
            isinstance(item, TransitionCandidate)
            and "position" not in item.model_fields_set
        ):
            item = item.model_copy(update={"position": index})
        items.append(item)
    return items


class StateNode(BaseSchema):
    """One node in the state tree.

    Attributes:
        name: Local identifier, unique among siblings.
        id: Optional globally unique identifier, addressable as ``#id``.
        path: Names from the root down to this node.
        automatic_transitions: Ordered automatic-transition candidates.
        children: Nested states in declaration order.

    """

    name: str
    id: str | None = None
    path: tuple[str, ...] = ()
    automatic_transitions: tuple[TransitionCandidate, ...] = ()
    children: tuple[StateNode, ...] = ()

    @field_validator("automatic_transitions", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        return normalize_candidates(value)

    @model_validator(mode="after")
    def _check_positions(self) -> StateNode:
        for index, candidate in enumerate(self.automatic_transitions):
            if candidate.position != index:
                raise ValueError(
                    f"Transition at index {index} of state '{self.name}' "
                    f"declares position {candidate.position}"
                )
        return self

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path) if self.path else self.name

    def walk(self) -> Iterator[StateNode]:
        """Yield this node and its descendants depth-first, in document order."""
        yield self
        for child in self.children:
            yield from child.walk()
