"""Guard evidence classification.

Decides whether an inline guard provably ignores the machine context,
which makes its result identical on every re-evaluation of the same state.
"""

from statechart_lint.models.enums import Dialect, GuardKind, ParameterKind
from statechart_lint.models.machine import Guard, ParameterShape

__all__ = ["CONTEXT_FIELD", "guard_ignores_context"]

CONTEXT_FIELD = "context"


def _destructured_ignores_context(shape: ParameterShape) -> bool:
    if shape.count == 0:
        return True
    # (...args) receives the guard argument object as args[0].
    if shape.first_kind == ParameterKind.rest:
        return False
    if shape.first_kind != ParameterKind.object_pattern:
        return True
    if shape.open_pattern:
        return False
    return CONTEXT_FIELD not in shape.fields


def guard_ignores_context(guard: Guard, dialect: Dialect) -> bool:
    """Check whether a guard provably does not read the context.

    Named and opaque guards are assumed to use the context. Inline guards are
    judged by their parameter list according to the dialect:

    - positional_context: the guard ignores context iff it declares no parameters.
    - destructured_context: the guard ignores context iff it has no parameter,
      its first parameter is neither a rest parameter nor an object pattern,
      or that pattern is closed and does not name ``context``.

    Args:
        guard: The guard to inspect.
        dialect: Guard convention of the analyzed configuration.

    Returns:
        True only when the guard provably ignores the context.

    """
    if guard.kind != GuardKind.inline_function or guard.parameters is None:
        return False

    shape = guard.parameters
    if dialect == Dialect.positional_context:
        return shape.count == 0
    return _destructured_ignores_context(shape)
