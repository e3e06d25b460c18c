"""Context-mutation detection over a transition's actions."""

from collections.abc import Iterable

from statechart_lint.models.enums import ActionKind
from statechart_lint.models.machine import ActionRef

__all__ = ["may_mutate_context"]

# Named actions may be undisclosed context updates, so they count as mutating.
_MUTATING_KINDS = frozenset(
    {ActionKind.context_assignment, ActionKind.named_or_referenced}
)


def may_mutate_context(actions: Iterable[ActionRef]) -> bool:
    """Check whether any action updates, or may update, the machine context.

    Args:
        actions: Actions attached to a transition.

    Returns:
        False only when every action is opaque or there are none.

    """
    return any(action.kind in _MUTATING_KINDS for action in actions)
