"""Self-target resolution for automatic transitions."""

from statechart_lint.models.machine import StateNode, TransitionCandidate

__all__ = ["resolves_to_owner"]

ID_PREFIX = "#"


def _strip_id_prefix(value: str) -> str:
    return value[len(ID_PREFIX) :] if value.startswith(ID_PREFIX) else value


def resolves_to_owner(candidate: TransitionCandidate, owner: StateNode) -> bool:
    """Check whether a candidate's target denotes its owning state.

    ``#id`` targets are compared by the segment before the first ``.``
    against the owner's id (with or without its own ``#``). Any other
    target is compared verbatim against the owner's name. A ``#`` target on
    an owner without an id never resolves.

    Args:
        candidate: The transition candidate.
        owner: The state whose automatic-transition sequence holds the candidate.

    Returns:
        True if the target resolves to the owner.

    """
    if not candidate.has_target:
        return False

    target = candidate.target or ""
    if target.startswith(ID_PREFIX):
        if not owner.id:
            return False
        referenced_id = _strip_id_prefix(target).split(".", 1)[0]
        return bool(referenced_id) and referenced_id == _strip_id_prefix(owner.id)

    return target == owner.name
