"""Unit tests for context-mutation detection."""

from statechart_lint.analysis.actions import may_mutate_context
from statechart_lint.models import ActionRef


class TestMayMutateContext:
    """Tests for may_mutate_context."""

    def test_no_actions(self) -> None:
        """Test that an empty action list cannot mutate the context."""
        assert may_mutate_context([]) is False

    def test_context_assignment(self) -> None:
        """Test that a context assignment mutates the context."""
        assert may_mutate_context([ActionRef.assign()]) is True

    def test_named_action_is_assumed_to_mutate(self) -> None:
        """Test that a named action is optimistically treated as mutating."""
        assert may_mutate_context([ActionRef.named("incrementRetries")]) is True

    def test_only_opaque_actions(self) -> None:
        """Test that function literals and built-ins are not treated as mutating."""
        actions = [ActionRef.opaque("fn"), ActionRef.opaque("log")]
        assert may_mutate_context(actions) is False

    def test_any_mutating_action_wins(self) -> None:
        """Test that one mutating action among opaque ones is enough."""
        actions = [ActionRef.opaque("log"), ActionRef.assign()]
        assert may_mutate_context(actions) is True

    def test_accepts_generators(self) -> None:
        """Test that any iterable of actions is accepted."""
        assert may_mutate_context(a for a in [ActionRef.named("bump")]) is True
