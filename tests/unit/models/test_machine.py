"""Unit tests for the config tree model."""

import pytest
from pydantic import ValidationError

from statechart_lint.models import (
    ActionKind,
    ActionRef,
    Guard,
    GuardKind,
    ParameterShape,
    StateNode,
    TransitionCandidate,
    normalize_candidates,
)


class TestGuard:
    """Tests for the Guard model."""

    def test_named(self) -> None:
        """Test building a named guard."""
        guard = Guard.named("isReady")
        assert guard.kind == GuardKind.named_reference
        assert guard.describe() == "isReady"

    def test_inline(self) -> None:
        """Test building an inline guard."""
        guard = Guard.inline(ParameterShape(count=0), source="() => true")
        assert guard.kind == GuardKind.inline_function
        assert guard.parameters == ParameterShape(count=0)
        assert guard.describe() == "() => true"

    def test_inline_without_source(self) -> None:
        """Test the label of an inline guard whose source is unknown."""
        assert Guard.inline(ParameterShape()).describe() == "<inline function>"

    def test_other(self) -> None:
        """Test the label of an opaque guard."""
        assert Guard.other().describe() == "<guard>"

    def test_is_immutable(self) -> None:
        """Test that guards cannot be modified after creation."""
        guard = Guard.named("isReady")
        with pytest.raises(ValidationError):
            guard.name = "other"  # type: ignore[misc]


class TestParameterShape:
    """Tests for the ParameterShape model."""

    def test_defaults(self) -> None:
        """Test that the default shape declares no parameters."""
        shape = ParameterShape()
        assert shape.count == 0
        assert shape.fields == frozenset()
        assert shape.open_pattern is False

    def test_negative_count_rejected(self) -> None:
        """Test that a negative parameter count is rejected."""
        with pytest.raises(ValidationError):
            ParameterShape(count=-1)


class TestTransitionCandidate:
    """Tests for the TransitionCandidate model."""

    def test_empty_candidate(self) -> None:
        """Test a candidate with neither target nor guard."""
        candidate = TransitionCandidate()
        assert candidate.position == 0
        assert candidate.has_target is False
        assert candidate.has_guard is False
        assert candidate.actions == ()

    def test_single_action_is_wrapped(self) -> None:
        """Test that a lone action becomes a one-element tuple."""
        candidate = TransitionCandidate(actions=ActionRef.assign())
        assert candidate.actions == (ActionRef.assign(),)

    def test_none_actions(self) -> None:
        """Test that missing actions become an empty tuple."""
        assert TransitionCandidate(actions=None).actions == ()

    def test_action_mappings(self) -> None:
        """Test that actions may be given as mappings."""
        candidate = TransitionCandidate(actions=[{"kind": "opaque", "name": "log"}])
        assert candidate.actions[0].kind == ActionKind.opaque

    def test_negative_position_rejected(self) -> None:
        """Test that positions are 0-based."""
        with pytest.raises(ValidationError):
            TransitionCandidate(position=-1)


class TestNormalizeCandidates:
    """Tests for normalize_candidates."""

    def test_none(self) -> None:
        """Test that a missing slot becomes an empty list."""
        assert normalize_candidates(None) == []

    def test_single_mapping(self) -> None:
        """Test that a lone mapping becomes a one-element list."""
        assert normalize_candidates({"target": "a"}) == [{"target": "a", "position": 0}]

    def test_single_candidate(self) -> None:
        """Test that a lone candidate model becomes a one-element list."""
        candidate = TransitionCandidate(position=0, target="a")
        assert normalize_candidates(candidate) == [candidate]

    def test_candidates_without_position_are_numbered(self) -> None:
        """Test that candidate models built without a position get their index."""
        items = normalize_candidates([TransitionCandidate(), TransitionCandidate(target="x")])
        assert [(c.position, c.target) for c in items] == [(0, None), (1, "x")]

    def test_explicit_candidate_position_is_kept(self) -> None:
        """Test that an explicitly numbered candidate model is left alone."""
        [item] = normalize_candidates([TransitionCandidate(position=4)])
        assert item.position == 4

    def test_positions_are_assigned(self) -> None:
        """Test that mappings are numbered by their index."""
        assert normalize_candidates([{}, {"target": "b"}]) == [
            {"position": 0},
            {"target": "b", "position": 1},
        ]


class TestStateNode:
    """Tests for the StateNode model."""

    def test_lone_candidate_is_normalized(self) -> None:
        """Test that a single automatic transition is treated as a sequence."""
        state = StateNode(name="idle", automatic_transitions={"target": "busy"})
        assert len(state.automatic_transitions) == 1
        assert state.automatic_transitions[0].target == "busy"

    def test_positions_follow_order(self) -> None:
        """Test that candidates are numbered in declaration order."""
        state = StateNode(name="idle", automatic_transitions=[{}, {}, {}])
        assert [c.position for c in state.automatic_transitions] == [0, 1, 2]

    def test_candidate_models_are_numbered(self) -> None:
        """Test building a state from candidate models without explicit positions."""
        state = StateNode(
            name="s",
            automatic_transitions=[TransitionCandidate(), TransitionCandidate(target="x")],
        )
        assert [(c.position, c.target) for c in state.automatic_transitions] == [
            (0, None),
            (1, "x"),
        ]

    def test_mismatched_position_rejected(self) -> None:
        """Test that a candidate's position must match its index."""
        with pytest.raises(ValidationError, match="declares position 3"):
            StateNode(
                name="idle",
                automatic_transitions=[TransitionCandidate(position=3)],
            )

    def test_dotted_path(self) -> None:
        """Test the dotted path of root and nested states."""
        assert StateNode(name="machine").dotted_path == "machine"
        assert StateNode(name="b", path=("a", "b")).dotted_path == "a.b"

    def test_walk_is_depth_first(self) -> None:
        """Test that walk yields nodes in document order."""
        root = StateNode(
            name="root",
            children=[
                StateNode(name="a", path=("a",), children=[StateNode(name="a1", path=("a", "a1"))]),
                StateNode(name="b", path=("b",)),
            ],
        )
        assert [node.name for node in root.walk()] == ["root", "a", "a1", "b"]
