"""Unit tests for self-target resolution."""

from statechart_lint.analysis.targets import resolves_to_owner
from statechart_lint.models import StateNode, TransitionCandidate


def _owner(name: str = "idle", state_id: str | None = None) -> StateNode:
    return StateNode(name=name, id=state_id)


class TestResolvesToOwner:
    """Tests for resolves_to_owner."""

    def test_no_target_never_resolves(self) -> None:
        """Test that a candidate without a target does not resolve."""
        assert resolves_to_owner(TransitionCandidate(), _owner()) is False

    def test_bare_name_matches_owner_name(self) -> None:
        """Test that a bare target equal to the owner's name resolves."""
        candidate = TransitionCandidate(target="idle")
        assert resolves_to_owner(candidate, _owner("idle", "#foo")) is True

    def test_bare_name_of_other_state(self) -> None:
        """Test that a bare target naming another state does not resolve."""
        candidate = TransitionCandidate(target="running")
        assert resolves_to_owner(candidate, _owner("idle")) is False

    def test_dotted_relative_path_is_compared_verbatim(self) -> None:
        """Test that a dotted relative target is not the owner itself."""
        candidate = TransitionCandidate(target="idle.child")
        assert resolves_to_owner(candidate, _owner("idle")) is False

    def test_id_target_matches_owner_id_with_prefix(self) -> None:
        """Test that '#foo' resolves to an owner declared with id '#foo'."""
        candidate = TransitionCandidate(target="#foo")
        assert resolves_to_owner(candidate, _owner("idle", "#foo")) is True

    def test_id_target_matches_owner_id_without_prefix(self) -> None:
        """Test that '#foo' resolves to an owner declared with id 'foo'."""
        candidate = TransitionCandidate(target="#foo")
        assert resolves_to_owner(candidate, _owner("idle", "foo")) is True

    def test_id_target_of_other_state(self) -> None:
        """Test that '#bar' does not resolve to an owner with id '#foo'."""
        candidate = TransitionCandidate(target="#bar")
        assert resolves_to_owner(candidate, _owner("idle", "#foo")) is False

    def test_id_target_uses_segment_before_first_dot(self) -> None:
        """Test that only the id segment of an absolute path is compared."""
        candidate = TransitionCandidate(target="#foo.child")
        assert resolves_to_owner(candidate, _owner("idle", "foo")) is True

    def test_id_target_without_owner_id(self) -> None:
        """Test that an absolute target cannot resolve to an owner lacking an id."""
        candidate = TransitionCandidate(target="#idle")
        assert resolves_to_owner(candidate, _owner("idle")) is False

    def test_bare_hash_never_resolves(self) -> None:
        """Test that a malformed '#' target does not resolve."""
        candidate = TransitionCandidate(target="#")
        assert resolves_to_owner(candidate, _owner("idle", "#")) is False

    def test_id_is_not_matched_against_name(self) -> None:
        """Test that an absolute target is never compared with the name."""
        candidate = TransitionCandidate(target="#idle")
        assert resolves_to_owner(candidate, _owner("idle", "other")) is False
