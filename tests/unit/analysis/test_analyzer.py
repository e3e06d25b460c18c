"""Unit tests for the machine analyzer."""

import pytest

from statechart_lint.analysis import MachineAnalyzer, analyze_machine
from statechart_lint.models import Dialect, FindingCategory, StateNode


def _machine() -> StateNode:
    """Build a small tree with findings in several states."""
    return StateNode(
        name="checkout",
        automatic_transitions=[{"target": "cart"}],
        children=[
            StateNode(
                name="cart",
                path=("cart",),
                automatic_transitions=[{}],
                children=[
                    StateNode(
                        name="empty",
                        path=("cart", "empty"),
                        automatic_transitions=[{"target": "empty"}],
                    ),
                ],
            ),
            StateNode(name="paying", path=("paying",)),
            StateNode(
                name="done",
                path=("done",),
                automatic_transitions=[{"target": "cart"}, {}],
            ),
        ],
    )


EXPECTED = [
    ("cart", FindingCategory.unconditional_empty_transition_guaranteed_loop),
    ("cart.empty", FindingCategory.unconditional_self_transition_first_guaranteed_loop),
    ("done", FindingCategory.empty_transition_not_first_suspicious),
]


class TestMachineAnalyzer:
    """Tests for MachineAnalyzer."""

    @pytest.mark.parametrize("workers", [1, 2, 8])
    def test_findings_in_document_order(self, workers: int) -> None:
        """Test that findings follow depth-first document order for any pool size."""
        analyzer = MachineAnalyzer(Dialect.destructured_context, max_workers=workers)

        findings = analyzer.analyze(_machine())

        assert [(f.state_path, f.category) for f in findings] == EXPECTED

    def test_worker_count_is_clamped(self) -> None:
        """Test that a non-positive worker count falls back to inline analysis."""
        analyzer = MachineAnalyzer(Dialect.positional_context, max_workers=0)
        assert analyzer.max_workers == 1

    def test_machine_without_automatic_transitions(self) -> None:
        """Test that a tree without automatic transitions yields nothing."""
        root = StateNode(name="m", children=[StateNode(name="a", path=("a",))])
        assert MachineAnalyzer(Dialect.destructured_context).analyze(root) == []

    def test_analyze_machine(self) -> None:
        """Test the functional entry point."""
        findings = analyze_machine(_machine(), Dialect.destructured_context, max_workers=1)
        assert [(f.state_path, f.category) for f in findings] == EXPECTED
