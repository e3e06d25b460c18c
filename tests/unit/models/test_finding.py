"""Unit tests for finding and report models."""

import json

import pytest
from pydantic import ValidationError

from statechart_lint.models import (
    Dialect,
    Finding,
    FindingCategory,
    FindingSeverity,
    LintReport,
    TransitionCandidate,
)


def _finding(position: int = 1) -> Finding:
    return Finding(
        state_path="cart",
        candidate=TransitionCandidate(position=position),
        category=FindingCategory.empty_transition_not_first_suspicious,
        severity=FindingSeverity.medium,
        message="Automatic transition #1 of 'cart' does nothing.",
        context_data={"state": "cart", "position": str(position)},
    )


class TestFinding:
    """Tests for the Finding model."""

    def test_position(self) -> None:
        """Test that the position comes from the candidate."""
        assert _finding(position=3).position == 3

    def test_empty_message_rejected(self) -> None:
        """Test that findings must carry a message."""
        with pytest.raises(ValidationError):
            Finding(
                state_path="cart",
                candidate=TransitionCandidate(),
                category=FindingCategory.guarded_no_target_no_mutation,
                severity=FindingSeverity.medium,
                message="",
            )


class TestLintReport:
    """Tests for the LintReport model."""

    def test_without_findings(self) -> None:
        """Test an empty report."""
        report = LintReport(
            source="m.yaml",
            machine_id="m",
            dialect=Dialect.destructured_context,
        )
        assert report.has_findings() is False
        assert report.get_summary()["findings"] == []

    def test_summary(self) -> None:
        """Test that the summary is JSON-serializable and complete."""
        report = LintReport(
            source="m.yaml",
            machine_id="checkout",
            dialect=Dialect.positional_context,
            state_count=4,
            findings=[_finding()],
        )

        summary = report.get_summary()

        assert report.has_findings() is True
        assert summary["dialect"] == "positional_context"
        assert summary["state_count"] == 4
        assert summary["findings"] == [
            {
                "state": "cart",
                "position": 1,
                "category": "empty_transition_not_first_suspicious",
                "severity": "medium",
                "message": "Automatic transition #1 of 'cart' does nothing.",
                "data": {"state": "cart", "position": "1"},
            }
        ]
        json.dumps(summary)
