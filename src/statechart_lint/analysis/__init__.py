"""Automatic-transition loop analysis.

This package provides the analyzer components:
- resolves_to_owner: self-target resolution
- may_mutate_context: context-mutation detection over actions
- guard_ignores_context: dialect-aware guard evidence classification
- TransitionListClassifier: per-state decision procedure
- MachineAnalyzer: walk over a whole state tree

Nothing in this package raises on malformed input; unrecognized shapes
are classified as opaque and lead to no finding.
"""

from statechart_lint.analysis.actions import may_mutate_context
from statechart_lint.analysis.analyzer import MachineAnalyzer, analyze_machine
from statechart_lint.analysis.classifier import (
    TransitionListClassifier,
    classify_candidate,
    classify_transitions,
)
from statechart_lint.analysis.guards import guard_ignores_context
from statechart_lint.analysis.targets import resolves_to_owner

__all__ = [
    "MachineAnalyzer",
    "TransitionListClassifier",
    "analyze_machine",
    "classify_candidate",
    "classify_transitions",
    "guard_ignores_context",
    "may_mutate_context",
    "resolves_to_owner",
]
