"""Data models for statechart-lint.

Exports the config tree model consumed by the analyzer, the finding
models it produces, and the shared enumerations.
"""

from statechart_lint.models.base import BaseSchema
from statechart_lint.models.enums import (
    ActionKind,
    Dialect,
    FindingCategory,
    FindingSeverity,
    GuardKind,
    ParameterKind,
)
from statechart_lint.models.finding import Finding, LintReport
from statechart_lint.models.machine import (
    ActionRef,
    Guard,
    ParameterShape,
    StateNode,
    TransitionCandidate,
    normalize_candidates,
)

__all__ = [
    "ActionKind",
    "ActionRef",
    "BaseSchema",
    "Dialect",
    "Finding",
    "FindingCategory",
    "FindingSeverity",
    "Guard",
    "GuardKind",
    "LintReport",
    "ParameterKind",
    "ParameterShape",
    "StateNode",
    "TransitionCandidate",
    "normalize_candidates",
]
