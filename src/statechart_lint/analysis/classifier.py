"""Transition list classifier for automatic transitions.

The runtime evaluates a state's automatic transitions in order and takes
the first one whose guard passes (or that has no guard). A state whose
chosen transition neither leaves it nor changes the context is entered
again with identical inputs, so the chain never settles. This module
classifies every candidate of one state's sequence against that model:

- No target, no guard: the first such candidate always fires and changes
  nothing. Later ones are pointless unless they update the context.
- Unconditional self-transition: same as above, but re-enters the state.
- Guarded self-transition or guarded target-less transition: can only
  escape through a context update, and if first with a guard that ignores
  the context, its outcome never changes.
- A target outside the state ends the chain.

Each candidate yields at most one finding. Candidates are independent: a
finding on an earlier candidate never suppresses analysis of later ones.
"""

from typing import ClassVar

import structlog

from statechart_lint.analysis.actions import may_mutate_context
from statechart_lint.analysis.guards import guard_ignores_context
from statechart_lint.analysis.targets import resolves_to_owner
from statechart_lint.models.enums import Dialect, FindingCategory, FindingSeverity
from statechart_lint.models.finding import Finding
from statechart_lint.models.machine import StateNode, TransitionCandidate

__all__ = ["TransitionListClassifier", "classify_candidate", "classify_transitions"]

logger = structlog.get_logger(__name__)


class TransitionListClassifier:
    """Classifies the automatic-transition sequence of a state.

    Holds only the dialect, so one instance can be shared between threads.

    """

    SEVERITIES: ClassVar[dict[FindingCategory, FindingSeverity]] = {
        FindingCategory.unconditional_empty_transition_guaranteed_loop: FindingSeverity.high,
        FindingCategory.unconditional_self_transition_first_guaranteed_loop: FindingSeverity.high,
        FindingCategory.unconditional_self_transition_no_mutation: FindingSeverity.high,
        FindingCategory.empty_transition_not_first_suspicious: FindingSeverity.medium,
        FindingCategory.no_target_actions_without_mutation: FindingSeverity.medium,
        FindingCategory.conditional_self_transition_no_mutation: FindingSeverity.medium,
        FindingCategory.first_conditional_self_transition_guard_ignores_context: FindingSeverity.medium,
        FindingCategory.guarded_no_target_no_mutation: FindingSeverity.medium,
        FindingCategory.first_guarded_no_target_guard_ignores_context: FindingSeverity.medium,
    }

    MESSAGES: ClassVar[dict[FindingCategory, str]] = {
        FindingCategory.unconditional_empty_transition_guaranteed_loop: (
            "{ordinal} automatic transition of '{state}' has no target and no guard. "
            "It is always taken and changes nothing, which is an infinite loop."
        ),
        FindingCategory.empty_transition_not_first_suspicious: (
            "Automatic transition #{position} of '{state}' has no target, guard or "
            "actions. It does nothing and loops forever if no earlier transition is taken."
        ),
        FindingCategory.no_target_actions_without_mutation: (
            "Automatic transition #{position} of '{state}' has no target and its "
            "actions never update the context. It loops forever if no earlier "
            "transition is taken."
        ),
        FindingCategory.unconditional_self_transition_first_guaranteed_loop: (
            "First automatic transition of '{state}' unconditionally targets its own "
            "state ('{target}'). This is an infinite loop."
        ),
        FindingCategory.unconditional_self_transition_no_mutation: (
            "Automatic transition #{position} of '{state}' unconditionally targets its "
            "own state ('{target}') without updating the context. It loops forever "
            "if no earlier transition is taken."
        ),
        FindingCategory.conditional_self_transition_no_mutation: (
            "Automatic transition #{position} of '{state}' targets its own state "
            "('{target}') without updating the context. Once its guard passes it "
            "passes forever."
        ),
        FindingCategory.first_conditional_self_transition_guard_ignores_context: (
            "First automatic transition of '{state}' targets its own state "
            "('{target}') behind a guard that does not read the context. The guard "
            "either always passes (infinite loop) or never does (dead transition)."
        ),
        FindingCategory.guarded_no_target_no_mutation: (
            "Automatic transition #{position} of '{state}' has no target and its "
            "actions never update the context. Once its guard passes it passes forever."
        ),
        FindingCategory.first_guarded_no_target_guard_ignores_context: (
            "First automatic transition of '{state}' has no target and a guard that "
            "does not read the context. The guard either always passes (infinite "
            "loop) or never does (dead transition)."
        ),
    }

    def __init__(self, dialect: Dialect) -> None:
        """Initialize the classifier.

        Args:
            dialect: Guard convention of the analyzed configuration.

        """
        self.dialect = dialect

    def classify(self, state: StateNode) -> list[Finding]:
        """Classify every automatic-transition candidate of a state.

        Args:
            state: The owning state.

        Returns:
            Findings in candidate order, at most one per candidate.

        """
        findings: list[Finding] = []
        sequence_length = len(state.automatic_transitions)

        for candidate in state.automatic_transitions:
            category = self.categorize(candidate, state)
            if category is None:
                continue
            findings.append(
                self._build_finding(candidate, state, category, sequence_length)
            )

        if sequence_length:
            logger.debug(
                "state_classified",
                state=state.dotted_path,
                candidates=sequence_length,
                findings=len(findings),
            )
        return findings

    def categorize(
        self,
        candidate: TransitionCandidate,
        owner: StateNode,
    ) -> FindingCategory | None:
        """Pick the category of one candidate, or None when it is acceptable.

        Args:
            candidate: The candidate to classify.
            owner: The state owning the candidate.

        Returns:
            The finding category, or None.

        """
        is_first = candidate.position == 0

        if not candidate.has_target:
            if candidate.has_guard:
                return self._guarded(
                    candidate,
                    is_first,
                    FindingCategory.guarded_no_target_no_mutation,
                    FindingCategory.first_guarded_no_target_guard_ignores_context,
                )
            if is_first:
                return FindingCategory.unconditional_empty_transition_guaranteed_loop
            if may_mutate_context(candidate.actions):
                return None
            if not candidate.actions:
                return FindingCategory.empty_transition_not_first_suspicious
            return FindingCategory.no_target_actions_without_mutation

        if not resolves_to_owner(candidate, owner):
            return None

        if candidate.has_guard:
            return self._guarded(
                candidate,
                is_first,
                FindingCategory.conditional_self_transition_no_mutation,
                FindingCategory.first_conditional_self_transition_guard_ignores_context,
            )
        if is_first:
            return FindingCategory.unconditional_self_transition_first_guaranteed_loop
        if not may_mutate_context(candidate.actions):
            return FindingCategory.unconditional_self_transition_no_mutation
        return None

    def _guarded(
        self,
        candidate: TransitionCandidate,
        is_first: bool,
        no_mutation: FindingCategory,
        invariant_guard: FindingCategory,
    ) -> FindingCategory | None:
        if not may_mutate_context(candidate.actions):
            return no_mutation
        if (
            is_first
            and candidate.guard is not None
            and guard_ignores_context(candidate.guard, self.dialect)
        ):
            return invariant_guard
        return None

    def _build_finding(
        self,
        candidate: TransitionCandidate,
        state: StateNode,
        category: FindingCategory,
        sequence_length: int,
    ) -> Finding:
        data = {
            "state": state.dotted_path,
            "position": str(candidate.position),
        }
        if candidate.target is not None:
            data["target"] = candidate.target
        if candidate.guard is not None:
            data["guard"] = candidate.guard.describe()
        if category == FindingCategory.unconditional_empty_transition_guaranteed_loop:
            sole = sequence_length == 1
            data["sole"] = "true" if sole else "false"
            data["ordinal"] = "Sole" if sole else "First"

        return Finding(
            state_path=state.dotted_path,
            candidate=candidate,
            category=category,
            severity=self.SEVERITIES[category],
            message=self.MESSAGES[category].format(**data),
            context_data=data,
        )


def classify_candidate(
    candidate: TransitionCandidate,
    owner: StateNode,
    dialect: Dialect,
) -> FindingCategory | None:
    """Classify a single candidate of ``owner``'s automatic-transition sequence."""
    return TransitionListClassifier(dialect).categorize(candidate, owner)


def classify_transitions(state: StateNode, dialect: Dialect) -> list[Finding]:
    """Classify a state's automatic-transition sequence.

    Args:
        state: The owning state.
        dialect: Guard convention of the analyzed configuration.

    Returns:
        Findings in candidate order.

    """
    return TransitionListClassifier(dialect).classify(state)
