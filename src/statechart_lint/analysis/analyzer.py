"""Machine-wide analysis of automatic transitions.

Walks a state tree and classifies each state's automatic-transition
sequence. States are independent, so they may be classified on a thread
pool; results are always returned in document order.
"""

from concurrent.futures import ThreadPoolExecutor

import structlog

from statechart_lint.analysis.classifier import TransitionListClassifier
from statechart_lint.config.defaults import DEFAULT_MAX_WORKERS
from statechart_lint.models.enums import Dialect
from statechart_lint.models.finding import Finding
from statechart_lint.models.machine import StateNode

__all__ = ["MachineAnalyzer", "analyze_machine"]

logger = structlog.get_logger(__name__)


class MachineAnalyzer:
    """Runs the transition list classifier over every state of a machine."""

    def __init__(
        self,
        dialect: Dialect,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the analyzer.

        Args:
            dialect: Guard convention of the analyzed configuration.
            max_workers: Maximum parallel workers; 1 classifies inline.

        """
        self.dialect = dialect
        self.max_workers = max(1, max_workers)
        self._classifier = TransitionListClassifier(dialect)

    def analyze(self, root: StateNode) -> list[Finding]:
        """Classify every state reachable from ``root``.

        Args:
            root: Root of the state tree.

        Returns:
            Findings grouped by state in depth-first document order.

        """
        states = [state for state in root.walk() if state.automatic_transitions]

        if self.max_workers == 1 or len(states) < 2:
            per_state = [self._classifier.classify(state) for state in states]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                per_state = list(executor.map(self._classifier.classify, states))

        findings = [finding for state_findings in per_state for finding in state_findings]

        logger.debug(
            "analysis_completed",
            machine=root.name,
            dialect=self.dialect.value,
            states_with_transitions=len(states),
            total_findings=len(findings),
        )
        return findings


def analyze_machine(
    root: StateNode,
    dialect: Dialect,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[Finding]:
    """Classify the automatic transitions of every state in a machine.

    Args:
        root: Root of the state tree.
        dialect: Guard convention of the analyzed configuration.
        max_workers: Maximum parallel workers.

    Returns:
        Findings in document order.

    """
    return MachineAnalyzer(dialect, max_workers=max_workers).analyze(root)
