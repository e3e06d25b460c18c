"""Finding and report models produced by the analyzer."""

from pydantic import Field

from statechart_lint.models.base import BaseSchema
from statechart_lint.models.enums import Dialect, FindingCategory, FindingSeverity
from statechart_lint.models.machine import TransitionCandidate

__all__ = ["Finding", "LintReport"]


class Finding(BaseSchema):
    """One classification emitted for an automatic-transition candidate.

    Attributes:
        state_path: Dotted path of the state owning the candidate.
        candidate: The classified candidate.
        category: Classification category.
        severity: Severity of the category.
        message: Human-readable description.
        context_data: Values used to render the message.

    """

    state_path: str = Field(..., min_length=1)
    candidate: TransitionCandidate
    category: FindingCategory
    severity: FindingSeverity
    message: str = Field(..., min_length=1)
    context_data: dict[str, str] = Field(default_factory=dict)

    @property
    def position(self) -> int:
        return self.candidate.position


class LintReport(BaseSchema):
    """Analysis result for one machine document.

    Attributes:
        source: Path of the analyzed document.
        machine_id: Id of the machine's root state.
        dialect: Guard dialect the document was analyzed with.
        state_count: Number of states in the tree.
        findings: Findings in document order.

    """

    source: str
    machine_id: str
    dialect: Dialect
    state_count: int = Field(default=0, ge=0)
    findings: list[Finding] = Field(default_factory=list)

    def has_findings(self) -> bool:
        return bool(self.findings)

    def get_summary(self) -> dict[str, object]:
        """Get a JSON-serializable summary of the report."""
        return {
            "source": self.source,
            "machine_id": self.machine_id,
            "dialect": self.dialect.value,
            "state_count": self.state_count,
            "findings": [
                {
                    "state": finding.state_path,
                    "position": finding.position,
                    "category": finding.category.value,
                    "severity": finding.severity.value,
                    "message": finding.message,
                    "data": finding.context_data,
                }
                for finding in self.findings
            ],
        }
