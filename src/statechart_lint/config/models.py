"""Loaded machine document model."""

from statechart_lint.models.base import BaseSchema
from statechart_lint.models.enums import Dialect
from statechart_lint.models.machine import StateNode

__all__ = ["MachineDocument"]


class MachineDocument(BaseSchema):
    """A machine configuration loaded from a document.

    Attributes:
        source: Where the document came from (file path or label).
        schema_version: Schema version the document is analyzed with.
        dialect: Guard dialect matching the schema version.
        root: Root state of the machine.

    """

    source: str
    schema_version: int
    dialect: Dialect
    root: StateNode

    @property
    def machine_id(self) -> str:
        return self.root.id or self.root.name

    @property
    def state_count(self) -> int:
        return sum(1 for _ in self.root.walk())

    @property
    def transition_count(self) -> int:
        return sum(len(state.automatic_transitions) for state in self.root.walk())

    def get_summary(self) -> dict[str, object]:
        """Get a JSON-serializable summary of the document."""
        return {
            "source": self.source,
            "machine_id": self.machine_id,
            "schema_version": self.schema_version,
            "dialect": self.dialect.value,
            "state_count": self.state_count,
            "automatic_transitions": self.transition_count,
        }
