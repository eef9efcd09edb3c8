"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class WorkflowID:
    """Unique identifier for a single AutoFix workflow run."""

    value: UUID

    @classmethod
    def generate(cls) -> "WorkflowID":
        """Generate a new WorkflowID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation (``wf-<uuid>``)."""
        return f"wf-{self.value}"
