"""Domain value objects."""

from .value_objects import WorkflowID
from .remediation import (
    EnrichmentContext,
    ExecutionAction,
    ExecutionResult,
    ProposedFix,
)

__all__ = [
    "WorkflowID",
    "EnrichmentContext",
    "ExecutionAction",
    "ExecutionResult",
    "ProposedFix",
]
