"""Domain layer - pure domain models and interfaces."""

from .entities import Issue, IssueLocation
from .enums import ActionType, ExecutionStatus, IssueCategory, Severity
from .exceptions import AutoFixError, CollaboratorError, RoutingError
from .value_objects import (
    EnrichmentContext,
    ExecutionAction,
    ExecutionResult,
    ProposedFix,
    WorkflowID,
)

__all__ = [
    "ActionType",
    "AutoFixError",
    "CollaboratorError",
    "EnrichmentContext",
    "ExecutionAction",
    "ExecutionResult",
    "ExecutionStatus",
    "Issue",
    "IssueCategory",
    "IssueLocation",
    "ProposedFix",
    "RoutingError",
    "Severity",
    "WorkflowID",
]
