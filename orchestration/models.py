"""Orchestration models - AuditEntry, AuditLog, ApprovalPayload, WorkflowResult."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from core.domain.entities import Issue
from core.domain.value_objects import (
    EnrichmentContext,
    ExecutionResult,
    ProposedFix,
)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class WorkflowStatus(str, Enum):
    """Terminal status of an AutoFix workflow run."""

    COMPLETED_AUTOMATIC = "COMPLETED_AUTOMATIC"
    AWAITING_APPROVAL = "AWAITING_APPROVAL"
    FAILED = "FAILED"


@dataclass(frozen=True)
class AuditEntry:
    """A single step recorded by a workflow run."""

    timestamp: datetime
    actor: str
    action: str
    details: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "actor": self.actor,
            "action": self.action,
            "details": self.details,
        }


class AuditLog:
    """Append-only, ordered audit trail for one workflow run.

    Timestamps never go backwards: an entry recorded after a wall-clock
    adjustment reuses the previous entry's timestamp.
    """

    def __init__(self, actor: str) -> None:
        self._actor = actor
        self._entries: list[AuditEntry] = []

    def record(self, action: str, details: Any = None) -> AuditEntry:
        """Append an entry and return it.

        Args:
            action: What happened
            details: Structured details for the step

        Returns:
            The appended AuditEntry
        """
        timestamp = utc_now()
        if self._entries and timestamp < self._entries[-1].timestamp:
            timestamp = self._entries[-1].timestamp
        entry = AuditEntry(timestamp=timestamp, actor=self._actor, action=action, details=details)
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> tuple[AuditEntry, ...]:
        """Snapshot of the entries recorded so far."""
        return tuple(self._entries)

    def actions(self) -> list[str]:
        return [entry.action for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class ApprovalPayload:
    """Bundle handed to the human-approval queue."""

    issue: Issue
    context: EnrichmentContext
    proposed_fix: ProposedFix
    suggested_action: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "issue": self.issue.to_dict(),
            "context": self.context.to_dict(),
            "llmResponse": self.proposed_fix.to_dict(),
            "suggestedAction": self.suggested_action,
        }


@dataclass(frozen=True)
class RemediationMetrics:
    """Timing of a workflow run."""

    workflow_start_time: datetime
    workflow_end_time: datetime

    @property
    def time_to_fix_ms(self) -> int:
        return int((self.workflow_end_time - self.workflow_start_time).total_seconds() * 1000)

    def to_dict(self) -> dict[str, Any]:
        return {
            "workflowStartTime": self.workflow_start_time.isoformat(),
            "workflowEndTime": self.workflow_end_time.isoformat(),
            "timeToFix": self.time_to_fix_ms,
        }


@dataclass
class WorkflowResult:
    """Result of an AutoFix workflow run.

    Exactly one of ``execution_result``, ``approval_payload`` and ``error`` is
    set, matching ``status``.
    """

    workflow_id: str
    issue_id: str
    status: WorkflowStatus
    decision: str
    audit_log: tuple[AuditEntry, ...] = field(default_factory=tuple)
    context: EnrichmentContext | None = None
    proposed_fix: ProposedFix | None = None
    execution_result: ExecutionResult | None = None
    approval_payload: ApprovalPayload | None = None
    error: str | None = None
    metrics: RemediationMetrics | None = None

    def __post_init__(self) -> None:
        expected = {
            WorkflowStatus.COMPLETED_AUTOMATIC: "execution_result",
            WorkflowStatus.AWAITING_APPROVAL: "approval_payload",
            WorkflowStatus.FAILED: "error",
        }[self.status]
        populated = [
            name
            for name in ("execution_result", "approval_payload", "error")
            if getattr(self, name) is not None
        ]
        if populated != [expected]:
            raise ValueError(
                f"{self.status.value} result must set only {expected}, got: {populated}"
            )

    @property
    def succeeded(self) -> bool:
        return self.status is not WorkflowStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        """Convert result to a JSON-friendly dictionary."""
        data: dict[str, Any] = {
            "workflowId": self.workflow_id,
            "issueId": self.issue_id,
            "status": self.status.value,
            "decision": self.decision,
            "auditLog": [entry.to_dict() for entry in self.audit_log],
        }
        if self.context is not None:
            data["context"] = self.context.to_dict()
        if self.proposed_fix is not None:
            data["llmResponse"] = self.proposed_fix.to_dict()
        if self.execution_result is not None:
            data["mcpResponse"] = self.execution_result.to_dict()
        if self.approval_payload is not None:
            data["approvalPayload"] = self.approval_payload.to_dict()
        if self.error is not None:
            data["error"] = self.error
        if self.metrics is not None:
            data["metrics"] = self.metrics.to_dict()
        return data
