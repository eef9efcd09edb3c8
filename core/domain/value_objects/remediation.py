"""
Remediation value objects.

Data exchanged between the workflow engine and its collaborators:
enrichment context, proposed fix, execution action and execution result.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from core.domain.enums import ActionType, ExecutionStatus


@dataclass(frozen=True)
class EnrichmentContext:
    """
    Opaque enrichment bundle returned by the context collaborator.
    
    Holds application identity, ownership, git history and linked IaC/CI
    references. The workflow logs and forwards it but never reads inside.
    """
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(copy.deepcopy(dict(self.data))))

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy for audit and approval payloads."""
        return copy.deepcopy(dict(self.data))


@dataclass(frozen=True)
class ProposedFix:
    """
    Fix proposed by the fix-generation collaborator.
    
    Created once per workflow run and immutable afterwards.
    """
    content: str
    confidence: float
    rationale: str

    def __post_init__(self):
        if not 0.0 <= float(self.confidence) <= 100.0:
            raise ValueError(
                f"Confidence must be between 0 and 100, got: {self.confidence}"
            )
        object.__setattr__(self, "confidence", float(self.confidence))

    def to_dict(self) -> dict[str, Any]:
        return {
            "proposedFix": self.content,
            "confidence": self.confidence,
            "rationale": self.rationale,
        }


@dataclass(frozen=True)
class ExecutionAction:
    """Action type plus payload handed to the execution collaborator."""
    action_type: ActionType
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.action_type.value, "payload": dict(self.payload)}


@dataclass(frozen=True)
class ExecutionResult:
    """Job status returned by the execution collaborator."""
    job_id: str
    status: ExecutionStatus
    details: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobId": self.job_id,
            "status": self.status.value,
            "details": self.details,
        }
