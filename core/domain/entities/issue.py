"""
Issue Entity.

Normalized representation of a security finding, independent of the
scanner category that produced it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from core.domain.enums import IssueCategory, Severity


@dataclass(frozen=True)
class IssueLocation:
    """
    Where a finding lives.
    
    Two addressing schemes share this object:
    - repository + branch + file_path for code, IaC and pipeline findings
    - resource_id + region for cloud and runtime findings
    
    Either scheme may be partially present; the issue category decides
    which fields are meaningful.
    """
    repository: Optional[str] = None
    branch: Optional[str] = None
    file_path: Optional[str] = None
    resource_id: Optional[str] = None
    region: Optional[str] = None

    @property
    def has_file_path(self) -> bool:
        return bool(self.file_path)

    @property
    def has_resource_id(self) -> bool:
        return bool(self.resource_id)

    def to_dict(self) -> dict[str, Any]:
        """Return only the populated fields."""
        data = {
            "repository": self.repository,
            "branch": self.branch,
            "filePath": self.file_path,
            "resourceId": self.resource_id,
            "region": self.region,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Issue:
    """
    Immutable input to the AutoFix workflow.
    
    The optional enrichment hints (risk_score, code_snippet, language,
    file_owner) are only expected on code-derived issues.
    """
    id: str
    category: IssueCategory
    severity: Severity
    description: str
    location: IssueLocation = field(default_factory=IssueLocation)
    risk_score: Optional[float] = None
    code_snippet: Optional[str] = None
    language: Optional[str] = None
    file_owner: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Issue id must not be empty")

        if not isinstance(self.category, IssueCategory):
            object.__setattr__(self, "category", IssueCategory(self.category))
        if not isinstance(self.severity, Severity):
            object.__setattr__(self, "severity", Severity(self.severity))

        if self.risk_score is not None and not 0.0 <= self.risk_score <= 1.0:
            raise ValueError(
                f"Risk score must be between 0.0 and 1.0, got: {self.risk_score}"
            )

    def enrichment_hints(self) -> dict[str, Any]:
        """
        Return the enrichment hints present on this issue.
        
        Keys keep a fixed order (risk score, code snippet, language, file
        owner) so prompts built from them are deterministic.
        """
        hints = {
            "riskScore": self.risk_score,
            "codeSnippet": self.code_snippet,
            "language": self.language,
            "fileOwner": self.file_owner,
        }
        return {key: value for key, value in hints.items() if value is not None}

    def to_dict(self) -> dict[str, Any]:
        """Convert issue to dictionary for audit and approval payloads."""
        data = {
            "id": self.id,
            "type": self.category.value,
            "severity": self.severity.value,
            "location": self.location.to_dict(),
            "description": self.description,
        }
        data.update(self.enrichment_hints())
        return data
