"""
DTOs for incoming scanner findings.

Validates raw findings as reported by the risk-assessment feed and converts
them into normalized domain issues.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.domain.entities import Issue, IssueLocation
from core.domain.enums import IssueCategory, Severity

# IaC findings are file-addressed posture findings.
_SOURCE_CATEGORIES = {
    "SAST": IssueCategory.STATIC_ANALYSIS,
    "SCA": IssueCategory.SOFTWARE_COMPOSITION,
    "IaC": IssueCategory.CLOUD_POSTURE,
    "CSPM": IssueCategory.CLOUD_POSTURE,
    "PIPELINE": IssueCategory.PIPELINE_CONFIG,
    "RUNTIME": IssueCategory.RUNTIME_ALERT,
}


class SourceLocationDTO(BaseModel):
    """Location block of a scanner finding."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    repository: Optional[str] = None
    branch: Optional[str] = None
    file_path: Optional[str] = Field(default=None, alias="filePath")
    resource_id: Optional[str] = Field(default=None, alias="resourceId")
    region: Optional[str] = None


class ScannerFindingDTO(BaseModel):
    """Raw finding from a SAST/SCA/IaC/CSPM/pipeline/runtime scanner."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "issueId": "SCA-001",
                "type": "SCA",
                "severity": "High",
                "riskScore": 0.82,
                "sourceLocation": {
                    "repository": "example/payments",
                    "branch": "main",
                    "filePath": "package.json",
                },
                "description": "vulnerable lodash",
            }
        },
    )

    issue_id: str = Field(..., alias="issueId", min_length=1)
    type: Literal["SAST", "SCA", "IaC", "CSPM", "PIPELINE", "RUNTIME"]
    severity: Severity
    description: str
    risk_score: Optional[float] = Field(default=None, alias="riskScore", ge=0.0, le=1.0)
    source_location: SourceLocationDTO = Field(
        default_factory=SourceLocationDTO, alias="sourceLocation"
    )
    code_snippet: Optional[str] = Field(default=None, alias="codeSnippet")
    language: Optional[str] = None
    file_owner: Optional[str] = Field(default=None, alias="fileOwner")

    @field_validator("issue_id")
    @classmethod
    def strip_issue_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("issueId must not be blank")
        return v

    @property
    def category(self) -> IssueCategory:
        return _SOURCE_CATEGORIES[self.type]

    def to_issue(self) -> Issue:
        """Convert to the normalized domain issue."""
        location = self.source_location
        return Issue(
            id=self.issue_id,
            category=self.category,
            severity=self.severity,
            description=self.description,
            location=IssueLocation(
                repository=location.repository,
                branch=location.branch,
                file_path=location.file_path,
                resource_id=location.resource_id,
                region=location.region,
            ),
            risk_score=self.risk_score,
            code_snippet=self.code_snippet,
            language=self.language,
            file_owner=self.file_owner,
        )
