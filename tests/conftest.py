"""Shared pytest fixtures for the AutoFix test suite."""

import pytest

from core.domain.entities import Issue, IssueLocation
from core.domain.enums import IssueCategory, Severity
from core.settings import AutoFixSettings


@pytest.fixture
def autofix_settings() -> AutoFixSettings:
    """Default workflow settings, independent of the environment."""
    return AutoFixSettings(
        confidence_threshold=90.0,
        audit_actor="AutoFixWorkflow",
        default_branch="main",
        commit_summary_length=50,
        log_level="INFO",
    )


@pytest.fixture
def issue_factory():
    """Build issues with sensible defaults; override any field by keyword."""

    def _make(
        category: IssueCategory = IssueCategory.SOFTWARE_COMPOSITION,
        *,
        issue_id: str = "ISSUE-1",
        severity: Severity = Severity.HIGH,
        description: str = "vulnerable lodash",
        **location_and_hints,
    ) -> Issue:
        location_fields = {
            key: location_and_hints.pop(key)
            for key in ("repository", "branch", "file_path", "resource_id", "region")
            if key in location_and_hints
        }
        return Issue(
            id=issue_id,
            category=category,
            severity=severity,
            description=description,
            location=IssueLocation(**location_fields),
            **location_and_hints,
        )

    return _make


@pytest.fixture
def sca_issue(issue_factory) -> Issue:
    return issue_factory(
        IssueCategory.SOFTWARE_COMPOSITION,
        issue_id="SCA-001",
        repository="example/payments",
        file_path="package.json",
    )


@pytest.fixture
def iac_issue(issue_factory) -> Issue:
    return issue_factory(
        IssueCategory.CLOUD_POSTURE,
        issue_id="CSPM-IAC-001",
        description="S3 bucket allows public read access",
        repository="example/infra",
        branch="develop",
        file_path="main.tf",
    )


@pytest.fixture
def cloud_issue(issue_factory) -> Issue:
    return issue_factory(
        IssueCategory.CLOUD_POSTURE,
        issue_id="CSPM-RES-001",
        description="Bucket encryption disabled",
        resource_id="bucket-1",
        region="us-east-1",
    )


@pytest.fixture
def pipeline_issue(issue_factory) -> Issue:
    return issue_factory(
        IssueCategory.PIPELINE_CONFIG,
        issue_id="PIPE-001",
        description="Workflow uses unpinned third-party action",
        repository="example/payments",
        file_path=".github/workflows/ci.yml",
    )


@pytest.fixture
def runtime_issue(issue_factory) -> Issue:
    return issue_factory(
        IssueCategory.RUNTIME_ALERT,
        issue_id="RT-001",
        severity=Severity.CRITICAL,
        description="Reverse shell spawned in container",
        resource_id="pod/checkout-7d9f",
    )
