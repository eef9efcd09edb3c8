"""Tests for the advisory policy engine."""

from core.application.services.policy_engine import evaluate_policy
from core.domain.enums import IssueCategory, Severity


def test_critical_issues_require_approval(issue_factory):
    issue = issue_factory(IssueCategory.STATIC_ANALYSIS, severity=Severity.CRITICAL)

    decision = evaluate_policy(issue)

    assert decision.policy_id == "manual-critical"
    assert decision.requires_approval is True
    assert decision.auto_remediate is False


def test_code_and_pipeline_issues_are_auto_remediated(issue_factory):
    for category in (IssueCategory.STATIC_ANALYSIS, IssueCategory.PIPELINE_CONFIG):
        decision = evaluate_policy(issue_factory(category, severity=Severity.HIGH))

        assert decision.policy_id == "auto-safe-code"
        assert decision.auto_remediate is True
        assert decision.requires_approval is False


def test_other_issues_default_to_approval(sca_issue, cloud_issue):
    assert evaluate_policy(sca_issue).policy_id == "default-approval"
    assert evaluate_policy(cloud_issue).policy_id == "default-approval"
