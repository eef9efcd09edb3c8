"""
Policy Engine.

Advisory remediation policy by severity and source category. The AutoFix
workflow decides on confidence alone; callers wrapping it can consult this
before triggering a run.
"""
from dataclasses import dataclass

from core.domain.entities import Issue
from core.domain.enums import IssueCategory, Severity

AUTO_REMEDIATE_CATEGORIES = frozenset(
    {IssueCategory.STATIC_ANALYSIS, IssueCategory.PIPELINE_CONFIG}
)


@dataclass(frozen=True)
class PolicyDecision:
    """Outcome of a policy evaluation."""

    auto_remediate: bool
    requires_approval: bool
    policy_id: str


def evaluate_policy(issue: Issue) -> PolicyDecision:
    """
    Evaluate the remediation policy for an issue.
    
    Critical findings always need a human. Code and pipeline findings may
    be fixed automatically. Everything else defaults to approval.
    """
    if issue.severity is Severity.CRITICAL:
        return PolicyDecision(auto_remediate=False, requires_approval=True, policy_id="manual-critical")

    if issue.category in AUTO_REMEDIATE_CATEGORIES:
        return PolicyDecision(auto_remediate=True, requires_approval=False, policy_id="auto-safe-code")

    return PolicyDecision(auto_remediate=False, requires_approval=True, policy_id="default-approval")
