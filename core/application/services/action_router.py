"""
Action Router.

Maps an issue (and the fix proposed for it) to the execution action the
execution collaborator should perform. Pure: no I/O, deterministic.
"""
from typing import Any, Dict

from core.domain.entities import Issue
from core.domain.enums import ActionType, IssueCategory
from core.domain.exceptions import RoutingError
from core.domain.value_objects import ExecutionAction, ProposedFix

DEFAULT_BRANCH = "main"
COMMIT_SUMMARY_LENGTH = 50

GENERIC_SUGGESTED_ACTION = "Review proposed fix"


def commit_message_for(issue: Issue, summary_length: int = COMMIT_SUMMARY_LENGTH) -> str:
    """Commit message shared by every patch-style action."""
    return f"fix: remediate {issue.id} - {issue.description[:summary_length]}"


def resolve_action_type(issue: Issue) -> ActionType:
    """
    Resolve the action type for an issue.
    
    Cloud posture findings are disambiguated by location: a file path means
    the finding lives in IaC and is fixed by committing a patch, a resource id
    alone means a live cloud resource. When both are present the file path
    wins.
    
    Raises:
        RoutingError: If the category is unknown, or a cloud posture issue
            carries neither a file path nor a resource id
    """
    category = issue.category
    if category.is_code_derived:
        return ActionType.GITOPS_APPLY_PATCH
    if category is IssueCategory.CLOUD_POSTURE:
        if issue.location.has_file_path:
            return ActionType.IAC_COMMIT_PATCH
        if issue.location.has_resource_id:
            return ActionType.CLOUD_APPLY_REMEDIATION
        raise RoutingError(
            issue.id, "cloud posture issue has neither filePath nor resourceId"
        )
    if category is IssueCategory.PIPELINE_CONFIG:
        return ActionType.PIPELINE_UPDATE_CONFIG
    if category is IssueCategory.RUNTIME_ALERT:
        return ActionType.RUNTIME_ISOLATE
    raise RoutingError(issue.id, f"unsupported issue category: {category!r}")


def route(
    issue: Issue,
    proposed_fix: ProposedFix,
    *,
    default_branch: str = DEFAULT_BRANCH,
    summary_length: int = COMMIT_SUMMARY_LENGTH,
) -> ExecutionAction:
    """
    Build the execution action for an issue and its proposed fix.
    
    Args:
        issue: Issue being remediated
        proposed_fix: Fix returned by the fix-generation collaborator
        default_branch: Branch used when the issue location has none
        summary_length: Characters of the description kept in commit messages
    
    Returns:
        ExecutionAction with action type and payload
    
    Raises:
        RoutingError: If the issue cannot be routed
    """
    action_type = resolve_action_type(issue)
    location = issue.location
    branch = location.branch or default_branch
    commit_message = commit_message_for(issue, summary_length)

    payload: Dict[str, Any]
    if action_type is ActionType.GITOPS_APPLY_PATCH:
        payload = {
            "repository": location.repository,
            "branch": branch,
            "patch": proposed_fix.content,
            "commitMessage": commit_message,
        }
    elif action_type in (ActionType.IAC_COMMIT_PATCH, ActionType.PIPELINE_UPDATE_CONFIG):
        payload = {
            "repository": location.repository,
            "branch": branch,
            "filePath": location.file_path,
            "patch": proposed_fix.content,
            "commitMessage": commit_message,
        }
    elif action_type is ActionType.CLOUD_APPLY_REMEDIATION:
        payload = {
            "resourceId": location.resource_id,
            "region": location.region,
            "remediationScript": proposed_fix.content,
        }
    else:
        payload = {
            "resourceId": location.resource_id,
            "reason": proposed_fix.rationale,
            "action": proposed_fix.content,
        }

    return ExecutionAction(action_type=action_type, payload=payload)


def suggested_action_for(issue: Issue) -> str:
    """
    Reviewer-facing label for the action an approval would trigger.
    
    Falls back to a generic label when the issue cannot be routed, so
    queuing for approval never fails on a routing ambiguity.
    """
    try:
        return resolve_action_type(issue).suggested_action
    except RoutingError:
        return GENERIC_SUGGESTED_ACTION
