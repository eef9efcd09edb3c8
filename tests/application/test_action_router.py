"""Tests for the action router."""

import pytest

from core.application.services.action_router import (
    commit_message_for,
    resolve_action_type,
    route,
    suggested_action_for,
)
from core.domain.enums import ActionType, IssueCategory
from core.domain.exceptions import RoutingError
from core.domain.value_objects import ProposedFix


@pytest.fixture
def fix() -> ProposedFix:
    return ProposedFix(content="PATCH", confidence=95, rationale="RATIONALE")


@pytest.mark.parametrize(
    "issue_fixture, expected",
    [
        ("sca_issue", ActionType.GITOPS_APPLY_PATCH),
        ("iac_issue", ActionType.IAC_COMMIT_PATCH),
        ("cloud_issue", ActionType.CLOUD_APPLY_REMEDIATION),
        ("pipeline_issue", ActionType.PIPELINE_UPDATE_CONFIG),
        ("runtime_issue", ActionType.RUNTIME_ISOLATE),
    ],
)
def test_route_covers_every_category(request, fix, issue_fixture, expected):
    issue = request.getfixturevalue(issue_fixture)

    action = route(issue, fix)

    assert action.action_type == expected


def test_static_analysis_uses_git_patch(issue_factory, fix):
    issue = issue_factory(IssueCategory.STATIC_ANALYSIS, repository="example/api")

    action = route(issue, fix)

    assert action.action_type == ActionType.GITOPS_APPLY_PATCH


def test_route_is_deterministic(sca_issue, fix):
    assert route(sca_issue, fix) == route(sca_issue, fix)


def test_git_patch_payload(sca_issue, fix):
    action = route(sca_issue, fix)

    assert action.payload == {
        "repository": "example/payments",
        "branch": "main",
        "patch": "PATCH",
        "commitMessage": "fix: remediate SCA-001 - vulnerable lodash",
    }


def test_iac_payload_keeps_issue_branch(iac_issue, fix):
    action = route(iac_issue, fix)

    assert action.payload == {
        "repository": "example/infra",
        "branch": "develop",
        "filePath": "main.tf",
        "patch": "PATCH",
        "commitMessage": "fix: remediate CSPM-IAC-001 - S3 bucket allows public read access",
    }


def test_pipeline_payload(pipeline_issue, fix):
    action = route(pipeline_issue, fix)

    assert action.payload["filePath"] == ".github/workflows/ci.yml"
    assert action.payload["branch"] == "main"
    assert action.payload["patch"] == "PATCH"


def test_cloud_payload(cloud_issue, fix):
    action = route(cloud_issue, fix)

    assert action.payload == {
        "resourceId": "bucket-1",
        "region": "us-east-1",
        "remediationScript": "PATCH",
    }


def test_runtime_payload_uses_rationale_as_reason(runtime_issue, fix):
    action = route(runtime_issue, fix)

    assert action.payload == {
        "resourceId": "pod/checkout-7d9f",
        "reason": "RATIONALE",
        "action": "PATCH",
    }


def test_default_branch_is_configurable(sca_issue, fix):
    action = route(sca_issue, fix, default_branch="trunk")

    assert action.payload["branch"] == "trunk"


def test_commit_message_truncates_description(issue_factory):
    issue = issue_factory(issue_id="SAST-9", description="x" * 80)

    assert commit_message_for(issue) == "fix: remediate SAST-9 - " + "x" * 50


def test_file_path_wins_when_both_addresses_present(issue_factory, fix):
    issue = issue_factory(
        IssueCategory.CLOUD_POSTURE, file_path="main.tf", resource_id="bucket-1"
    )

    assert route(issue, fix).action_type == ActionType.IAC_COMMIT_PATCH


def test_cloud_posture_without_address_raises(issue_factory, fix):
    issue = issue_factory(IssueCategory.CLOUD_POSTURE, issue_id="CSPM-X", region="eu-west-1")

    with pytest.raises(RoutingError) as exc_info:
        route(issue, fix)

    assert exc_info.value.issue_id == "CSPM-X"


def test_resolve_action_type_matches_route(cloud_issue, fix):
    assert resolve_action_type(cloud_issue) == route(cloud_issue, fix).action_type


def test_suggested_action_labels(sca_issue, runtime_issue, issue_factory):
    unroutable = issue_factory(IssueCategory.CLOUD_POSTURE)

    assert suggested_action_for(sca_issue) == "Apply Git patch"
    assert suggested_action_for(runtime_issue) == "Isolate runtime workload"
    assert suggested_action_for(unroutable) == "Review proposed fix"
