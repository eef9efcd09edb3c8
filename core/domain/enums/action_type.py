"""
Action Type Enum.

Categorical labels telling the execution collaborator what kind of change
to apply.
"""
from enum import Enum


class ActionType(str, Enum):
    """Execution action types understood by the execution collaborator."""
    
    GITOPS_APPLY_PATCH = "gitops/apply-patch"
    IAC_COMMIT_PATCH = "iac/commit-patch"
    CLOUD_APPLY_REMEDIATION = "cloud/apply-remediation"
    PIPELINE_UPDATE_CONFIG = "pipeline/update-config"
    RUNTIME_ISOLATE = "runtime/isolate"

    @property
    def suggested_action(self) -> str:
        """Human-readable label shown to reviewers in the approval queue."""
        return _SUGGESTED_ACTIONS[self]


_SUGGESTED_ACTIONS = {
    ActionType.GITOPS_APPLY_PATCH: "Apply Git patch",
    ActionType.IAC_COMMIT_PATCH: "Commit IaC patch",
    ActionType.CLOUD_APPLY_REMEDIATION: "Apply cloud remediation",
    ActionType.PIPELINE_UPDATE_CONFIG: "Update pipeline configuration",
    ActionType.RUNTIME_ISOLATE: "Isolate runtime workload",
}
