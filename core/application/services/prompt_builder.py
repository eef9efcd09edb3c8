"""
Prompt Builder.

Renders the fix-generation prompt for an issue. One template per prompt
category; code-derived enrichment hints are appended as a labeled block.
Pure string assembly.
"""
import json
from enum import Enum

from core.domain.entities import Issue
from core.domain.enums import IssueCategory
from core.domain.value_objects import EnrichmentContext


class PromptCategory(str, Enum):
    """Prompt template keys."""

    CODE = "code"
    IAC = "iac"
    CLOUD = "cloud"
    PIPELINE = "pipeline"
    RUNTIME = "runtime"


_TEMPLATES = {
    PromptCategory.CODE: (
        "Here's a {severity} severity {category} finding {issue_id} in "
        "{repository} at {file_path}: {description}\n"
        "Propose a secure fix as a diff patch."
    ),
    PromptCategory.IAC: (
        "The following infrastructure-as-code resource in {file_path} "
        "({repository}) is misconfigured: {description}\n"
        "Propose a fix as a diff patch."
    ),
    PromptCategory.CLOUD: (
        "A cloud resource {resource_id} in region {region} has a finding: "
        "{description}\n"
        "Propose a remediation via cloud CLI commands."
    ),
    PromptCategory.PIPELINE: (
        "The CI/CD pipeline at {file_path} ({repository}) has a security issue: "
        "{description}\n"
        "Propose a fix for the pipeline configuration as a diff patch."
    ),
    PromptCategory.RUNTIME: (
        "A runtime alert was raised for workload {resource_id}: {description}\n"
        "Propose a containment action and explain why it is needed."
    ),
}

_HINT_LABELS = {
    "riskScore": "Risk score",
    "codeSnippet": "Code snippet",
    "language": "Language",
    "fileOwner": "File owner",
}

_UNKNOWN = "unknown"


def prompt_category_for(issue: Issue) -> PromptCategory:
    """
    Select the prompt template for an issue.
    
    Cloud posture issues use the IaC template when they carry a file path
    and the cloud template otherwise, mirroring the action router.
    """
    category = issue.category
    if category.is_code_derived:
        return PromptCategory.CODE
    if category is IssueCategory.CLOUD_POSTURE:
        return PromptCategory.IAC if issue.location.has_file_path else PromptCategory.CLOUD
    if category is IssueCategory.PIPELINE_CONFIG:
        return PromptCategory.PIPELINE
    if category is IssueCategory.RUNTIME_ALERT:
        return PromptCategory.RUNTIME
    raise ValueError(f"No prompt template for issue category: {category!r}")


def build_prompt(issue: Issue, context: EnrichmentContext) -> str:
    """
    Build the prompt text for an issue.
    
    Args:
        issue: Issue to remediate
        context: Enrichment context, forwarded verbatim as JSON
    
    Returns:
        Prompt text
    """
    location = issue.location
    prompt = _TEMPLATES[prompt_category_for(issue)].format(
        issue_id=issue.id,
        category=issue.category.value,
        severity=issue.severity.value,
        description=issue.description,
        repository=location.repository or _UNKNOWN,
        file_path=location.file_path or _UNKNOWN,
        resource_id=location.resource_id or _UNKNOWN,
        region=location.region or _UNKNOWN,
    )

    hints = issue.enrichment_hints()
    if hints:
        lines = [f"{_HINT_LABELS[key]}: {value}" for key, value in hints.items()]
        prompt += "\n\nAdditional context:\n" + "\n".join(lines)

    if context.data:
        prompt += "\n\nEnrichment context:\n" + json.dumps(
            _stringify_keys(context.to_dict()), sort_keys=True, default=str
        )

    return prompt


def _stringify_keys(value):
    # Opaque context may mix key types, which sort_keys cannot order.
    if isinstance(value, dict):
        return {str(key): _stringify_keys(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(item) for item in value]
    return value
