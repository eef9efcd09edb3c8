"""Application services."""

from .action_router import resolve_action_type, route, suggested_action_for
from .policy_engine import PolicyDecision, evaluate_policy
from .prompt_builder import PromptCategory, build_prompt, prompt_category_for

__all__ = [
    "PolicyDecision",
    "PromptCategory",
    "build_prompt",
    "evaluate_policy",
    "prompt_category_for",
    "resolve_action_type",
    "route",
    "suggested_action_for",
]
