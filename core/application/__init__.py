"""Application layer - services, interfaces, and DTOs."""

from .dtos import ScannerFindingDTO, SourceLocationDTO
from .services import (
    PolicyDecision,
    PromptCategory,
    build_prompt,
    evaluate_policy,
    prompt_category_for,
    resolve_action_type,
    route,
    suggested_action_for,
)
from .interfaces import IEnrichmentService, IExecutionService, IFixGenerator

__all__ = [
    # DTOs
    "ScannerFindingDTO",
    "SourceLocationDTO",
    # Services
    "PolicyDecision",
    "PromptCategory",
    "build_prompt",
    "evaluate_policy",
    "prompt_category_for",
    "resolve_action_type",
    "route",
    "suggested_action_for",
    # Interfaces
    "IEnrichmentService",
    "IExecutionService",
    "IFixGenerator",
]
