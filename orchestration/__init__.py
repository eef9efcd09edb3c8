"""Orchestration layer - AutoFix workflow with audit trail and eventing."""

from core.infrastructure.adapters.context import MockEnrichmentService
from core.infrastructure.adapters.llm import MockFixGenerator
from core.infrastructure.adapters.mcp import MockExecutionService
from core.settings import AppSettings, get_app_settings

from .autofix import FAILURE_DECISION, AutoFixWorkflow
from .bus import EventBusProtocol, InMemoryEventBus
from .events import Event, EventMetadata
from .models import (
    ApprovalPayload,
    AuditEntry,
    AuditLog,
    RemediationMetrics,
    WorkflowResult,
    WorkflowStatus,
)

__all__ = [
    "ApprovalPayload",
    "AuditEntry",
    "AuditLog",
    "AutoFixWorkflow",
    "Event",
    "EventBusProtocol",
    "EventMetadata",
    "FAILURE_DECISION",
    "InMemoryEventBus",
    "RemediationMetrics",
    "WorkflowResult",
    "WorkflowStatus",
    "create_default_workflow",
]


def create_default_workflow(settings: AppSettings | None = None) -> AutoFixWorkflow:
    """Create an AutoFix workflow wired to the mock collaborators.

    Args:
        settings: Optional application settings

    Returns:
        AutoFixWorkflow instance with an in-memory event bus
    """
    settings = settings or get_app_settings()
    mocks = settings.mocks
    return AutoFixWorkflow(
        enrichment_service=MockEnrichmentService(latency=mocks.enrichment_latency),
        fix_generator=MockFixGenerator(confidence=mocks.confidence, latency=mocks.fix_latency),
        execution_service=MockExecutionService(latency=mocks.execution_latency),
        event_bus=InMemoryEventBus(),
        settings=settings.autofix,
    )
