"""AutoFix workflow engine - context, fix proposal, confidence decision, execution or approval."""

from datetime import datetime

from core.application.interfaces import IEnrichmentService, IExecutionService, IFixGenerator
from core.application.services.action_router import route, suggested_action_for
from core.application.services.prompt_builder import prompt_category_for
from core.domain.entities import Issue
from core.domain.value_objects import WorkflowID
from core.infrastructure.logging import get_logger
from core.settings import AutoFixSettings, get_app_settings

from .bus import EventBusProtocol
from .events import Event, EventMetadata
from .models import (
    ApprovalPayload,
    AuditLog,
    RemediationMetrics,
    WorkflowResult,
    WorkflowStatus,
    utc_now,
)

FAILURE_DECISION = "An unexpected error occurred during the workflow."


class AutoFixWorkflow:
    """Runs the AutoFix decision workflow for one issue at a time.

    The engine keeps no state between runs: every call to ``run`` gets its own
    workflow id and audit log, so concurrent runs for different issues are
    independent.
    """

    def __init__(
        self,
        enrichment_service: IEnrichmentService,
        fix_generator: IFixGenerator,
        execution_service: IExecutionService,
        event_bus: EventBusProtocol | None = None,
        settings: AutoFixSettings | None = None,
    ) -> None:
        """Initialize the workflow engine.

        Args:
            enrichment_service: Collaborator returning enrichment context
            fix_generator: Collaborator proposing fixes
            execution_service: Collaborator applying fixes
            event_bus: Optional bus for workflow lifecycle events
            settings: Workflow settings (defaults to application settings)
        """
        self._enrichment_service = enrichment_service
        self._fix_generator = fix_generator
        self._execution_service = execution_service
        self._event_bus = event_bus
        self._settings = settings or get_app_settings().autofix
        self._logger = get_logger("orchestration.autofix", self._settings.log_level)

    @property
    def confidence_threshold(self) -> float:
        return self._settings.confidence_threshold

    async def run(self, issue: Issue) -> WorkflowResult:
        """Run the workflow for an issue.

        Never raises: collaborator and routing failures are captured as a
        FAILED result carrying the audit entries recorded up to the failure.

        Args:
            issue: Normalized issue to remediate

        Returns:
            WorkflowResult with decision and audit trail
        """
        started_at = utc_now()
        workflow_id = str(WorkflowID.generate())
        audit = AuditLog(actor=self._settings.audit_actor)
        audit.record("Workflow started", {"workflowId": workflow_id, "issueId": issue.id})

        self._logger.info(
            f"workflow_starting workflow_id={workflow_id} issue_id={issue.id} "
            f"category={issue.category.value} severity={issue.severity.value}"
        )
        await self._publish_event(
            "autofix.started",
            workflow_id,
            issue.id,
            {"category": issue.category.value, "severity": issue.severity.value},
        )

        try:
            result = await self._remediate(workflow_id, issue, audit, started_at)
        except Exception as exc:
            error = str(exc) or type(exc).__name__
            self._logger.error(
                f"workflow_failed workflow_id={workflow_id} issue_id={issue.id} error={error}",
                exc_info=True,
            )
            audit.record("Workflow failed", {"error": error})
            result = WorkflowResult(
                workflow_id=workflow_id,
                issue_id=issue.id,
                status=WorkflowStatus.FAILED,
                decision=FAILURE_DECISION,
                audit_log=audit.entries,
                error=error,
                metrics=self._metrics(started_at),
            )

        self._logger.info(
            f"workflow_finished workflow_id={workflow_id} status={result.status.value} "
            f"duration_ms={result.metrics.time_to_fix_ms}"
        )
        await self._publish_event(
            f"autofix.{result.status.value.lower()}",
            workflow_id,
            issue.id,
            {"status": result.status.value, "decision": result.decision},
        )
        return result

    async def _remediate(
        self, workflow_id: str, issue: Issue, audit: AuditLog, started_at: datetime
    ) -> WorkflowResult:
        context = await self._enrichment_service.fetch_enrichment(issue)
        audit.record("Context received", context.to_dict())

        prompt = self._fix_generator.build_prompt(issue, context)
        audit.record(
            "Generating LLM prompt",
            {"promptCategory": prompt_category_for(issue).value, "prompt": prompt},
        )
        proposed_fix = await self._fix_generator.generate_fix(prompt)
        audit.record("LLM response received", proposed_fix.to_dict())

        confidence = proposed_fix.confidence
        threshold = self.confidence_threshold
        decision_details = {"confidence": confidence, "threshold": threshold}

        if confidence >= threshold:
            audit.record("Confidence above threshold", decision_details)

            action = route(
                issue,
                proposed_fix,
                default_branch=self._settings.default_branch,
                summary_length=self._settings.commit_summary_length,
            )
            audit.record("Sending fix to MCP", action.to_dict())
            execution_result = await self._execution_service.apply(
                action.action_type, dict(action.payload)
            )
            audit.record("MCP response received", execution_result.to_dict())

            self._logger.info(
                f"workflow_auto_remediated workflow_id={workflow_id} "
                f"action_type={action.action_type.value} job_id={execution_result.job_id}"
            )
            return WorkflowResult(
                workflow_id=workflow_id,
                issue_id=issue.id,
                status=WorkflowStatus.COMPLETED_AUTOMATIC,
                decision=f"Auto-remediated based on confidence score of {confidence:.2f}%",
                audit_log=audit.entries,
                context=context,
                proposed_fix=proposed_fix,
                execution_result=execution_result,
                metrics=self._metrics(started_at),
            )

        audit.record("Confidence below threshold", decision_details)
        approval_payload = ApprovalPayload(
            issue=issue,
            context=context,
            proposed_fix=proposed_fix,
            suggested_action=suggested_action_for(issue),
        )
        audit.record("Sending to human approval queue", approval_payload.to_dict())

        self._logger.info(
            f"workflow_awaiting_approval workflow_id={workflow_id} confidence={confidence:.2f}"
        )
        return WorkflowResult(
            workflow_id=workflow_id,
            issue_id=issue.id,
            status=WorkflowStatus.AWAITING_APPROVAL,
            decision=f"Fix requires manual approval due to confidence score of {confidence:.2f}%",
            audit_log=audit.entries,
            context=context,
            proposed_fix=proposed_fix,
            approval_payload=approval_payload,
            metrics=self._metrics(started_at),
        )

    @staticmethod
    def _metrics(started_at: datetime) -> RemediationMetrics:
        return RemediationMetrics(workflow_start_time=started_at, workflow_end_time=utc_now())

    async def _publish_event(
        self, name: str, workflow_id: str, issue_id: str, payload: dict[str, object]
    ) -> None:
        """Publish a lifecycle event; bus failures are logged, never raised.

        Args:
            name: Event name
            workflow_id: Workflow run identifier
            issue_id: Issue being remediated
            payload: Event payload
        """
        if self._event_bus is None:
            return

        event = Event(
            name=name,
            payload=payload,
            metadata=EventMetadata(workflow_id=workflow_id, issue_id=issue_id, timestamp=utc_now()),
        )
        try:
            await self._event_bus.publish(event)
        except Exception as exc:
            self._logger.error(
                f"event_publish_failed name={name} workflow_id={workflow_id} error={exc}",
                exc_info=True,
            )
