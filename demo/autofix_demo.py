"""
End-to-End Demo: AutoFix Workflow

This demonstrates the complete workflow for a handful of findings:
1. Validate raw scanner findings
2. Fetch enrichment context
3. Generate a proposed fix
4. Auto-remediate above the confidence threshold, otherwise queue for approval

Uses mock implementations (no real context graph, LLM or MCP needed).
"""
import asyncio
import json
import logging

from core.application.dtos import ScannerFindingDTO
from core.application.services import evaluate_policy
from core.infrastructure.adapters.context import MockEnrichmentService
from core.infrastructure.adapters.llm import MockFixGenerator
from core.infrastructure.adapters.mcp import MockExecutionService
from orchestration import AutoFixWorkflow, Event, InMemoryEventBus

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


FINDINGS = [
    {
        "issueId": "SCA-1001",
        "type": "SCA",
        "severity": "High",
        "riskScore": 0.82,
        "sourceLocation": {"repository": "example/payments", "filePath": "package.json"},
        "description": "vulnerable lodash",
        "language": "javascript",
    },
    {
        "issueId": "IAC-2001",
        "type": "IaC",
        "severity": "Medium",
        "sourceLocation": {"repository": "example/infra", "filePath": "main.tf"},
        "description": "S3 bucket allows public read access",
    },
    {
        "issueId": "CSPM-3001",
        "type": "CSPM",
        "severity": "High",
        "sourceLocation": {"resourceId": "bucket-1", "region": "us-east-1"},
        "description": "Bucket encryption disabled",
    },
    {
        "issueId": "RT-4001",
        "type": "RUNTIME",
        "severity": "Critical",
        "sourceLocation": {"resourceId": "pod/checkout-7d9f"},
        "description": "Reverse shell spawned in container",
    },
]


async def print_event(event: Event) -> None:
    print(f"   📣 {event.name} ({event.metadata.issue_id})")


async def run_demo(confidence: float) -> None:
    print("\n" + "=" * 80)
    print(f"DEMO: AutoFix workflow with fix confidence {confidence:.0f}%")
    print("=" * 80 + "\n")

    bus = InMemoryEventBus()
    bus.subscribe("autofix.*", print_event)

    workflow = AutoFixWorkflow(
        enrichment_service=MockEnrichmentService(),
        fix_generator=MockFixGenerator(confidence=confidence),
        execution_service=MockExecutionService(),
        event_bus=bus,
    )

    for raw in FINDINGS:
        issue = ScannerFindingDTO.model_validate(raw).to_issue()
        policy = evaluate_policy(issue)
        result = await workflow.run(issue)

        print(f"🔎 {issue.id} [{issue.category.value}/{issue.severity.value}]")
        print(f"   policy:   {policy.policy_id}")
        print(f"   status:   {result.status.value}")
        print(f"   decision: {result.decision}")
        if result.execution_result:
            print(f"   job:      {result.execution_result.job_id}")
        if result.approval_payload:
            print(f"   suggested action: {result.approval_payload.suggested_action}")
        if result.error:
            print(f"   error:    {result.error}")
        print(f"   audit:    {len(result.audit_log)} entries\n")

    logger.info("Last result:\n" + json.dumps(result.to_dict(), indent=2, default=str))


async def main():
    await run_demo(confidence=95.0)
    await run_demo(confidence=60.0)


if __name__ == "__main__":
    asyncio.run(main())
