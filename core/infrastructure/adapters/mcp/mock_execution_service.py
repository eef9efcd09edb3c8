"""
Mock Execution Service Implementation.

Simulates applying remediation actions. Useful for testing and demos.
"""
import asyncio
import logging
import uuid
from typing import Any, Dict, List, Optional

from core.application.interfaces import IExecutionService
from core.domain.enums import ActionType, ExecutionStatus
from core.domain.exceptions import CollaboratorError
from core.domain.value_objects import ExecutionResult


logger = logging.getLogger(__name__)


class MockExecutionService(IExecutionService):
    """
    Mock implementation of the execution collaborator.
    
    Every job succeeds unless ``fail_with`` is set, in which case every
    call raises ``CollaboratorError`` with that message.
    """
    
    def __init__(self, latency: float = 0.0, fail_with: Optional[str] = None):
        """
        Initialize mock execution service.
        
        Args:
            latency: Simulated job duration in seconds
            fail_with: Error message to raise on every call
        """
        self.latency = latency
        self.fail_with = fail_with
        self.jobs: List[Dict[str, Any]] = []
    
    async def apply(self, action_type: ActionType, payload: Dict[str, Any]) -> ExecutionResult:
        job_id = f"mcp-job-{uuid.uuid4()}"
        logger.info(f"Received job {job_id} to apply patch of type {action_type.value}")

        if self.latency:
            await asyncio.sleep(self.latency)

        if self.fail_with:
            logger.error(f"Job {job_id} failed: {self.fail_with}")
            raise CollaboratorError("execution", self.fail_with)

        self.jobs.append({"jobId": job_id, "type": action_type.value, "payload": dict(payload)})
        logger.info(f"Job {job_id} completed successfully.")
        return ExecutionResult(
            job_id=job_id,
            status=ExecutionStatus.SUCCESS,
            details=f"Successfully applied patch via {action_type.value}.",
        )
