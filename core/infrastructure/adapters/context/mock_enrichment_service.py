"""
Mock Enrichment Service Implementation.

Returns a fixed context graph for demos and tests.
"""
import asyncio
import copy
import logging
from typing import Any, Dict, List

from core.application.interfaces import IEnrichmentService
from core.domain.entities import Issue
from core.domain.value_objects import EnrichmentContext


logger = logging.getLogger(__name__)

SAMPLE_CONTEXT: Dict[str, Any] = {
    "application": {
        "name": "Monitored-App-1",
        "structure": "Microservices architecture with React frontend",
    },
    "ownership": {
        "team": "Platform Security",
        "owner": "jane.doe@example.com",
    },
    "iacReferences": ["s3.tf", "iam.tf"],
    "cicdConfigs": [".github/workflows/deploy.yml"],
    "git": {
        "repoUrl": "https://github.com/example/monitored-app",
        "commitHistory": ["feat: add new login page", "fix: button alignment"],
    },
}


class MockEnrichmentService(IEnrichmentService):
    """
    Mock implementation of the enrichment collaborator.
    
    The repository URL of the returned context follows the issue location
    when the issue has one.
    """
    
    def __init__(self, latency: float = 0.0):
        """
        Initialize mock enrichment service.
        
        Args:
            latency: Simulated network delay in seconds
        """
        self.latency = latency
        self.requested_issue_ids: List[str] = []
    
    async def fetch_enrichment(self, issue: Issue) -> EnrichmentContext:
        logger.info(f"Fetching enrichment for issue: {issue.id}")
        self.requested_issue_ids.append(issue.id)

        if self.latency:
            await asyncio.sleep(self.latency)

        data = copy.deepcopy(SAMPLE_CONTEXT)
        if issue.location.repository:
            data["git"]["repoUrl"] = issue.location.repository
        return EnrichmentContext(data=data)
