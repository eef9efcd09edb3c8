"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from core.application.services import prompt_builder
from core.domain.entities import Issue
from core.domain.enums import ActionType
from core.domain.value_objects import EnrichmentContext, ExecutionResult, ProposedFix


class IEnrichmentService(ABC):
    """
    Interface for the enrichment (context graph) collaborator.
    
    Given an issue, returns contextual metadata: ownership, related
    configs, repository history.
    """
    
    @abstractmethod
    async def fetch_enrichment(self, issue: Issue) -> EnrichmentContext:
        """
        Fetch enrichment context for an issue.
        
        Args:
            issue: Issue to enrich
        
        Returns:
            Opaque enrichment context
        
        Raises:
            Exception: If the context service is unreachable or fails
        """
        pass


class IFixGenerator(ABC):
    """
    Interface for the fix-generation (LLM) collaborator.
    
    This interface defines the contract for proposing fixes, allowing
    different implementations (hosted LLM, local model, canned responses).
    """
    
    @abstractmethod
    async def generate_fix(self, prompt_text: str) -> ProposedFix:
        """
        Generate a proposed fix from a prompt.
        
        Args:
            prompt_text: Fully rendered prompt
        
        Returns:
            Proposed fix with confidence (0-100) and rationale
        
        Raises:
            Exception: If fix generation fails
        """
        pass
    
    def build_prompt(self, issue: Issue, context: EnrichmentContext) -> str:
        """
        Build the prompt text for an issue.
        
        Args:
            issue: Issue to remediate
            context: Enrichment context for the issue
        
        Returns:
            Prompt text
        """
        # Default implementation - can be overridden
        return prompt_builder.build_prompt(issue, context)


class IExecutionService(ABC):
    """
    Interface for the execution (MCP) collaborator.
    
    Performs, or simulates, the remediation described by an action type
    and payload.
    """
    
    @abstractmethod
    async def apply(self, action_type: ActionType, payload: Dict[str, Any]) -> ExecutionResult:
        """
        Apply a remediation action.
        
        Args:
            action_type: Kind of change to apply
            payload: Action payload built by the action router
        
        Returns:
            Execution job result
        
        Raises:
            Exception: If execution fails
        """
        pass


__all__ = ["IEnrichmentService", "IFixGenerator", "IExecutionService"]
