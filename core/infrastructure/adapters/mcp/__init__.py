"""Execution (MCP) adapters."""

from .mock_execution_service import MockExecutionService

__all__ = ["MockExecutionService"]
