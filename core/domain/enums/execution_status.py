"""
Execution Status Enum.

Job status values reported by the execution collaborator.
"""
from enum import Enum


class ExecutionStatus(str, Enum):
    """Execution job status values."""
    
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    PENDING = "PENDING"
