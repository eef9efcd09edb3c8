"""Domain enums."""

from .action_type import ActionType
from .execution_status import ExecutionStatus
from .issue_category import IssueCategory
from .severity import Severity

__all__ = [
    "ActionType",
    "ExecutionStatus",
    "IssueCategory",
    "Severity",
]
