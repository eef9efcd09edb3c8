"""
Issue Category Enum.

Source taxonomy for security findings, independent of the scanner that
produced them.
"""
from enum import Enum


class IssueCategory(str, Enum):
    """Scanner category of a normalized issue."""
    
    STATIC_ANALYSIS = "SAST"
    SOFTWARE_COMPOSITION = "SCA"
    CLOUD_POSTURE = "CSPM"
    PIPELINE_CONFIG = "PIPELINE"
    RUNTIME_ALERT = "RUNTIME"

    @property
    def is_code_derived(self) -> bool:
        """True for categories that originate from source code scanning."""
        return self in (IssueCategory.STATIC_ANALYSIS, IssueCategory.SOFTWARE_COMPOSITION)
