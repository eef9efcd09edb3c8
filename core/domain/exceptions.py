"""
Domain exceptions.

Failures raised inside the remediation core. The workflow engine converts
every exception into a FAILED result, so these exist to make the cause
explicit in logs and in the audit trail.
"""


class AutoFixError(Exception):
    """Base class for remediation workflow errors."""


class RoutingError(AutoFixError):
    """Raised when an issue cannot be mapped to an execution action."""

    def __init__(self, issue_id: str, reason: str):
        self.issue_id = issue_id
        self.reason = reason
        super().__init__(f"Cannot route issue {issue_id}: {reason}")


class CollaboratorError(AutoFixError):
    """Raised by collaborator adapters when a remote call fails."""

    def __init__(self, collaborator: str, message: str):
        self.collaborator = collaborator
        super().__init__(message)
