"""Domain entities."""

from .issue import Issue, IssueLocation

__all__ = ["Issue", "IssueLocation"]
