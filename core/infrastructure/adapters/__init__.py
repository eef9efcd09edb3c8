"""Collaborator adapters.

Import concrete services from their subpackages.
"""

__all__ = []
