"""Enrichment (context graph) adapters."""

from .mock_enrichment_service import MockEnrichmentService

__all__ = ["MockEnrichmentService"]
