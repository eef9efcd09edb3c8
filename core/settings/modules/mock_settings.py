from __future__ import annotations

from pydantic import Field

from core.settings.base import AutoFixBaseSettings


class MockCollaboratorSettings(AutoFixBaseSettings):
    """
    Settings for the mock enrichment / fix-generation / execution adapters
    used by the demo. Latencies are in seconds.
    """

    enrichment_latency: float = Field(default=0.3, ge=0, alias="AUTOFIX_MOCK_ENRICHMENT_LATENCY")
    fix_latency: float = Field(default=0.8, ge=0, alias="AUTOFIX_MOCK_FIX_LATENCY")
    execution_latency: float = Field(default=0.5, ge=0, alias="AUTOFIX_MOCK_EXECUTION_LATENCY")
    confidence: float = Field(default=95.0, ge=0, le=100, alias="AUTOFIX_MOCK_CONFIDENCE")
