"""Tests for the logging helper."""

import logging

from core.infrastructure.adapters.context import MockEnrichmentService
from core.infrastructure.adapters.llm import MockFixGenerator
from core.infrastructure.adapters.mcp import MockExecutionService
from core.infrastructure.logging import get_logger
from core.settings import AutoFixSettings
from orchestration.autofix import AutoFixWorkflow


def test_explicit_level_applies_to_configured_logger():
    logger = get_logger("tests.logging.explicit", "INFO")
    assert logger.level == logging.INFO

    same = get_logger("tests.logging.explicit", "DEBUG")

    assert same is logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_workflow_applies_its_own_log_level():
    for level, expected in (("WARNING", logging.WARNING), ("DEBUG", logging.DEBUG)):
        AutoFixWorkflow(
            enrichment_service=MockEnrichmentService(),
            fix_generator=MockFixGenerator(),
            execution_service=MockExecutionService(),
            settings=AutoFixSettings(log_level=level),
        )
        assert logging.getLogger("orchestration.autofix").level == expected
