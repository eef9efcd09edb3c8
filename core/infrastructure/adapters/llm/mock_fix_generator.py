"""
Mock Fix Generator Implementation.

Canned fix-generation responses with a caller-controlled confidence, so
demos and tests never depend on randomness.
"""
import asyncio
import logging
from typing import List

from core.application.interfaces import IFixGenerator
from core.domain.value_objects import ProposedFix


logger = logging.getLogger(__name__)

CODE_PATCH = (
    "--- a/package.json\n"
    "+++ b/package.json\n"
    "@@ -10,7 +10,7 @@\n"
    '   "dependencies": {\n'
    '-    "express": "4.17.1",\n'
    '+    "express": "4.18.2",\n'
    '     "lodash": "4.17.21"\n'
    "   }\n"
    " }"
)

IAC_PATCH = (
    "--- a/main.tf\n"
    "+++ b/main.tf\n"
    "@@ -5,6 +5,6 @@\n"
    ' resource "aws_s3_bucket" "b" {\n'
    '   bucket = "my-tf-test-bucket"\n'
    '-  acl    = "public-read"\n'
    '+  acl    = "private"\n'
    " }"
)

# Keyed by the opening words of each prompt template.
_CANNED = (
    (
        "The following infrastructure-as-code",
        IAC_PATCH,
        "Changed S3 bucket ACL from public-read to private to restrict public access.",
    ),
    (
        "Here's a",
        CODE_PATCH,
        "Upgrading express from 4.17.1 to 4.18.2 resolves known vulnerabilities.",
    ),
)

DEFAULT_FIX = "# Mock patch content"
DEFAULT_RATIONALE = "This is a mock rationale for the generated fix."


class MockFixGenerator(IFixGenerator):
    """
    Mock implementation of the fix-generation collaborator.
    
    Records every prompt it receives (for testing).
    """
    
    def __init__(self, confidence: float = 95.0, latency: float = 0.0):
        """
        Initialize mock fix generator.
        
        Args:
            confidence: Confidence score returned with every fix (0-100)
            latency: Simulated model latency in seconds
        """
        self.confidence = confidence
        self.latency = latency
        self.prompts: List[str] = []
    
    async def generate_fix(self, prompt_text: str) -> ProposedFix:
        self.prompts.append(prompt_text)
        logger.debug(f"LLM prompt:\n{prompt_text}")

        if self.latency:
            await asyncio.sleep(self.latency)

        content, rationale = DEFAULT_FIX, DEFAULT_RATIONALE
        for prefix, canned_content, canned_rationale in _CANNED:
            if prompt_text.startswith(prefix):
                content, rationale = canned_content, canned_rationale
                break

        logger.info(f"Generated fix with confidence {self.confidence:.2f}")
        return ProposedFix(content=content, confidence=self.confidence, rationale=rationale)
