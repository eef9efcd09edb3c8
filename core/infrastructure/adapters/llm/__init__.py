"""Fix-generation (LLM) adapters."""

from .mock_fix_generator import MockFixGenerator

__all__ = ["MockFixGenerator"]
