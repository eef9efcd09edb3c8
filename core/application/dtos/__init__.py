"""Application DTOs."""

from .finding_dto import ScannerFindingDTO, SourceLocationDTO

__all__ = [
    "ScannerFindingDTO",
    "SourceLocationDTO",
]
