"""Knowledge base, normalization and result types."""

from .results import AnalysisResult, ComplexityTier, DetectedEntry
from .catalog import (
    AlgorithmCategory,
    Catalog,
    CatalogKind,
    DataStructureCategory,
    Entry,
    KnowledgeBase,
)
from .keywords import keywords_for
from .normalize import normalize

__all__ = [
    "AlgorithmCategory",
    "AnalysisResult",
    "Catalog",
    "CatalogKind",
    "ComplexityTier",
    "DataStructureCategory",
    "DetectedEntry",
    "Entry",
    "KnowledgeBase",
    "keywords_for",
    "normalize",
]
