"""algolens - Recognize known algorithms and data structures in code snippets."""

__version__ = "0.1.0"
__author__ = "Rohan Vinaik"
__email__ = "rohanpvinaik@gmail.com"

from .core.catalog import KnowledgeBase
from .core.results import AnalysisResult, DetectedEntry
from .analyzers.aggregator import Aggregator
from .service import AnalysisService

__all__ = [
    "AnalysisResult",
    "AnalysisService",
    "Aggregator",
    "DetectedEntry",
    "KnowledgeBase",
    "__version__",
]
