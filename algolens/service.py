"""
Request-level facade around the detection engine.

:class:`AnalysisService` is what a transport (HTTP handler, CLI, worker)
holds. It owns the current knowledge base, runs the aggregator and, when a
store is attached, records each snippet and its result. Recording is best
effort: a failing store is logged and never turns a successful analysis into
an error.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple, runtime_checkable

from . import __version__
from .analyzers.aggregator import Aggregator
from .analyzers.matcher import MatchRule
from .config import Config
from .core.catalog import Entry, KnowledgeBase
from .core.results import AnalysisResult
from .utils.logging_setup import get_logger

logger = get_logger(__name__)


@runtime_checkable
class AnalysisStore(Protocol):
    """Persistence collaborator. Implementations live outside this package."""

    def save_code_sample(self, code: str, language: Optional[str]) -> str:
        """Store a submitted snippet and return its generated identifier."""
        ...

    def save_analysis_result(self, sample_id: str, result: AnalysisResult) -> str:
        """Store the result for a previously saved snippet and return its identifier."""
        ...


class AnalysisService:
    """Analyze snippets against a replaceable, read-only knowledge base."""

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        config: Optional[Config] = None,
        store: Optional[AnalysisStore] = None,
    ):
        self.config = config or Config()
        self.store = store
        self._aggregator = Aggregator(knowledge_base, self.config)

    @classmethod
    def from_config(cls, config: Config, store: Optional[AnalysisStore] = None) -> "AnalysisService":
        """Build the knowledge base named by ``catalog.path`` (or the built-in one)."""
        catalog_path = config.get("catalog.path")
        if catalog_path:
            knowledge_base = KnowledgeBase.from_file(catalog_path)
        else:
            knowledge_base = KnowledgeBase.default()
        return cls(knowledge_base, config, store)

    @property
    def knowledge_base(self) -> KnowledgeBase:
        return self._aggregator.knowledge_base

    def replace_knowledge_base(self, knowledge_base: KnowledgeBase) -> None:
        """Swap in a complete replacement catalog.

        Calls already running keep the aggregator they started with.
        """
        self._aggregator = Aggregator(knowledge_base, self.config)
        logger.info(
            "Replaced knowledge base: %d algorithms, %d data structures",
            len(knowledge_base.algorithms), len(knowledge_base.data_structures),
        )

    def analyze(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        result = self._aggregator.analyze(code)
        if self.store is not None:
            self._record(code, language, result)
        return result

    def explain(self, code: str) -> List[Tuple[Entry, MatchRule]]:
        """Matched entries of both catalogs with the rule that matched each."""
        aggregator = self._aggregator
        return (
            aggregator.algorithm_detector.detect_with_rules(code)
            + aggregator.data_structure_detector.detect_with_rules(code)
        )

    def _record(self, code: str, language: Optional[str], result: AnalysisResult) -> None:
        try:
            sample_id = self.store.save_code_sample(code, language)
        except Exception as e:
            logger.warning("Failed to save code sample: %s", e, exc_info=True)
            return

        try:
            self.store.save_analysis_result(sample_id, result)
        except Exception as e:
            logger.warning("Failed to save analysis result for %s: %s", sample_id, e, exc_info=True)
            return

        logger.debug("Saved analysis result for sample %s", sample_id)

    def health(self) -> dict:
        return {"status": "healthy", "version": __version__}
