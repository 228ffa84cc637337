"""Combine detector output and text heuristics into an AnalysisResult."""

from __future__ import annotations

from typing import List, Optional

from ..config import Config
from ..core.catalog import KnowledgeBase
from ..core.results import AnalysisResult, ComplexityTier, DetectedEntry
from ..utils.logging_setup import get_logger
from .detector import Detector
from .matcher import Matcher

logger = get_logger(__name__)

RANGE_LOOP_PATTERN = "Range-based loop"
RECURSIVE_FUNCTION_PATTERN = "Recursive function"

SPLIT_FUNCTIONS_ADVICE = "Consider breaking this into smaller functions"
ADD_DOCUMENTATION_ADVICE = "Add documentation comments"

COMMENT_MARKERS = ("///", "//")


def learn_more(entry: DetectedEntry) -> str:
    return f"Learn more about {entry.name} at {entry.wikipedia_link}"


class Aggregator:
    """
    Analyze a snippet against a knowledge base.

    Holds one detector per catalog and no per-call state, so a single
    instance can serve concurrent callers.
    """

    def __init__(self, knowledge_base: KnowledgeBase, config: Optional[Config] = None):
        self.knowledge_base = knowledge_base
        self.config = config or Config()

        matcher = Matcher(keyword_matching=self.config.get("detection.keyword_matching", True))
        self.algorithm_detector = Detector(knowledge_base.algorithms, matcher)
        self.data_structure_detector = Detector(knowledge_base.data_structures, matcher)

        self.medium_lines = self.config.get("complexity.medium_lines", 50)
        self.high_lines = self.config.get("complexity.high_lines", 100)

    def analyze(self, snippet: str) -> AnalysisResult:
        algorithms = self.algorithm_detector.detect(snippet)
        data_structures = self.data_structure_detector.detect(snippet)
        line_count = len(snippet.splitlines())

        result = AnalysisResult(
            patterns=detect_patterns(snippet),
            detailed_algorithms=algorithms,
            detailed_data_structures=data_structures,
            complexity=self.complexity_tier(line_count),
            recommendations=self.recommendations(snippet, line_count, algorithms, data_structures),
        )

        logger.debug(
            "Analyzed %d lines: %d algorithms, %d data structures, complexity %s",
            line_count, len(algorithms), len(data_structures), result.complexity.value,
        )
        return result

    def complexity_tier(self, line_count: int) -> ComplexityTier:
        if line_count > self.high_lines:
            return ComplexityTier.HIGH
        if line_count > self.medium_lines:
            return ComplexityTier.MEDIUM
        return ComplexityTier.LOW

    def recommendations(
        self,
        snippet: str,
        line_count: int,
        algorithms: List[DetectedEntry],
        data_structures: List[DetectedEntry],
    ) -> List[str]:
        advice: List[str] = []

        if line_count > self.high_lines:
            advice.append(SPLIT_FUNCTIONS_ADVICE)

        # Blank input has nothing to document
        if snippet.strip() and not has_comments(snippet):
            advice.append(ADD_DOCUMENTATION_ADVICE)

        advice.extend(learn_more(entry) for entry in algorithms)
        advice.extend(learn_more(entry) for entry in data_structures)
        return advice


def detect_patterns(snippet: str) -> List[str]:
    """Textual loop/recursion heuristics. No control-flow analysis."""
    patterns = []
    if "for" in snippet and "..<" in snippet:
        patterns.append(RANGE_LOOP_PATTERN)
    if "fn " in snippet and "recursive" in snippet:
        patterns.append(RECURSIVE_FUNCTION_PATTERN)
    return patterns


def has_comments(snippet: str) -> bool:
    return any(marker in snippet for marker in COMMENT_MARKERS)
