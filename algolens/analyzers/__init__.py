"""Matching, detection and aggregation."""

from .matcher import Matcher, MatchRule
from .detector import Detector
from .aggregator import Aggregator, detect_patterns

__all__ = [
    "Aggregator",
    "Detector",
    "Matcher",
    "MatchRule",
    "detect_patterns",
]
