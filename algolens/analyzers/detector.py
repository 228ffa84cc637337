"""Catalog-wide detection."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.catalog import Catalog, Entry
from ..core.normalize import normalize
from ..core.results import DetectedEntry
from ..utils.logging_setup import get_logger
from .matcher import Matcher, MatchRule

logger = get_logger(__name__)


class Detector:
    """Run the matcher over every entry of one catalog."""

    def __init__(self, catalog: Catalog, matcher: Optional[Matcher] = None):
        self.catalog = catalog
        self.matcher = matcher or Matcher()

    @property
    def name(self) -> str:
        return self.catalog.kind.value

    def detect(self, snippet: str) -> List[DetectedEntry]:
        """Matched entries in catalog declaration order.

        Entries sharing a name under different categories are reported once
        per category.
        """
        return [entry.to_detected() for entry, _ in self.detect_with_rules(snippet)]

    def detect_with_rules(self, snippet: str) -> List[Tuple[Entry, MatchRule]]:
        """Matched entries paired with the rule that matched them."""
        normalized = normalize(snippet)
        if not normalized:
            return []
        lowered = snippet.lower()

        found: List[Tuple[Entry, MatchRule]] = []
        for entry in self.catalog:
            rule = self.matcher.explain_prepared(snippet, normalized, lowered, entry)
            if rule is not None:
                logger.debug(
                    "%s: matched %r (%s) via %s",
                    self.name, entry.name, entry.category.value, rule.value,
                )
                found.append((entry, rule))

        return found
