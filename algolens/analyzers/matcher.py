"""Single-entry match decision."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..core.catalog import Entry
from ..core.keywords import keywords_for
from ..core.normalize import normalize


class MatchRule(Enum):
    """The containment rule that decided a match, in evaluation order."""
    EXEMPLAR = "exemplar"
    NORMALIZED_EXEMPLAR = "normalized_exemplar"
    NAME = "name"
    CATEGORY_KEYWORD = "category_keyword"


class Matcher:
    """
    Decide whether a snippet matches a catalog entry.

    An entry matches when any rule holds:

    1. the snippet contains one of the entry's exemplars verbatim;
    2. the whitespace-normalized snippet contains a normalized exemplar;
    3. the lowercased snippet contains the lowercased entry name;
    4. the lowercased snippet contains a keyword of the entry's category.

    Rule 4 overmatches on purpose and can be disabled with
    ``keyword_matching=False``.
    """

    def __init__(self, keyword_matching: bool = True):
        self.keyword_matching = keyword_matching

    def matches(self, snippet: str, entry: Entry) -> bool:
        return self.explain(snippet, entry) is not None

    def explain(self, snippet: str, entry: Entry) -> Optional[MatchRule]:
        """Return the first rule that matches, or None."""
        normalized = normalize(snippet)
        if not normalized:
            return None

        return self.explain_prepared(snippet, normalized, snippet.lower(), entry)

    def explain_prepared(
        self,
        snippet: str,
        normalized: str,
        lowered: str,
        entry: Entry,
    ) -> Optional[MatchRule]:
        """Like :meth:`explain` with the snippet's derived forms precomputed.

        The detector computes ``normalized`` and ``lowered`` once per snippet
        rather than once per entry.
        """
        if not normalized:
            return None

        for example in entry.examples:
            if example in snippet:
                return MatchRule.EXEMPLAR
            normalized_example = normalize(example)
            if normalized_example and normalized_example in normalized:
                return MatchRule.NORMALIZED_EXEMPLAR

        if entry.name.lower() in lowered:
            return MatchRule.NAME

        if self.keyword_matching:
            for keyword in keywords_for(entry.category):
                if keyword in lowered:
                    return MatchRule.CATEGORY_KEYWORD

        return None
