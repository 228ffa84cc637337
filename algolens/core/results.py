"""Analysis result data structures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, TypedDict, Union


class ComplexityTier(Enum):
    """Line-count based size tier of a snippet."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value


class DetectedEntryDict(TypedDict):
    """Type definition for detected entry dictionary representation."""
    name: str
    category: str
    complexity: str
    description: str
    wikipedia_link: str


class AnalysisResultDict(TypedDict):
    """JSON shape of an analysis result."""
    patterns: List[str]
    algorithms: List[str]
    detailed_algorithms: List[DetectedEntryDict]
    data_structures: List[str]
    detailed_data_structures: List[DetectedEntryDict]
    complexity: str
    recommendations: List[str]


@dataclass(frozen=True)
class DetectedEntry:
    """Display projection of a matched catalog entry."""

    name: str
    category: str
    complexity: str
    description: str
    wikipedia_link: str

    def to_dict(self) -> DetectedEntryDict:
        return {
            "name": self.name,
            "category": self.category,
            "complexity": self.complexity,
            "description": self.description,
            "wikipedia_link": self.wikipedia_link,
        }

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], DetectedEntryDict]) -> DetectedEntry:
        return cls(**data)


@dataclass
class AnalysisResult:
    """Aggregate produced for one analyzed snippet.

    ``algorithms`` and ``data_structures`` are always the name projection of
    the detailed lists, in the same order.
    """

    patterns: List[str] = field(default_factory=list)
    detailed_algorithms: List[DetectedEntry] = field(default_factory=list)
    detailed_data_structures: List[DetectedEntry] = field(default_factory=list)
    complexity: ComplexityTier = ComplexityTier.LOW
    recommendations: List[str] = field(default_factory=list)

    @property
    def algorithms(self) -> List[str]:
        return [entry.name for entry in self.detailed_algorithms]

    @property
    def data_structures(self) -> List[str]:
        return [entry.name for entry in self.detailed_data_structures]

    def is_empty(self) -> bool:
        """True when nothing was detected and no advice was produced."""
        return not (
            self.patterns
            or self.detailed_algorithms
            or self.detailed_data_structures
            or self.recommendations
        )

    def to_dict(self) -> AnalysisResultDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "patterns": list(self.patterns),
            "algorithms": self.algorithms,
            "detailed_algorithms": [e.to_dict() for e in self.detailed_algorithms],
            "data_structures": self.data_structures,
            "detailed_data_structures": [e.to_dict() for e in self.detailed_data_structures],
            "complexity": self.complexity.value,
            "recommendations": list(self.recommendations),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], AnalysisResultDict]) -> AnalysisResult:
        """Create from dictionary. Name lists are rebuilt from the detailed lists."""
        return cls(
            patterns=list(data.get("patterns", [])),
            detailed_algorithms=[
                DetectedEntry.from_dict(d) for d in data.get("detailed_algorithms", [])
            ],
            detailed_data_structures=[
                DetectedEntry.from_dict(d) for d in data.get("detailed_data_structures", [])
            ],
            complexity=ComplexityTier(data.get("complexity", ComplexityTier.LOW.value)),
            recommendations=list(data.get("recommendations", [])),
        )
