"""Knowledge base of named algorithms and data structures.

A :class:`KnowledgeBase` holds two independent :class:`Catalog` values, one
per :class:`CatalogKind`. Catalogs are built once from a declarative list of
records (the YAML file shipped in ``algolens/data`` by default) and are
read-only afterwards. Entries are keyed by ``(name, category)`` so the same
algorithm may legitimately appear under two categories.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Type, Union

import yaml

from ..engine.errors import CatalogError
from ..utils.logging_setup import get_logger
from .results import DetectedEntry

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.yaml"


class AlgorithmCategory(Enum):
    """Categories of the algorithm catalog. Values are display labels."""
    SORTING = "Sorting"
    SEARCHING = "Searching"
    GRAPH = "Graph"
    DYNAMIC_PROGRAMMING = "Dynamic Programming"
    GREEDY = "Greedy"
    BACKTRACKING = "Backtracking"
    DIVIDE_CONQUER = "Divide and Conquer"
    MATHEMATICAL = "Mathematical"
    CRYPTOGRAPHIC = "Cryptographic"
    MACHINE_LEARNING = "Machine Learning"
    STRING = "String"
    TREE = "Tree"
    HASHING = "Hashing"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


class DataStructureCategory(Enum):
    """Categories of the data-structure catalog. Values are display labels."""
    LINEAR = "Linear"
    TREE = "Tree"
    GRAPH = "Graph"
    HASH_BASED = "Hash-Based"
    HEAP = "Heap"
    QUEUE = "Queue"
    STACK = "Stack"
    SET = "Set"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


Category = Union[AlgorithmCategory, DataStructureCategory]
EntryKey = Tuple[str, Category]


class CatalogKind(Enum):
    """The two independent catalogs."""
    ALGORITHMS = "algorithms"
    DATA_STRUCTURES = "data_structures"

    @property
    def category_enum(self) -> Type[Enum]:
        if self is CatalogKind.ALGORITHMS:
            return AlgorithmCategory
        return DataStructureCategory

    def parse_category(self, label: Any) -> Category:
        """Resolve a display label (or member name) to this kind's category."""
        enum_cls = self.category_enum
        if isinstance(label, enum_cls):
            return label
        text = str(label).strip()
        for member in enum_cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise CatalogError(
            f"Unknown {self.value} category: {label!r}",
            field="category",
            catalog=self.value,
        )


REQUIRED_FIELDS = ("name", "complexity", "description", "wikipedia_link")


@dataclass(frozen=True)
class Entry:
    """One named, categorized record with exemplar code fragments."""

    name: str
    category: Category
    complexity: str
    description: str
    wikipedia_link: str
    examples: Tuple[str, ...] = ()

    @property
    def key(self) -> EntryKey:
        return (self.name, self.category)

    def to_detected(self) -> DetectedEntry:
        """Project to the display form reported in analysis results."""
        return DetectedEntry(
            name=self.name,
            category=self.category.value,
            complexity=self.complexity,
            description=self.description,
            wikipedia_link=self.wikipedia_link,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "complexity": self.complexity,
            "description": self.description,
            "wikipedia_link": self.wikipedia_link,
            "examples": list(self.examples),
        }

    @classmethod
    def from_dict(cls, kind: CatalogKind, data: Mapping[str, Any]) -> Entry:
        """Build and validate an entry from a declarative record."""
        if not isinstance(data, Mapping):
            raise CatalogError(
                f"Catalog record must be a mapping, got {type(data).__name__}",
                catalog=kind.value,
            )

        name = data.get("name")
        for field_name in REQUIRED_FIELDS:
            value = data.get(field_name)
            if not isinstance(value, str) or not value.strip():
                raise CatalogError(
                    f"Entry {name!r} has an empty or missing '{field_name}'",
                    entry=name if isinstance(name, str) else None,
                    field=field_name,
                    catalog=kind.value,
                )

        if "category" not in data:
            raise CatalogError(
                f"Entry {name!r} has no category",
                entry=name,
                field="category",
                catalog=kind.value,
            )
        try:
            category = kind.parse_category(data["category"])
        except CatalogError as e:
            e.entry = name
            e.details["entry"] = name
            raise

        examples = data.get("examples") or []
        if not isinstance(examples, (list, tuple)) or not all(
            isinstance(ex, str) and ex for ex in examples
        ):
            raise CatalogError(
                f"Entry {name!r} has malformed exemplars",
                entry=name,
                field="examples",
                catalog=kind.value,
            )
        if not examples:
            raise CatalogError(
                f"Entry {name!r} has no exemplars",
                entry=name,
                field="examples",
                catalog=kind.value,
            )

        return cls(
            name=name,
            category=category,
            complexity=data["complexity"],
            description=data["description"],
            wikipedia_link=data["wikipedia_link"],
            examples=tuple(examples),
        )


class Catalog:
    """Immutable, ordered collection of entries for one catalog kind."""

    def __init__(self, kind: CatalogKind, entries: Iterable[Entry]):
        self.kind = kind
        index: Dict[EntryKey, Entry] = {}
        for entry in entries:
            if not isinstance(entry.category, kind.category_enum):
                raise CatalogError(
                    f"Entry {entry.name!r} uses category {entry.category!r} "
                    f"outside the {kind.value} catalog",
                    entry=entry.name,
                    field="category",
                    catalog=kind.value,
                )
            if entry.key in index:
                raise CatalogError(
                    f"Duplicate entry {entry.name!r} in category {entry.category.value!r}",
                    entry=entry.name,
                    field="name",
                    catalog=kind.value,
                )
            index[entry.key] = entry
        self._index: Mapping[EntryKey, Entry] = MappingProxyType(index)
        self._entries: Tuple[Entry, ...] = tuple(index.values())

    @classmethod
    def from_records(cls, kind: CatalogKind, records: Iterable[Mapping[str, Any]]) -> Catalog:
        return cls(kind, (Entry.from_dict(kind, record) for record in records))

    def entries(self) -> Tuple[Entry, ...]:
        """All entries in declaration order."""
        return self._entries

    def get(self, name: str, category: Category) -> Optional[Entry]:
        return self._index.get((name, category))

    def find(self, name: str) -> List[Entry]:
        """All entries sharing ``name``, one per category."""
        return [entry for entry in self._entries if entry.name == name]

    def by_category(self, category: Category) -> List[Entry]:
        return [entry for entry in self._entries if entry.category == category]

    def categories(self) -> List[Category]:
        """Distinct categories present, in first-seen order."""
        seen: List[Category] = []
        for entry in self._entries:
            if entry.category not in seen:
                seen.append(entry.category)
        return seen

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"Catalog(kind={self.kind.value!r}, entries={len(self)})"


@dataclass(frozen=True)
class KnowledgeBase:
    """The pair of catalogs consulted by the detectors."""

    algorithms: Catalog
    data_structures: Catalog

    def catalog(self, kind: CatalogKind) -> Catalog:
        if kind is CatalogKind.ALGORITHMS:
            return self.algorithms
        return self.data_structures

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KnowledgeBase:
        """Build from ``{"algorithms": [...], "data_structures": [...]}``."""
        if not isinstance(data, Mapping):
            raise CatalogError("Catalog document must be a mapping")

        catalogs = {}
        for kind in CatalogKind:
            records = data.get(kind.value)
            if not isinstance(records, list):
                raise CatalogError(
                    f"Catalog document has no '{kind.value}' list",
                    catalog=kind.value,
                )
            catalogs[kind] = Catalog.from_records(kind, records)

        kb = cls(
            algorithms=catalogs[CatalogKind.ALGORITHMS],
            data_structures=catalogs[CatalogKind.DATA_STRUCTURES],
        )
        logger.info(
            "Built knowledge base: %d algorithms, %d data structures",
            len(kb.algorithms), len(kb.data_structures),
        )
        return kb

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> KnowledgeBase:
        """Load a complete replacement catalog from YAML or JSON."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                elif path.suffix == ".json":
                    data = json.load(f)
                else:
                    raise CatalogError(f"Unsupported catalog format: {path.suffix}")
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot parse catalog {path}: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def default(cls) -> KnowledgeBase:
        """The built-in catalog shipped with the package."""
        return cls.from_file(DEFAULT_CATALOG_PATH)
