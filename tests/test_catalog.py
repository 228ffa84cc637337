"""Tests for the knowledge base and catalogs."""

import dataclasses
import json

import pytest
import yaml

from algolens.core.catalog import (
    AlgorithmCategory,
    Catalog,
    CatalogKind,
    DataStructureCategory,
    Entry,
    KnowledgeBase,
)
from algolens.engine.errors import CatalogError


class TestDefaultKnowledgeBase:
    """Test the built-in catalog."""

    def test_catalog_sizes(self, knowledge_base):
        """Test that every declared entry survives, including duplicate names."""
        assert len(knowledge_base.algorithms) == 21
        assert len(knowledge_base.data_structures) == 11

    def test_dijkstra_kept_under_both_categories(self, knowledge_base):
        """Test that composite keys preserve same-name entries."""
        entries = knowledge_base.algorithms.find("Dijkstra's Algorithm")

        assert [e.category for e in entries] == [AlgorithmCategory.GRAPH, AlgorithmCategory.GREEDY]
        assert "greedy" in entries[1].description.lower()

    def test_get_by_composite_key(self, knowledge_base):
        """Test lookup by (name, category)."""
        entry = knowledge_base.algorithms.get("Bubble Sort", AlgorithmCategory.SORTING)

        assert entry is not None
        assert entry.complexity == "O(n²)"
        assert entry.wikipedia_link == "https://en.wikipedia.org/wiki/Bubble_sort"
        assert len(entry.examples) == 2
        assert knowledge_base.algorithms.get("Bubble Sort", AlgorithmCategory.GRAPH) is None

    def test_contains_uses_composite_key(self, knowledge_base):
        """Test membership by (name, category)."""
        assert ("Hash Table", DataStructureCategory.HASH_BASED) in knowledge_base.data_structures
        assert ("Hash Table", AlgorithmCategory.HASHING) in knowledge_base.algorithms
        assert ("Hash Table", AlgorithmCategory.HASHING) not in knowledge_base.data_structures

    def test_by_category_in_declaration_order(self, knowledge_base):
        """Test filtering one category."""
        names = [e.name for e in knowledge_base.algorithms.by_category(AlgorithmCategory.SORTING)]
        assert names == ["Bubble Sort", "Quick Sort", "Merge Sort", "Heap Sort", "Insertion Sort"]

    def test_categories_first_seen_order(self, knowledge_base):
        """Test the distinct category listing."""
        assert knowledge_base.algorithms.categories() == [
            AlgorithmCategory.SORTING,
            AlgorithmCategory.SEARCHING,
            AlgorithmCategory.GRAPH,
            AlgorithmCategory.DYNAMIC_PROGRAMMING,
            AlgorithmCategory.GREEDY,
            AlgorithmCategory.MATHEMATICAL,
            AlgorithmCategory.STRING,
            AlgorithmCategory.TREE,
            AlgorithmCategory.HASHING,
        ]

    def test_catalogs_are_independent(self, knowledge_base):
        """Test that each catalog only holds its own category type."""
        assert all(isinstance(e.category, AlgorithmCategory) for e in knowledge_base.algorithms)
        assert all(isinstance(e.category, DataStructureCategory) for e in knowledge_base.data_structures)
        assert knowledge_base.catalog(CatalogKind.DATA_STRUCTURES) is knowledge_base.data_structures

    def test_entries_are_immutable(self, knowledge_base):
        """Test that entries cannot be modified after build."""
        entry = knowledge_base.algorithms.entries()[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.name = "Renamed"
        assert isinstance(knowledge_base.algorithms.entries(), tuple)

    def test_to_detected_projection(self, knowledge_base):
        """Test the display projection drops exemplars."""
        entry = knowledge_base.data_structures.get("Stack", DataStructureCategory.STACK)
        detected = entry.to_detected()

        assert detected.name == "Stack"
        assert detected.category == "Stack"
        assert detected.complexity == "O(1) push/pop"
        assert not hasattr(detected, "examples")


class TestCategories:
    """Test category label parsing."""

    def test_display_labels(self):
        """Test labels used in output."""
        assert str(AlgorithmCategory.DIVIDE_CONQUER) == "Divide and Conquer"
        assert DataStructureCategory.HASH_BASED.value == "Hash-Based"

    def test_parse_label_and_member_name(self):
        """Test that both display labels and member names resolve."""
        kind = CatalogKind.DATA_STRUCTURES
        assert kind.parse_category("Hash-Based") is DataStructureCategory.HASH_BASED
        assert kind.parse_category("hash_based") is DataStructureCategory.HASH_BASED

    def test_parse_unknown_label(self):
        """Test that labels from the other catalog are rejected."""
        with pytest.raises(CatalogError):
            CatalogKind.DATA_STRUCTURES.parse_category("Sorting")


class TestCatalogValidation:
    """Test construction-time validation."""

    @pytest.mark.parametrize("field", ["name", "complexity", "description", "wikipedia_link"])
    def test_empty_required_field(self, catalog_record, field):
        """Test that blank required fields are fatal."""
        record = catalog_record(**{field: "  "})
        with pytest.raises(CatalogError) as exc_info:
            Catalog.from_records(CatalogKind.ALGORITHMS, [record])
        assert exc_info.value.field == field
        assert exc_info.value.catalog == "algorithms"

    def test_missing_examples(self, catalog_record):
        """Test that an entry without exemplars is rejected."""
        with pytest.raises(CatalogError) as exc_info:
            Catalog.from_records(CatalogKind.ALGORITHMS, [catalog_record(examples=[])])
        assert exc_info.value.field == "examples"

    def test_examples_must_be_a_list(self, catalog_record):
        """Test that a bare string is not mistaken for a list of exemplars."""
        with pytest.raises(CatalogError):
            Catalog.from_records(CatalogKind.ALGORITHMS, [catalog_record(examples="x = 1")])

    @pytest.mark.parametrize("examples", [5, {"x = 1": "y"}, 2.5])
    def test_non_sequence_examples(self, catalog_record, examples):
        """Test that scalar or mapping exemplar values raise CatalogError, not TypeError."""
        with pytest.raises(CatalogError) as exc_info:
            KnowledgeBase.from_dict({
                "algorithms": [catalog_record(examples=examples)],
                "data_structures": [],
            })
        assert exc_info.value.field == "examples"

    def test_unknown_category(self, catalog_record):
        """Test that unknown category labels are fatal."""
        with pytest.raises(CatalogError) as exc_info:
            Catalog.from_records(CatalogKind.ALGORITHMS, [catalog_record(category="Quantum")])
        assert exc_info.value.entry == "Widget Walk"

    def test_duplicate_composite_key(self, catalog_record):
        """Test that the same (name, category) twice is fatal."""
        records = [catalog_record(), catalog_record(description="Another description.")]
        with pytest.raises(CatalogError, match="Duplicate"):
            Catalog.from_records(CatalogKind.ALGORITHMS, records)

    def test_same_name_different_category_allowed(self, catalog_record):
        """Test that a name may repeat across categories."""
        records = [catalog_record(), catalog_record(category="Greedy")]
        catalog = Catalog.from_records(CatalogKind.ALGORITHMS, records)
        assert len(catalog) == 2
        assert len(catalog.find("Widget Walk")) == 2

    def test_category_from_wrong_catalog(self, make_entry):
        """Test that an algorithm entry cannot join the data-structure catalog."""
        with pytest.raises(CatalogError):
            Catalog(CatalogKind.DATA_STRUCTURES, [make_entry()])

    def test_document_requires_both_catalogs(self, catalog_record):
        """Test that a replacement document must be complete."""
        with pytest.raises(CatalogError, match="data_structures"):
            KnowledgeBase.from_dict({"algorithms": [catalog_record()]})

    def test_record_must_be_mapping(self):
        """Test that non-mapping records are rejected."""
        with pytest.raises(CatalogError):
            Catalog.from_records(CatalogKind.ALGORITHMS, ["Bubble Sort"])


class TestKnowledgeBaseFiles:
    """Test loading replacement catalogs."""

    def test_from_yaml_file(self, tmp_path, catalog_record):
        """Test loading a YAML catalog."""
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({
            "algorithms": [catalog_record()],
            "data_structures": [catalog_record(name="Ring Buffer", category="Queue")],
        }))

        kb = KnowledgeBase.from_file(path)

        assert [e.name for e in kb.algorithms] == ["Widget Walk"]
        assert kb.data_structures.entries()[0].category is DataStructureCategory.QUEUE

    def test_from_json_file(self, tmp_path, catalog_record):
        """Test loading a JSON catalog."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"algorithms": [], "data_structures": [catalog_record(category="Set")]}))

        kb = KnowledgeBase.from_file(path)

        assert len(kb.algorithms) == 0
        assert len(kb.data_structures) == 1

    def test_unsupported_suffix(self, tmp_path):
        """Test that unknown file types are rejected."""
        path = tmp_path / "catalog.toml"
        path.write_text("")
        with pytest.raises(CatalogError, match="Unsupported"):
            KnowledgeBase.from_file(path)

    def test_missing_file(self, tmp_path):
        """Test that an unreadable catalog is a catalog error."""
        with pytest.raises(CatalogError, match="Cannot read"):
            KnowledgeBase.from_file(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that syntax errors surface as catalog errors."""
        path = tmp_path / "broken.yaml"
        path.write_text("algorithms: [unclosed")
        with pytest.raises(CatalogError, match="Cannot parse"):
            KnowledgeBase.from_file(path)

    def test_entry_round_trips_through_dict(self, knowledge_base):
        """Test Entry.to_dict/from_dict on a real entry."""
        entry = knowledge_base.algorithms.entries()[0]
        assert Entry.from_dict(CatalogKind.ALGORITHMS, entry.to_dict()) == entry
