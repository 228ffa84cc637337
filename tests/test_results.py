"""Tests for result serialization."""

import json

from algolens.core.results import AnalysisResult, ComplexityTier, DetectedEntry


def sample_entry(name="Quick Sort", category="Sorting"):
    return DetectedEntry(
        name=name,
        category=category,
        complexity="O(n log n)",
        description="Partition-based sort.",
        wikipedia_link="https://en.wikipedia.org/wiki/Quicksort",
    )


class TestAnalysisResult:
    """Test AnalysisResult JSON shape."""

    def test_json_fields(self):
        """Test that the JSON object has exactly the published fields."""
        result = AnalysisResult(
            patterns=["Recursive function"],
            detailed_algorithms=[sample_entry()],
            detailed_data_structures=[sample_entry("Stack", "Stack")],
            complexity=ComplexityTier.MEDIUM,
            recommendations=["Add documentation comments"],
        )

        data = json.loads(result.to_json())

        assert set(data) == {
            "patterns", "algorithms", "detailed_algorithms", "data_structures",
            "detailed_data_structures", "complexity", "recommendations",
        }
        assert data["algorithms"] == ["Quick Sort"]
        assert data["data_structures"] == ["Stack"]
        assert data["complexity"] == "Medium"
        assert set(data["detailed_algorithms"][0]) == {
            "name", "category", "complexity", "description", "wikipedia_link",
        }

    def test_from_dict_rebuilds_result(self):
        """Test deserialization of a stored result."""
        original = AnalysisResult(
            detailed_algorithms=[sample_entry(), sample_entry("Merge Sort")],
            complexity=ComplexityTier.HIGH,
        )

        restored = AnalysisResult.from_dict(json.loads(original.to_json()))

        assert restored == original
        assert restored.algorithms == ["Quick Sort", "Merge Sort"]

    def test_empty_result(self):
        """Test the default result."""
        result = AnalysisResult()

        assert result.is_empty()
        assert result.to_dict()["complexity"] == "Low"

    def test_unicode_complexity_preserved(self):
        """Test that non-ASCII complexity labels survive JSON output."""
        entry = DetectedEntry("Bubble Sort", "Sorting", "O(n²)", "d", "https://example.org")
        result = AnalysisResult(detailed_algorithms=[entry])

        assert "O(n²)" in result.to_json()
