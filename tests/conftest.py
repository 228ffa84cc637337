"""
Shared fixtures for the algolens test suite.
"""

import logging

import pytest

from algolens.analyzers.aggregator import Aggregator
from algolens.core.catalog import AlgorithmCategory, Entry, KnowledgeBase


BUBBLE_SORT_SNIPPET = """
fn bubble(arr: &mut Vec<i32>) {
    for i in 0..arr.len() {
        for j in 0..arr.len() - 1 - i {
            if arr[j] > arr[j + 1] { /* swap */ }
        }
    }
}
"""

BINARY_SEARCH_SNIPPET = (
    "fn binary_search(arr: &[i32], target: i32) -> Option<usize> "
    "{ ... while left < right { ... } }"
)


@pytest.fixture
def bubble_sort_snippet():
    """The bubble-sort exemplar reformatted across lines, without the word 'sort'."""
    return BUBBLE_SORT_SNIPPET


@pytest.fixture
def binary_search_snippet():
    return BINARY_SEARCH_SNIPPET


@pytest.fixture(scope="session")
def knowledge_base():
    """The built-in knowledge base, built once."""
    return KnowledgeBase.default()


@pytest.fixture
def aggregator(knowledge_base):
    return Aggregator(knowledge_base)


@pytest.fixture
def make_entry():
    """Factory for standalone entries with overridable fields."""
    def factory(**overrides):
        fields = dict(
            name="Widget Walk",
            category=AlgorithmCategory.OTHER,
            complexity="O(n)",
            description="A test-only entry.",
            wikipedia_link="https://example.org/widget",
            examples=("widget.walk()",),
        )
        fields.update(overrides)
        return Entry(**fields)
    return factory


@pytest.fixture
def catalog_record():
    """Factory for declarative catalog records (as found in YAML files)."""
    def factory(**overrides):
        record = {
            "name": "Widget Walk",
            "category": "Other",
            "complexity": "O(n)",
            "description": "A test-only entry.",
            "wikipedia_link": "https://example.org/widget",
            "examples": ["widget.walk()"],
        }
        record.update(overrides)
        return record
    return factory


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep user config and CLI logging handlers out of tests."""
    monkeypatch.delenv("ALGOLENS_CONFIG", raising=False)
    logger = logging.getLogger("algolens")
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.filters.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
