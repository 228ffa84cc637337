"""Category keyword tables.

Each category of both catalogs maps to a fixed set of lowercase keywords.
A snippet containing any keyword of an entry's category matches that entry,
so these tables deliberately favour recall over precision. Both tables are
checked for exhaustiveness when this module is imported.
"""

from enum import Enum
from typing import FrozenSet, Mapping, Type

from ..engine.errors import CatalogError
from .catalog import AlgorithmCategory, Category, DataStructureCategory

ALGORITHM_KEYWORDS: Mapping[AlgorithmCategory, FrozenSet[str]] = {
    AlgorithmCategory.SORTING: frozenset({"sort", "sorted", "ordering"}),
    AlgorithmCategory.SEARCHING: frozenset({"search", "find", "lookup"}),
    AlgorithmCategory.GRAPH: frozenset({"graph", "node", "edge", "vertex"}),
    AlgorithmCategory.DYNAMIC_PROGRAMMING: frozenset({"dp", "memo", "subproblem"}),
    AlgorithmCategory.GREEDY: frozenset({"greedy", "optimal", "choice"}),
    AlgorithmCategory.BACKTRACKING: frozenset({"backtrack", "recurse", "prune"}),
    AlgorithmCategory.DIVIDE_CONQUER: frozenset({"divide", "conquer", "merge"}),
    AlgorithmCategory.MATHEMATICAL: frozenset({"math", "prime", "gcd", "lcm"}),
    AlgorithmCategory.CRYPTOGRAPHIC: frozenset({"encrypt", "decrypt", "hash", "cipher"}),
    AlgorithmCategory.MACHINE_LEARNING: frozenset({"train", "predict", "model", "neural"}),
    AlgorithmCategory.STRING: frozenset({"string", "substring", "pattern"}),
    AlgorithmCategory.TREE: frozenset({"tree", "bst", "binary", "traversal"}),
    AlgorithmCategory.HASHING: frozenset({"hash", "map", "dict", "table"}),
    AlgorithmCategory.OTHER: frozenset(),
}

DATA_STRUCTURE_KEYWORDS: Mapping[DataStructureCategory, FrozenSet[str]] = {
    DataStructureCategory.LINEAR: frozenset({"array", "list", "vector"}),
    DataStructureCategory.TREE: frozenset({"tree", "bst", "binary", "avl", "red-black"}),
    DataStructureCategory.GRAPH: frozenset({"graph", "node", "edge", "vertex"}),
    DataStructureCategory.HASH_BASED: frozenset({"hash", "map", "dict", "table"}),
    DataStructureCategory.HEAP: frozenset({"heap", "priority"}),
    DataStructureCategory.QUEUE: frozenset({"queue", "fifo"}),
    DataStructureCategory.STACK: frozenset({"stack", "lifo"}),
    DataStructureCategory.SET: frozenset({"set", "unique"}),
    DataStructureCategory.OTHER: frozenset(),
}


def validate_keyword_table(enum_cls: Type[Enum], table: Mapping) -> None:
    """Fail unless ``table`` has a lowercase keyword set for every member of ``enum_cls``."""
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise CatalogError(
            f"No keyword set for {enum_cls.__name__} categories: {', '.join(missing)}",
            field="category",
            details={"missing": missing},
        )
    for member, keywords in table.items():
        if any(kw != kw.lower() or not kw for kw in keywords):
            raise CatalogError(
                f"Keywords for {member.value} must be non-empty and lowercase",
                field="category",
            )


validate_keyword_table(AlgorithmCategory, ALGORITHM_KEYWORDS)
validate_keyword_table(DataStructureCategory, DATA_STRUCTURE_KEYWORDS)


def keywords_for(category: Category) -> FrozenSet[str]:
    """Keyword set bound to a category of either catalog."""
    if isinstance(category, AlgorithmCategory):
        return ALGORITHM_KEYWORDS[category]
    return DATA_STRUCTURE_KEYWORDS[category]
