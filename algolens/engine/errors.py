"""
Error types for the detection engine.

The engine itself is total over arbitrary text; the only failures it can
surface happen while building a knowledge base or reading configuration.
Both are fatal at startup and never recoverable per request.
"""

from typing import Optional, Any, Dict


class AlgolensError(Exception):
    """
    Base exception for all algolens errors.

    Provides common functionality for error tracking and reporting.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize algolens error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CatalogError(AlgolensError):
    """
    Raised when a declarative catalog is malformed.

    Covers empty required fields, unknown category labels, missing exemplars
    and duplicate (name, category) keys.
    """

    def __init__(self, message: str,
                 entry: Optional[str] = None,
                 field: Optional[str] = None,
                 catalog: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize catalog error.

        Args:
            message: Error message
            entry: Name of the offending entry, if known
            field: Field that failed validation, if any
            catalog: Catalog kind ('algorithms' or 'data_structures')
            details: Additional error context
        """
        super().__init__(message, details)
        self.entry = entry
        self.field = field
        self.catalog = catalog

        self.details.update({
            'entry': entry,
            'field': field,
            'catalog': catalog
        })


class ConfigError(AlgolensError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str,
                 key: Optional[str] = None,
                 value: Any = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.key = key
        self.value = value

        self.details.update({
            'key': key,
            'value': value
        })
