"""
Engine error types shared by the knowledge base, configuration and CLI.
"""

from .errors import (
    AlgolensError,
    CatalogError,
    ConfigError,
)

__all__ = [
    "AlgolensError",
    "CatalogError",
    "ConfigError",
]
