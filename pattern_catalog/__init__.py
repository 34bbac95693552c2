"""
Pattern Catalog

Classic object-oriented design patterns, each a small standalone example.
"""

from pattern_catalog.core.exceptions import (
    IncompatibleError,
    InvalidArgumentError,
    NotFoundError,
    PatternError,
    PreconditionFailedError,
    UnknownTypeError,
    UnsupportedOperationError,
)
from pattern_catalog.core.patterns import *  # noqa: F401,F403
from pattern_catalog.core.patterns import __all__ as _pattern_names
from pattern_catalog.core.catalog_manager import CatalogManager, catalog_manager

__all__ = [
    "PatternError",
    "InvalidArgumentError",
    "UnknownTypeError",
    "NotFoundError",
    "PreconditionFailedError",
    "IncompatibleError",
    "UnsupportedOperationError",
    "CatalogManager",
    "catalog_manager",
] + list(_pattern_names)
