"""Typed animation example catalog.

This subpackage defines the closed category registry, loads the per-category
YAML example definitions into an immutable :class:`ExampleStore`, and exposes
read-only queries through :class:`CatalogQuery`. The primary entry point is
:func:`load_catalog`, which wires the three together.

Examples
--------
>>> from animator_catalog.catalog import load_catalog
>>> catalog = load_catalog()
>>> catalog.count_by_category("basic")
8
>>> catalog.filter_by_category("spring")[0].title
'Bouncy Scale'
"""

from .loader import ExampleStore
from .models import (
    CatalogError,
    CatalogLoadError,
    Category,
    CategoryNotFoundError,
    Concept,
    EmptyCatalogError,
    Example,
    ExampleNotFoundError,
    Explanation,
)
from .query import CatalogQuery, load_catalog
from .registry import CATEGORIES, CategoryRegistry

__all__ = [
    "CATEGORIES",
    "CatalogError",
    "CatalogLoadError",
    "CatalogQuery",
    "Category",
    "CategoryNotFoundError",
    "CategoryRegistry",
    "Concept",
    "EmptyCatalogError",
    "Example",
    "ExampleNotFoundError",
    "ExampleStore",
    "Explanation",
    "load_catalog",
]
