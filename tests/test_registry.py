"""Unit tests for the closed category registry."""

from __future__ import annotations

import pytest

from animator_catalog.catalog import (
    CATEGORIES,
    Category,
    CategoryNotFoundError,
    CategoryRegistry,
)

EXPECTED_ORDER = [
    "basic",
    "spring",
    "transition",
    "keyframe",
    "path",
    "gesture",
    "physics",
    "morph",
    "particle",
    "sequence",
    "advanced",
]


def test_registry_preserves_declaration_order() -> None:
    """Categories should be listed in their fixed display order."""
    registry = CategoryRegistry()
    assert list(registry.ids()) == EXPECTED_ORDER, (
        f"expected {EXPECTED_ORDER}, got {list(registry.ids())}"
    )
    assert len(registry) == len(CATEGORIES) == 11


def test_category_lookup_returns_metadata() -> None:
    """Lookups should expose titles, icons, and two-colour gradients."""
    registry = CategoryRegistry()
    spring = registry.category("spring")
    assert spring.title == "Spring"
    assert spring.icon, "expected an icon name for the spring category"
    assert len(spring.colors) == 2
    assert registry.category("particle").title == "Particles"


def test_unknown_category_lists_known_ids() -> None:
    """Unknown ids should raise with the registered ids in the message."""
    registry = CategoryRegistry()
    with pytest.raises(CategoryNotFoundError, match="Known categories: basic"):
        registry.category("lasers")
    assert "lasers" not in registry
    assert "morph" in registry


def test_category_not_found_is_a_lookup_error() -> None:
    """Callers catching LookupError should also see registry misses."""
    with pytest.raises(LookupError):
        CategoryRegistry().category("")


def test_duplicate_category_ids_rejected() -> None:
    """A registry with repeated ids is a programming error."""
    duplicate = Category("basic", "Again", "Repeat", "circle", ("red", "blue"))
    with pytest.raises(ValueError, match="unique"):
        CategoryRegistry([*CATEGORIES, duplicate])
