"""The closed set of animation categories and their display metadata.

Categories are compiled-in static configuration: they are declared once, in
the order below, and never change at runtime. :class:`CategoryRegistry` wraps
that tuple with id lookups so the store and query layer can validate category
references.

Examples
--------
>>> from animator_catalog.catalog.registry import CategoryRegistry
>>> registry = CategoryRegistry()
>>> registry.category("morph").title
'Morphing'
>>> [category.id for category in registry.all_categories()][:3]
['basic', 'spring', 'transition']
"""

from __future__ import annotations

import typing as typ

from .models import Category, CategoryNotFoundError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

CATEGORIES: tuple[Category, ...] = (
    Category(
        id="basic",
        title="Basic",
        description=(
            "Learn fundamental animations like scaling, rotating, and moving views"
        ),
        icon="square.and.pencil",
        colors=("blue", "purple"),
    ),
    Category(
        id="spring",
        title="Spring",
        description="Explore spring-based animations with customizable parameters",
        icon="spring",
        colors=("orange", "pink"),
    ),
    Category(
        id="transition",
        title="Transition",
        description="Discover different ways to transition views in and out",
        icon="arrow.left.and.right.righttriangle.left.righttriangle.right",
        colors=("green", "mint"),
    ),
    Category(
        id="keyframe",
        title="Keyframe",
        description="Create complex multi-step animations with precise timing",
        icon="key",
        colors=("purple", "indigo"),
    ),
    Category(
        id="path",
        title="Path",
        description="Animate views along custom paths and curves",
        icon="point.3.connected.trianglepath.dotted",
        colors=("red", "orange"),
    ),
    Category(
        id="gesture",
        title="Gesture",
        description="Interactive animations driven by user gestures and touches",
        icon="hand.tap",
        colors=("blue", "cyan"),
    ),
    Category(
        id="physics",
        title="Physics",
        description="Realistic physics-based animations with gravity and collisions",
        icon="atom",
        colors=("yellow", "orange"),
    ),
    Category(
        id="morph",
        title="Morphing",
        description="Smooth transformations between shapes and colors",
        icon="square.on.circle",
        colors=("purple", "pink"),
    ),
    Category(
        id="particle",
        title="Particles",
        description="Create engaging particle effects and systems",
        icon="sparkles",
        colors=("mint", "teal"),
    ),
    Category(
        id="sequence",
        title="Sequence",
        description="Chain multiple animations in coordinated sequences",
        icon="list.number",
        colors=("indigo", "blue"),
    ),
    Category(
        id="advanced",
        title="Advanced",
        description="Complex animations combining multiple techniques and effects",
        icon="star.circle.fill",
        colors=("purple", "red"),
    ),
)


class CategoryRegistry:
    """Read-only index over an ordered tuple of categories."""

    def __init__(self, categories: cabc.Iterable[Category] = CATEGORIES) -> None:
        self._categories = tuple(categories)
        self._by_id = {category.id: category for category in self._categories}
        if len(self._by_id) != len(self._categories):
            msg = "Category ids must be unique."
            raise ValueError(msg)

    def all_categories(self) -> tuple[Category, ...]:
        """Return every category in declaration order."""
        return self._categories

    def ids(self) -> tuple[str, ...]:
        """Return every category id in declaration order."""
        return tuple(category.id for category in self._categories)

    def category(self, category_id: str) -> Category:
        """Return the category registered under ``category_id``.

        Raises
        ------
        CategoryNotFoundError
            If ``category_id`` is not part of the registry.
        """
        try:
            return self._by_id[category_id]
        except KeyError as exc:
            available = ", ".join(self.ids())
            msg = f"Unknown category '{category_id}'. Known categories: {available}"
            raise CategoryNotFoundError(msg) from exc

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __len__(self) -> int:
        return len(self._categories)


__all__ = ["CATEGORIES", "CategoryRegistry"]
