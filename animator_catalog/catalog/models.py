"""Typed dataclasses describing animation catalog structures."""

from __future__ import annotations

import dataclasses as dc
import uuid  # noqa: TC003 - used for runtime type metadata


class CatalogError(Exception):
    """Base class for every error raised by the animation catalog."""


class CategoryNotFoundError(CatalogError, LookupError):
    """Raised when a category id is not part of the registry."""


class ExampleNotFoundError(CatalogError, LookupError):
    """Raised when no example matches the requested id or preview key."""


class EmptyCatalogError(CatalogError):
    """Raised when an operation needs at least one example but the store is empty."""


class CatalogLoadError(CatalogError, ValueError):
    """Raised when example definitions cannot be loaded or fail validation."""


@dc.dataclass(frozen=True, slots=True)
class Category:
    """Display metadata for one animation category."""

    id: str
    title: str
    description: str
    icon: str
    colors: tuple[str, str]


@dc.dataclass(frozen=True, slots=True)
class Concept:
    """A titled key concept listed in an example explanation."""

    title: str
    description: str


@dc.dataclass(frozen=True, slots=True)
class Explanation:
    """Overview, key concepts, and tips that accompany an example.

    Attributes
    ----------
    overview : str
        Paragraph introducing the technique.
    concepts : tuple[Concept, ...]
        Key concepts in display order.
    tips : tuple[str, ...]
        Practical tips in display order; duplicates are kept.
    """

    overview: str
    concepts: tuple[Concept, ...] = ()
    tips: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Example:
    """A single catalog entry describing one animation technique.

    Attributes
    ----------
    id : uuid.UUID
        Identifier that stays stable for the lifetime of the store.
    title : str
        Short display title.
    description : str
        One-line summary shown on cards.
    category_id : str
        Id of the owning :class:`Category`.
    code_preview : str
        Short source snippet shown alongside the live preview.
    usage_example : str
        Fuller, self-contained source listing.
    explanation : Explanation
        Overview, concepts, and tips owned by this example.
    preview_key : str
        Opaque token telling a renderer which visual effect to show.
    """

    id: uuid.UUID
    title: str
    description: str
    category_id: str
    code_preview: str
    usage_example: str
    explanation: Explanation
    preview_key: str


__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "Category",
    "CategoryNotFoundError",
    "Concept",
    "EmptyCatalogError",
    "Example",
    "ExampleNotFoundError",
    "Explanation",
]
