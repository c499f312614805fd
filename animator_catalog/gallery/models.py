"""Shared dataclasses passed to the gallery templates."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class CategoryCardModel:
    """Structured data for a category card or category page header.

    Attributes
    ----------
    id : str
        Category identifier.
    title : str
        Display title.
    description : str
        Category blurb.
    icon : str
        Opaque icon identifier, emitted as a data attribute.
    gradient : str
        CSS ``linear-gradient`` built from the category colours.
    effect : str
        Preview effect name for the card animation.
    count : int
        Number of examples in the category.
    href : str
        Relative link to the category page.
    """

    id: str
    title: str
    description: str
    icon: str
    gradient: str
    effect: str
    count: int
    href: str


@dc.dataclass(slots=True)
class ExampleCardModel:
    """Structured data for an example card or detail page.

    ``code_html`` and ``usage_html`` hold pre-highlighted markup;
    ``overview_html`` holds rendered markdown. ``category_href`` links back to
    the owning category page.
    """

    title: str
    description: str
    category_id: str
    category_title: str
    preview_key: str
    effect: str
    href: str
    category_href: str
    overview_html: str
    concepts: list[dict[str, str]]
    tips: list[str]
    code_html: str
    usage_html: str


__all__ = ["CategoryCardModel", "ExampleCardModel"]
