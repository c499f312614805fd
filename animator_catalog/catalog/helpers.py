"""Utility helpers shared by the example store loader."""

from __future__ import annotations

import typing as typ
import uuid

from .models import CatalogLoadError, Concept, Explanation

EXAMPLE_NAMESPACE = uuid.UUID("5b0f3c52-8f0e-4f38-9a49-2f4f4a1f6d0e")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_text(value: object | None, *, field: str, where: str) -> str:
    """Return ``value`` stripped, raising when it is missing or blank."""
    text = _optional_str(value) if isinstance(value, str) else None
    if not text:
        msg = f"{where} requires a non-empty '{field}'."
        raise CatalogLoadError(msg)
    return text


def _snippet(value: object | None, *, field: str, where: str) -> str:
    """Return a source snippet verbatim, allowing it to be absent."""
    match value:
        case None:
            return ""
        case str() as text:
            return text
        case _:
            msg = f"{where} field '{field}' must be a string."
            raise CatalogLoadError(msg)


def _build_concepts(entries: object | None, *, where: str) -> tuple[Concept, ...]:
    """Build key concepts from a list of ``title``/``description`` mappings."""
    match entries:
        case None:
            return ()
        case list() as items:
            iterable = items
        case _:
            msg = f"{where} 'concepts' must be a list."
            raise CatalogLoadError(msg)

    concepts: list[Concept] = []
    for position, entry in enumerate(iterable):
        match entry:
            case {"title": title, "description": description}:
                pass
            case _:
                msg = f"{where} concept {position} requires 'title' and 'description'."
                raise CatalogLoadError(msg)
        concepts.append(
            Concept(
                title=_require_text(title, field="title", where=where),
                description=_require_text(
                    description, field="description", where=where
                ),
            )
        )
    return tuple(concepts)


def _build_tips(entries: object | None, *, where: str) -> tuple[str, ...]:
    """Build the ordered tip list, keeping duplicates."""
    match entries:
        case None:
            return ()
        case list() as items:
            pass
        case _:
            msg = f"{where} 'tips' must be a list."
            raise CatalogLoadError(msg)
    tips: list[str] = []
    for position, entry in enumerate(items):
        match entry:
            case str() as text if text.strip():
                tips.append(text.strip())
            case _:
                msg = f"{where} tip {position} must be a non-empty string."
                raise CatalogLoadError(msg)
    return tuple(tips)


def _build_explanation(
    payload: typ.Mapping[str, typ.Any] | None, *, where: str
) -> Explanation:
    """Build an :class:`Explanation` from its mapping payload."""
    if not isinstance(payload, dict):
        msg = f"{where} requires an 'explanation' mapping."
        raise CatalogLoadError(msg)
    overview = payload.get("overview")
    if overview is not None and not isinstance(overview, str):
        msg = f"{where} 'overview' must be a string."
        raise CatalogLoadError(msg)
    return Explanation(
        overview=(overview or "").strip(),
        concepts=_build_concepts(payload.get("concepts"), where=where),
        tips=_build_tips(payload.get("tips"), where=where),
    )


def _example_id(category_id: str, position: int, title: str) -> uuid.UUID:
    """Return a deterministic identifier for the example at ``position``."""
    return uuid.uuid5(EXAMPLE_NAMESPACE, f"{category_id}:{position}:{title}")


__all__ = [
    "EXAMPLE_NAMESPACE",
    "_build_concepts",
    "_build_explanation",
    "_build_tips",
    "_example_id",
    "_optional_str",
    "_require_text",
    "_snippet",
]
