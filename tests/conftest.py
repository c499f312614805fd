"""Shared fixtures for animator_catalog tests."""

from __future__ import annotations

import shutil
import typing as typ
import uuid

import pytest

from animator_catalog._constants import DEFAULT_DATA_DIR
from animator_catalog.catalog import Concept, Example, Explanation

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def _make_example(
    title: str,
    category_id: str = "basic",
    *,
    preview_key: str | None = None,
    code_preview: str = "Circle()",
) -> Example:
    """Construct an in-memory example with predictable defaults."""
    return Example(
        id=uuid.uuid5(uuid.NAMESPACE_URL, f"{category_id}/{title}"),
        title=title,
        description=f"{title} description",
        category_id=category_id,
        code_preview=code_preview,
        usage_example="",
        explanation=Explanation(
            overview=f"About {title}.",
            concepts=(Concept("Timing", "Controls pacing."),),
            tips=("Keep it short.",),
        ),
        preview_key=preview_key or f"{category_id}.{title.lower()}",
    )


@pytest.fixture
def make_example() -> cabc.Callable[..., Example]:
    """Return a factory building in-memory examples."""
    return _make_example


@pytest.fixture
def data_copy(tmp_path: Path) -> Path:
    """Return a writable copy of the packaged example definitions."""
    target = tmp_path / "examples"
    shutil.copytree(DEFAULT_DATA_DIR, target)
    return target
