"""Load example definitions from YAML into an immutable example store."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .._constants import DEFAULT_DATA_DIR, EXAMPLE_FILE_TEMPLATE, EXAMPLE_LOAD_ORDER
from .helpers import _build_explanation, _example_id, _require_text, _snippet
from .models import CatalogLoadError, Example
from .registry import CategoryRegistry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)


class ExampleStore:
    """Own the full, ordered collection of examples.

    The store reads one YAML file per category, in
    :data:`~animator_catalog._constants.EXAMPLE_LOAD_ORDER`, and concatenates
    the results into a single tuple when it is constructed. Construction
    either succeeds completely or raises :class:`CatalogLoadError`; callers
    never observe a partially populated store.
    """

    def __init__(
        self,
        data_dir: Path | None = None,
        *,
        registry: CategoryRegistry | None = None,
        load_order: cabc.Sequence[str] = EXAMPLE_LOAD_ORDER,
    ) -> None:
        """Initialize the store and eagerly load every example.

        Parameters
        ----------
        data_dir : Path, optional
            Directory holding ``<category>.yaml`` files. Defaults to the
            definitions packaged with animator_catalog.
        registry : CategoryRegistry, optional
            Registry used to validate category ids. Defaults to the built-in
            categories.
        load_order : Sequence[str], optional
            Category ids whose files are concatenated, in order.

        Raises
        ------
        CatalogLoadError
            If a file is missing or unreadable, a category id is unknown, or
            any entry fails validation.
        """
        self.registry = registry if registry is not None else CategoryRegistry()
        self.data_dir = data_dir or DEFAULT_DATA_DIR
        self._examples = _load_examples(self.data_dir, load_order, self.registry)

    @classmethod
    def from_examples(
        cls,
        examples: cabc.Iterable[Example],
        *,
        registry: CategoryRegistry | None = None,
    ) -> ExampleStore:
        """Build an in-memory store from already constructed examples.

        Raises
        ------
        CatalogLoadError
            If an example references a category missing from ``registry``.
        """
        store = cls.__new__(cls)
        store.registry = registry if registry is not None else CategoryRegistry()
        store.data_dir = None
        collected = tuple(examples)
        for example in collected:
            if example.category_id not in store.registry:
                msg = (
                    f"Example '{example.title}' references unknown category "
                    f"'{example.category_id}'."
                )
                raise CatalogLoadError(msg)
        store._examples = collected
        return store

    def load_all(self) -> tuple[Example, ...]:
        """Return every example in store order; repeated calls are equal."""
        return self._examples

    def __len__(self) -> int:
        return len(self._examples)


def _load_examples(
    data_dir: Path, load_order: cabc.Sequence[str], registry: CategoryRegistry
) -> tuple[Example, ...]:
    """Load and concatenate the per-category example files."""
    if not data_dir.is_dir():
        msg = f"Example data directory '{data_dir}' not found."
        raise CatalogLoadError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    examples: list[Example] = []
    for category_id in load_order:
        if category_id not in registry:
            msg = f"Load order references unknown category '{category_id}'."
            raise CatalogLoadError(msg)
        path = data_dir / EXAMPLE_FILE_TEMPLATE.format(category=category_id)
        entries = _read_entries(loader, path)
        for position, payload in enumerate(entries):
            examples.append(
                _build_example(
                    category_id=category_id,
                    position=position,
                    payload=payload,
                    where=f"{path.name} entry {position}",
                )
            )
        logger.debug("Loaded %d %s examples from %s", len(entries), category_id, path)
    return tuple(examples)


def _read_entries(loader: YAML, path: Path) -> list[typ.Any]:
    """Return the list of raw example payloads stored in ``path``."""
    if not path.exists():
        msg = f"Example file '{path}' not found."
        raise CatalogLoadError(msg)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except (OSError, YAMLError) as exc:
        msg = f"Could not read example file '{path}': {exc}"
        raise CatalogLoadError(msg) from exc
    match loaded:
        case None:
            return []
        case list() as entries:
            return entries
        case _:
            msg = f"Example file '{path}' must contain a list of examples."
            raise CatalogLoadError(msg)


def _build_example(
    *,
    category_id: str,
    position: int,
    payload: object,
    where: str,
) -> Example:
    """Build an :class:`Example` for a single YAML entry."""
    if not isinstance(payload, dict):
        msg = f"{where} must be a mapping."
        raise CatalogLoadError(msg)
    title = _require_text(payload.get("title"), field="title", where=where)
    description = _require_text(
        payload.get("description"), field="description", where=where
    )
    preview_key = _require_text(payload.get("preview"), field="preview", where=where)
    return Example(
        id=_example_id(category_id, position, title),
        title=title,
        description=description,
        category_id=category_id,
        code_preview=_snippet(
            payload.get("code_preview"), field="code_preview", where=where
        ),
        usage_example=_snippet(
            payload.get("usage_example"), field="usage_example", where=where
        ),
        explanation=_build_explanation(payload.get("explanation"), where=where),
        preview_key=preview_key,
    )


__all__ = ["ExampleStore"]
