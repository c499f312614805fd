"""Read-only views over the example store.

:class:`CatalogQuery` is what renderers talk to: it filters and counts
examples per category, slices the "latest" examples for the landing page, and
picks a random spotlight example. Every operation is derived from the store on
each call, so counts and filtered lists can never drift apart.

Examples
--------
>>> from animator_catalog.catalog import load_catalog
>>> catalog = load_catalog()
>>> catalog.count_by_category("spring") == len(catalog.filter_by_category("spring"))
True
>>> [example.title for example in catalog.latest(2)]
['Scale & Fade', 'Rotate & Scale']
"""

from __future__ import annotations

import random
import typing as typ
import uuid

from .._constants import DEFAULT_LATEST_COUNT
from .loader import ExampleStore
from .models import EmptyCatalogError, ExampleNotFoundError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import Example
    from .registry import CategoryRegistry


class CatalogQuery:
    """Derived, read-only queries over an :class:`ExampleStore`."""

    def __init__(
        self,
        store: ExampleStore,
        *,
        registry: CategoryRegistry | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the query layer.

        Parameters
        ----------
        store : ExampleStore
            Store whose examples are queried.
        registry : CategoryRegistry, optional
            Registry used to validate category ids; defaults to the store's.
        rng : random.Random, optional
            Random source for :meth:`random_spotlight`. Pass a seeded instance
            for reproducible picks.
        """
        self.store = store
        self.registry = registry if registry is not None else store.registry
        self._rng = rng or random.Random()

    def all_examples(self) -> tuple[Example, ...]:
        """Return every example in store order."""
        return self.store.load_all()

    def filter_by_category(self, category_id: str) -> tuple[Example, ...]:
        """Return the examples tagged with ``category_id``, in store order.

        Raises
        ------
        CategoryNotFoundError
            If ``category_id`` is not a registered category.
        """
        self.registry.category(category_id)
        return tuple(
            example
            for example in self.store.load_all()
            if example.category_id == category_id
        )

    def count_by_category(self, category_id: str) -> int:
        """Return how many examples belong to ``category_id``."""
        return len(self.filter_by_category(category_id))

    def counts(self) -> dict[str, int]:
        """Return example counts keyed by category id, in registry order."""
        return {
            category_id: self.count_by_category(category_id)
            for category_id in self.registry.ids()
        }

    def latest(self, n: int = DEFAULT_LATEST_COUNT) -> tuple[Example, ...]:
        """Return the first ``n`` examples in store order.

        ``n`` larger than the store returns every example; the result is
        never padded.
        """
        if n < 0:
            msg = f"Cannot take a negative number of examples ({n})."
            raise ValueError(msg)
        return self.store.load_all()[:n]

    def random_spotlight(self) -> Example:
        """Return one uniformly chosen example, re-drawn on every call.

        Raises
        ------
        EmptyCatalogError
            If the store holds no examples.
        """
        examples = self.store.load_all()
        if not examples:
            msg = "Cannot pick a spotlight example from an empty catalog."
            raise EmptyCatalogError(msg)
        return self._rng.choice(examples)

    def get(self, example_id: uuid.UUID | str) -> Example:
        """Return the example whose identifier equals ``example_id``.

        Raises
        ------
        ExampleNotFoundError
            If no example has that identifier or ``example_id`` is not a
            valid UUID string.
        """
        try:
            target = (
                example_id
                if isinstance(example_id, uuid.UUID)
                else uuid.UUID(example_id)
            )
        except ValueError as exc:
            msg = f"'{example_id}' is not a valid example id."
            raise ExampleNotFoundError(msg) from exc
        for example in self.store.load_all():
            if example.id == target:
                return example
        msg = f"No example with id '{example_id}'."
        raise ExampleNotFoundError(msg)

    def by_preview_key(self, preview_key: str) -> Example:
        """Return the first example carrying ``preview_key``.

        Raises
        ------
        ExampleNotFoundError
            If no example uses that preview key.
        """
        for example in self.store.load_all():
            if example.preview_key == preview_key:
                return example
        msg = f"No example with preview key '{preview_key}'."
        raise ExampleNotFoundError(msg)


def load_catalog(
    data_dir: Path | None = None,
    *,
    registry: CategoryRegistry | None = None,
    rng: random.Random | None = None,
) -> CatalogQuery:
    """Load the example store and return a query layer over it.

    Parameters
    ----------
    data_dir : Path, optional
        Directory of per-category YAML files; defaults to the packaged data.
    registry : CategoryRegistry, optional
        Registry to validate against; defaults to the built-in categories.
    rng : random.Random, optional
        Random source used for spotlight picks.

    Raises
    ------
    CatalogLoadError
        If the example definitions cannot be loaded.
    """
    store = ExampleStore(data_dir, registry=registry)
    return CatalogQuery(store, rng=rng)


__all__ = ["CatalogQuery", "load_catalog"]
