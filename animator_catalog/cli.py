"""Cyclopts CLI entrypoint for browsing the animation catalog and building the gallery.

The ``animator`` console script defined here lists categories and examples,
prints a single example's explanation and code, picks a spotlight example,
and renders the static HTML gallery. Every catalog command accepts
``--data-dir`` to read a custom set of per-category YAML files instead of the
packaged definitions.

Examples
--------
List categories with their example counts:

>>> from animator_catalog.cli import app
>>> app.run(["categories"])  # doctest: +SKIP

Render the gallery into a custom directory:

>>> app.run(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import random
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_LATEST_COUNT
from .catalog import ExampleNotFoundError, load_catalog
from .config import DEFAULT_CONFIG, load_gallery_config
from .gallery import GalleryBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .catalog import CatalogQuery, Example

app = App(name="animator", config=cyclopts.config.Env("ANIMATOR_", command=False))  # type: ignore[unknown-argument]

DataDirOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Directory of per-category example YAML files",
        env_var="ANIMATOR_DATA_DIR",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _print_examples(examples: cabc.Iterable[Example]) -> None:
    for example in examples:
        print(f"{example.preview_key}\t{example.title}")


def _resolve_example(catalog: CatalogQuery, key: str) -> Example:
    """Look ``key`` up as a preview key first, then as an example id."""
    try:
        return catalog.by_preview_key(key)
    except ExampleNotFoundError:
        pass
    try:
        return catalog.get(key)
    except ExampleNotFoundError as exc:
        msg = f"No example with preview key or id '{key}'."
        raise ExampleNotFoundError(msg) from exc


@app.command(help="List every category with its example count.")
def categories(*, data_dir: DataDirOption = None) -> None:
    """Print one line per registered category, in display order."""
    catalog = load_catalog(data_dir)
    for category in catalog.registry.all_categories():
        count = catalog.count_by_category(category.id)
        noun = "example" if count == 1 else "examples"
        print(f"{category.id}\t{category.title} ({count} {noun})")


@app.command(help="List examples, optionally restricted to one category.")
def examples(
    *,
    category: typ.Annotated[
        str | None,
        Parameter(help="Category id to filter by", env_var="ANIMATOR_CATEGORY"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """Print the preview key and title of each example in store order.

    Parameters
    ----------
    category : str or None, optional
        Category id to filter by; when ``None`` (default) every example is
        listed.
    data_dir : Path or None, optional
        Directory of example YAML files; defaults to the packaged catalog.

    Raises
    ------
    CategoryNotFoundError
        If ``category`` is not a registered category id.
    """
    catalog = load_catalog(data_dir)
    if category is None:
        _print_examples(catalog.all_examples())
    else:
        _print_examples(catalog.filter_by_category(category))


@app.command(help="Show an example's explanation and code by preview key or id.")
def show(key: str, /, *, data_dir: DataDirOption = None) -> None:
    """Print the full detail view for a single example.

    Parameters
    ----------
    key : str
        Preview key (for example ``basic.scale-and-fade``) or example id.
    data_dir : Path or None, optional
        Directory of example YAML files; defaults to the packaged catalog.

    Raises
    ------
    ExampleNotFoundError
        If no example matches ``key``.
    """
    catalog = load_catalog(data_dir)
    example = _resolve_example(catalog, key)
    category = catalog.registry.category(example.category_id)
    explanation = example.explanation

    print(example.title)
    print(f"Category: {category.title}")
    print(f"Id: {example.id}")
    print()
    print(example.description)
    if explanation.overview:
        print()
        print(explanation.overview)
    if explanation.concepts:
        print()
        print("Key Concepts")
        for concept in explanation.concepts:
            print(f"- {concept.title}: {concept.description}")
    if explanation.tips:
        print()
        print("Tips & Best Practices")
        for tip in explanation.tips:
            print(f"- {tip}")
    if example.code_preview:
        print()
        print("Code Preview")
        print(example.code_preview)


@app.command(help="List the most recently added examples.")
def latest(
    *,
    count: typ.Annotated[
        int, Parameter(help="How many examples to list", env_var="ANIMATOR_COUNT")
    ] = DEFAULT_LATEST_COUNT,
    data_dir: DataDirOption = None,
) -> None:
    """Print the first ``count`` examples in store order."""
    catalog = load_catalog(data_dir)
    _print_examples(catalog.latest(count))


@app.command(help="Pick a random spotlight example.")
def spotlight(
    *,
    seed: typ.Annotated[
        int | None,
        Parameter(help="Seed for a reproducible pick", env_var="ANIMATOR_SEED"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """Print one uniformly chosen example.

    Raises
    ------
    EmptyCatalogError
        If the catalog holds no examples.
    """
    rng = random.Random(seed) if seed is not None else None
    catalog = load_catalog(data_dir, rng=rng)
    example = catalog.random_spotlight()
    print(f"{example.preview_key}\t{example.title}")
    print(example.description)


@app.command(help="Render the static HTML gallery.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to gallery config", env_var="ANIMATOR_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="ANIMATOR_OUTPUT_DIR"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """Render the gallery pages described by the gallery configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``gallery.yaml`` configuration file (overridable via
        ``ANIMATOR_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    data_dir : Path or None, optional
        Override for the configured example data directory.

    Returns
    -------
    None
        Writes the gallery files and prints each written path.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    UnknownPreviewError
        If an example's preview key has no registered effect.
    """
    gallery_config = load_gallery_config(config)
    seed = gallery_config.spotlight_seed
    catalog = load_catalog(
        data_dir or gallery_config.data_dir,
        rng=random.Random(seed) if seed is not None else None,
    )
    written = GalleryBuilder(catalog, gallery_config, output_dir=output_dir).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `animator` console command.

    The log level for library modules is read from ``ANIMATOR_LOG_LEVEL``
    (default ``WARNING``).

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(
        level=os.getenv("ANIMATOR_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
