"""Render the animation catalog as a static HTML gallery.

This module is the catalog's rendering collaborator. It consumes a
:class:`~animator_catalog.catalog.CatalogQuery` and writes:

* ``index.html`` with the spotlight card, the category cards (with example
  counts), and the latest examples;
* ``category-<id>.html`` for every registered category, including an empty
  state when a category has no examples yet;
* ``example-<slug>.html`` detail pages with the preview stage, the
  explanation, and highlighted code listings;
* ``gallery.css`` holding the Pygments stylesheet and preview effects.

Typical usage mirrors the CLI:

>>> from animator_catalog.catalog import load_catalog
>>> from animator_catalog.config import GalleryConfig
>>> from animator_catalog.gallery import GalleryBuilder
>>> builder = GalleryBuilder(load_catalog(), GalleryConfig())  # doctest: +SKIP
>>> builder.run()[0]  # doctest: +SKIP
PosixPath('public/gallery.css')

Side effects are limited to reading templates and writing UTF-8 files below
``config.output_dir``. Preview keys are validated before anything is written.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from animator_catalog._constants import (
    CATEGORY_PAGE_TEMPLATE,
    DEFAULT_TEMPLATES_DIR,
    EXAMPLE_PAGE_TEMPLATE,
)

from .effects import (
    EFFECTS,
    category_effect,
    resolve_preview_effect,
    validate_preview_keys,
)
from .models import CategoryCardModel, ExampleCardModel
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import uuid

    from animator_catalog.catalog import CatalogQuery, Category, Example
    from animator_catalog.config import GalleryConfig

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")

# Category colour tokens that are not CSS named colours.
COLOR_TOKENS: dict[str, str] = {"mint": "#00c7be"}


class GalleryBuilder:
    """Render index, category, and example pages from catalog queries."""

    def __init__(
        self,
        query: CatalogQuery,
        config: GalleryConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        query : CatalogQuery
            Catalog queries supplying categories and examples.
        config : GalleryConfig
            Output location, page copy, and highlighting choices.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``animator_catalog/templates`` directory.
        output_dir : Path, optional
            Override for ``config.output_dir``.
        """
        self.query = query
        self.config = config
        self.output_dir = output_dir or config.output_dir
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.renderer = HtmlContentRenderer(config.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def run(self) -> list[Path]:
        """Render every gallery page and return the written paths.

        Returns
        -------
        list[Path]
            ``gallery.css`` first, then ``index.html``, the category pages in
            registry order, and the example pages in store order.

        Raises
        ------
        UnknownPreviewError
            If any example's preview key has no registered effect.
        """
        examples = self.query.all_examples()
        validate_preview_keys(examples)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        slugs = _assign_slugs(examples)
        cards = {
            example.id: self._build_example_model(example, slugs[example.id])
            for example in examples
        }
        categories = [
            self._build_category_model(category)
            for category in self.query.registry.all_categories()
        ]
        context: dict[str, typ.Any] = {
            "site_title": self.config.site_title,
            "tagline": self.config.tagline,
            "generated_at": dt.datetime.now(dt.UTC),
        }

        written = [
            self._write(
                "gallery.css",
                "gallery.css.jinja",
                stylesheet=self.renderer.stylesheet,
                effects=sorted(EFFECTS),
            )
        ]
        spotlight = cards[self.query.random_spotlight().id] if examples else None
        latest = [
            cards[example.id]
            for example in self.query.latest(self.config.latest_count)
        ]
        written.append(
            self._write(
                "index.html",
                "index.jinja",
                spotlight=spotlight,
                categories=categories,
                latest=latest,
                **context,
            )
        )
        for category in categories:
            members = [
                cards[example.id]
                for example in self.query.filter_by_category(category.id)
            ]
            written.append(
                self._write(
                    category.href,
                    "category.jinja",
                    category=category,
                    examples=members,
                    **context,
                )
            )
        for card in cards.values():
            written.append(
                self._write(card.href, "example.jinja", example=card, **context)
            )
        return written

    def _write(self, filename: str, template_name: str, **context: typ.Any) -> Path:
        """Render ``template_name`` with ``context`` into ``filename``."""
        template = self.env.get_template(template_name)
        text = template.render(**context)
        if not text.endswith("\n"):
            text += "\n"
        path = self.output_dir / filename
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", path)
        return path

    def _build_category_model(self, category: Category) -> CategoryCardModel:
        start, end = (_css_color(token) for token in category.colors)
        return CategoryCardModel(
            id=category.id,
            title=category.title,
            description=category.description,
            icon=category.icon,
            gradient=f"linear-gradient(135deg, {start}, {end})",
            effect=category_effect(category.id),
            count=self.query.count_by_category(category.id),
            href=CATEGORY_PAGE_TEMPLATE.format(category=category.id),
        )

    def _build_example_model(self, example: Example, slug: str) -> ExampleCardModel:
        category = self.query.registry.category(example.category_id)
        explanation = example.explanation
        language = self.config.code_language
        return ExampleCardModel(
            title=example.title,
            description=example.description,
            category_id=category.id,
            category_title=category.title,
            preview_key=example.preview_key,
            effect=resolve_preview_effect(example.preview_key),
            href=EXAMPLE_PAGE_TEMPLATE.format(slug=slug),
            category_href=CATEGORY_PAGE_TEMPLATE.format(category=category.id),
            overview_html=self.renderer.markdown(explanation.overview),
            concepts=[
                {"title": concept.title, "description": concept.description}
                for concept in explanation.concepts
            ],
            tips=list(explanation.tips),
            code_html=self.renderer.code_block(example.code_preview, language),
            usage_html=self.renderer.code_block(example.usage_example, language),
        )


def _css_color(token: str) -> str:
    """Return a CSS colour for a category colour token."""
    return COLOR_TOKENS.get(token, token)


def _slugify(text: str) -> str:
    """Return a lowercase, dash-separated slug for ``text``."""
    lowered = text.lower().replace("&", "and")
    return SLUG_PATTERN.sub("-", lowered).strip("-")


def _assign_slugs(examples: cabc.Iterable[Example]) -> dict[uuid.UUID, str]:
    """Return a unique page slug per example, derived from its preview key."""
    slugs: dict[uuid.UUID, str] = {}
    seen: dict[str, int] = {}
    for example in examples:
        base = _slugify(example.preview_key) or "example"
        seen[base] = seen.get(base, 0) + 1
        slugs[example.id] = base if seen[base] == 1 else f"{base}-{seen[base]}"
    return slugs


__all__ = ["GalleryBuilder"]
