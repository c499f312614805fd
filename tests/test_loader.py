"""Unit tests for loading example definitions into the store.

The packaged YAML definitions are loaded as-is, and malformed copies written
under ``tmp_path`` check that every load failure surfaces as
:class:`~animator_catalog.catalog.CatalogLoadError` naming the offending file.
"""

from __future__ import annotations

import typing as typ

import pytest

from animator_catalog._constants import EXAMPLE_LOAD_ORDER
from animator_catalog.catalog import CatalogLoadError, CategoryRegistry, ExampleStore

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from animator_catalog.catalog import Example

EXPECTED_COUNTS = {
    "basic": 8,
    "spring": 5,
    "transition": 5,
    "keyframe": 4,
    "path": 4,
    "gesture": 3,
    "physics": 4,
    "particle": 6,
    "morph": 4,
    "sequence": 4,
    "advanced": 6,
}


def test_packaged_store_loads_every_category_in_order() -> None:
    """The store concatenates category files in the fixed load order."""
    store = ExampleStore()
    examples = store.load_all()
    assert len(store) == sum(EXPECTED_COUNTS.values()) == 53
    seen: list[str] = []
    for example in examples:
        if not seen or seen[-1] != example.category_id:
            seen.append(example.category_id)
    assert seen == list(EXAMPLE_LOAD_ORDER), (
        f"expected contiguous category runs in {EXAMPLE_LOAD_ORDER}, got {seen}"
    )
    assert examples[0].title == "Scale & Fade"
    assert examples[1].title == "Rotate & Scale"


def test_load_all_is_stable_across_calls_and_stores() -> None:
    """Ids are deterministic so two loads compare equal."""
    first = ExampleStore()
    assert first.load_all() == first.load_all()
    assert first.load_all() == ExampleStore().load_all()


def test_example_ids_are_unique() -> None:
    """No two examples may share an identifier."""
    ids = [example.id for example in ExampleStore().load_all()]
    assert len(ids) == len(set(ids))


def test_explanations_keep_concepts_and_tips() -> None:
    """Nested explanation content is parsed into typed records."""
    example = ExampleStore().load_all()[0]
    assert example.explanation.overview.startswith("This animation combines")
    assert example.explanation.concepts, "expected key concepts"
    assert example.explanation.concepts[0].title == "ScaleEffect"
    assert example.explanation.tips, "expected tips"
    assert example.code_preview.startswith("Circle()")


def test_missing_data_directory(tmp_path: Path) -> None:
    with pytest.raises(CatalogLoadError, match="not found"):
        ExampleStore(tmp_path / "absent")


def test_missing_category_file(data_copy: Path) -> None:
    (data_copy / "physics.yaml").unlink()
    with pytest.raises(CatalogLoadError, match=r"physics\.yaml"):
        ExampleStore(data_copy)


def test_empty_category_file_yields_no_examples(data_copy: Path) -> None:
    """A file with no entries is a valid, empty category."""
    (data_copy / "gesture.yaml").write_text("# none yet\n", encoding="utf-8")
    store = ExampleStore(data_copy)
    assert len(store) == 53 - EXPECTED_COUNTS["gesture"]
    assert all(example.category_id != "gesture" for example in store.load_all())


def test_non_list_document_rejected(data_copy: Path) -> None:
    (data_copy / "path.yaml").write_text("title: Lonely\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="must contain a list"):
        ExampleStore(data_copy)


def test_invalid_yaml_rejected(data_copy: Path) -> None:
    (data_copy / "morph.yaml").write_text("- title: [unclosed\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match=r"morph\.yaml"):
        ExampleStore(data_copy)


@pytest.mark.parametrize("field", ["title", "description", "preview"])
def test_required_fields_enforced(data_copy: Path, field: str) -> None:
    """Entries without a title, description, or preview key are rejected."""
    entry = {
        "title": "Fade",
        "description": "Fades in",
        "preview": "sequence.fade",
        "explanation": "{overview: Fading.}",
    }
    entry.pop(field)
    body = "\n  ".join(f"{key}: {value}" for key, value in entry.items())
    (data_copy / "sequence.yaml").write_text(f"- {body}\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match=f"'{field}'"):
        ExampleStore(data_copy)


def test_missing_explanation_rejected(data_copy: Path) -> None:
    (data_copy / "sequence.yaml").write_text(
        "- title: Fade\n  description: Fades in\n  preview: sequence.fade\n",
        encoding="utf-8",
    )
    with pytest.raises(CatalogLoadError, match="explanation"):
        ExampleStore(data_copy)


def test_malformed_concept_rejected(data_copy: Path) -> None:
    (data_copy / "sequence.yaml").write_text(
        "- title: Fade\n"
        "  description: Fades in\n"
        "  preview: sequence.fade\n"
        "  explanation:\n"
        "    overview: Fading.\n"
        "    concepts:\n"
        "      - title: Only a title\n",
        encoding="utf-8",
    )
    with pytest.raises(CatalogLoadError, match="concept 0"):
        ExampleStore(data_copy)


def test_unknown_category_in_load_order(data_copy: Path) -> None:
    with pytest.raises(CatalogLoadError, match="lasers"):
        ExampleStore(data_copy, load_order=("basic", "lasers"))


def test_from_examples_validates_categories(
    make_example: cabc.Callable[..., Example],
) -> None:
    """In-memory stores reject examples tagged with unknown categories."""
    store = ExampleStore.from_examples([make_example("Spin", "keyframe")])
    assert len(store) == 1
    with pytest.raises(CatalogLoadError, match="unknown category 'lasers'"):
        ExampleStore.from_examples([make_example("Zap", "lasers")])


def _write_sequence_entry(data_dir: Path, explanation: str) -> None:
    (data_dir / "sequence.yaml").write_text(
        "- title: Fade\n"
        "  description: Fades in\n"
        "  preview: sequence.fade\n"
        f"  explanation:\n{explanation}",
        encoding="utf-8",
    )


def test_non_string_overview_rejected(data_copy: Path) -> None:
    """An overview written as a list must not be stringified."""
    _write_sequence_entry(data_copy, "    overview: [not, text]\n")
    with pytest.raises(CatalogLoadError, match="'overview' must be a string"):
        ExampleStore(data_copy)


@pytest.mark.parametrize(
    ("tip", "position"),
    [("{nested: map}", 1), ("''", 1), ("42", 1)],
)
def test_malformed_tips_rejected(data_copy: Path, tip: str, position: int) -> None:
    """Tips must be non-empty strings; nothing is coerced or dropped."""
    _write_sequence_entry(
        data_copy,
        "    overview: Fading.\n"
        "    tips:\n"
        "      - Real tip\n"
        f"      - {tip}\n",
    )
    with pytest.raises(CatalogLoadError, match=f"tip {position} must be"):
        ExampleStore(data_copy)


def test_injected_empty_registry_is_kept() -> None:
    """An explicitly empty registry is honoured, not replaced by the defaults."""
    empty = CategoryRegistry(())
    store = ExampleStore.from_examples([], registry=empty)
    assert store.registry is empty
    assert len(store.registry) == 0
