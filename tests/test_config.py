"""Unit tests for gallery configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from animator_catalog.config import (
    GalleryConfig,
    GalleryConfigError,
    load_gallery_config,
)

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "gallery.yaml"


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "gallery.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_repository_config_loads() -> None:
    """The checked-in config should match the documented defaults."""
    config = load_gallery_config(REPO_CONFIG)
    assert config.output_dir == Path("public")
    assert config.site_title == "Swift Animator"
    assert config.code_language == "swift"
    assert config.latest_count == 4
    assert config.data_dir is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_gallery_config(tmp_path / "absent.yaml")


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    assert load_gallery_config(_write(tmp_path, "")) == GalleryConfig()


def test_flat_mapping_accepted(tmp_path: Path) -> None:
    """Settings may sit at the top level without a ``gallery`` section."""
    config = load_gallery_config(
        _write(tmp_path, "site_title: Motion Lab\nlatest_count: 6\n")
    )
    assert config.site_title == "Motion Lab"
    assert config.latest_count == 6
    assert config.tagline == GalleryConfig().tagline


def test_relative_data_dir_resolves_against_config(tmp_path: Path) -> None:
    config = load_gallery_config(
        _write(tmp_path, "gallery:\n  data_dir: examples\n  spotlight_seed: 11\n")
    )
    assert config.data_dir == tmp_path / "examples"
    assert config.spotlight_seed == 11


@pytest.mark.parametrize(
    "body",
    [
        "- not\n- a mapping\n",
        "gallery: [1, 2]\n",
        "gallery:\n  latest_count: many\n",
        "gallery:\n  latest_count: true\n",
        "gallery:\n  latest_count: -1\n",
        "gallery:\n  spotlight_seed: 1.5\n",
        "gallery:\n  latest_count: '--5'\n",
        "gallery:\n  spotlight_seed: '²'\n",
    ],
)
def test_invalid_values_rejected(tmp_path: Path, body: str) -> None:
    with pytest.raises(GalleryConfigError):
        load_gallery_config(_write(tmp_path, body))


def test_config_error_is_value_error() -> None:
    assert issubclass(GalleryConfigError, ValueError)


def test_quoted_integer_accepted(tmp_path: Path) -> None:
    config = load_gallery_config(_write(tmp_path, "gallery:\n  latest_count: '6'\n"))
    assert config.latest_count == 6
