"""Load gallery configuration YAML into a typed dataclass.

The gallery builder reads its output location, page copy, and highlighting
choices from a small YAML file (``config/gallery.yaml`` by default). Missing
keys fall back to the defaults on :class:`GalleryConfig`.

Examples
--------
>>> from pathlib import Path
>>> from animator_catalog.config import load_gallery_config
>>> config = load_gallery_config(Path("config/gallery.yaml"))  # doctest: +SKIP
>>> config.latest_count  # doctest: +SKIP
4
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import DEFAULT_LATEST_COUNT

DEFAULT_CONFIG = Path("config/gallery.yaml")


class GalleryConfigError(ValueError):
    """Raised when the gallery configuration is invalid."""


@dc.dataclass(slots=True)
class GalleryConfig:
    """Settings that control gallery rendering."""

    output_dir: Path = Path("public")
    site_title: str = "Swift Animator"
    tagline: str = "Animator"
    pygments_style: str = "monokai"
    code_language: str = "swift"
    latest_count: int = DEFAULT_LATEST_COUNT
    data_dir: Path | None = None
    spotlight_seed: int | None = None


def load_gallery_config(path: Path) -> GalleryConfig:
    """Load the YAML file describing gallery output choices.

    Parameters
    ----------
    path : Path
        Filesystem path to the gallery configuration file.

    Returns
    -------
    GalleryConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    GalleryConfigError
        If the top-level structure is not a mapping or a value has the wrong
        type.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise GalleryConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    gallery = raw.get("gallery", raw) or {}
    if not isinstance(gallery, dict):
        msg = "The 'gallery' section must be a mapping."
        raise GalleryConfigError(msg)

    base = GalleryConfig()
    latest_count = _int_value(gallery.get("latest_count"), "latest_count")
    if latest_count is not None and latest_count < 0:
        msg = "'latest_count' must not be negative."
        raise GalleryConfigError(msg)
    data_dir = gallery.get("data_dir")
    return GalleryConfig(
        output_dir=Path(gallery.get("output_dir", base.output_dir)),
        site_title=str(gallery.get("site_title", base.site_title)),
        tagline=str(gallery.get("tagline", base.tagline)),
        pygments_style=str(gallery.get("pygments_style", base.pygments_style)),
        code_language=str(gallery.get("code_language", base.code_language)),
        latest_count=base.latest_count if latest_count is None else latest_count,
        data_dir=_resolve_data_dir(data_dir, path.parent) if data_dir else None,
        spotlight_seed=_int_value(gallery.get("spotlight_seed"), "spotlight_seed"),
    )


def _int_value(value: object | None, field: str) -> int | None:
    """Return ``value`` as an int, or None when unset."""
    match value:
        case None:
            return None
        case bool():
            pass
        case int():
            return value
        case str():
            try:
                return int(value)
            except ValueError:
                pass
    msg = f"'{field}' must be an integer."
    raise GalleryConfigError(msg)


def _resolve_data_dir(value: object, config_dir: Path) -> Path:
    """Resolve a data directory relative to the configuration file."""
    candidate = Path(str(value))
    if candidate.is_absolute():
        return candidate
    return config_dir / candidate


__all__ = [
    "DEFAULT_CONFIG",
    "GalleryConfig",
    "GalleryConfigError",
    "load_gallery_config",
]
