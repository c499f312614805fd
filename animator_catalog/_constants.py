"""Common literal values used across animator_catalog.

These constants keep category ordering, packaged data locations, and output
filenames centralized so the store, the gallery, and tests can import the same
values without drifting. Intended for internal use within the
animator_catalog package.

Examples
--------
>>> from animator_catalog import _constants
>>> _constants.EXAMPLE_FILE_TEMPLATE.format(category="spring")
'spring.yaml'
>>> _constants.EXAMPLE_LOAD_ORDER[0]
'basic'
"""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = PACKAGE_ROOT / "data" / "examples"
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"

EXAMPLE_FILE_TEMPLATE = "{category}.yaml"

# Order in which per-category example files are concatenated into the store.
# Particle precedes morph here even though the registry declares morph first.
EXAMPLE_LOAD_ORDER: tuple[str, ...] = (
    "basic",
    "spring",
    "transition",
    "keyframe",
    "path",
    "gesture",
    "physics",
    "particle",
    "morph",
    "sequence",
    "advanced",
)

DEFAULT_LATEST_COUNT = 4

CATEGORY_PAGE_TEMPLATE = "category-{category}.html"
EXAMPLE_PAGE_TEMPLATE = "example-{slug}.html"
