"""Static HTML gallery that renders the animation catalog."""

from .builder import GalleryBuilder
from .effects import UnknownPreviewError, resolve_preview_effect
from .models import CategoryCardModel, ExampleCardModel
from .renderer import HtmlContentRenderer

__all__ = [
    "CategoryCardModel",
    "ExampleCardModel",
    "GalleryBuilder",
    "HtmlContentRenderer",
    "UnknownPreviewError",
    "resolve_preview_effect",
]
