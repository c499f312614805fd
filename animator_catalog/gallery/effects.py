"""Preview effect dispatch for the static gallery.

The catalog treats each example's ``preview_key`` as an opaque token. The
gallery owns the other half of that contract: this table maps every known key
to one of the CSS effects defined in ``gallery.css.jinja``. Keys missing from
the table are rejected up front so a build never ships a blank preview.

Examples
--------
>>> from animator_catalog.gallery.effects import resolve_preview_effect
>>> resolve_preview_effect("basic.shake-effect")
'shake'
>>> category_effect("particle")
'sparkle'
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from animator_catalog.catalog import Example

EFFECTS: frozenset[str] = frozenset(
    {
        "blink",
        "bounce",
        "fall",
        "flip",
        "hue",
        "morph",
        "orbit",
        "pulse",
        "rise",
        "shake",
        "slide",
        "sparkle",
        "spin",
        "swing",
        "wave",
    }
)

PREVIEW_EFFECTS: dict[str, str] = {
    "basic.scale-and-fade": "pulse",
    "basic.rotate-and-scale": "spin",
    "basic.color-morph": "hue",
    "basic.3d-flip": "flip",
    "basic.pulse-effect": "pulse",
    "basic.shake-effect": "shake",
    "basic.morphing-shape": "morph",
    "basic.wave-motion": "wave",
    "spring.bouncy-scale": "bounce",
    "spring.spring-movement": "slide",
    "spring.bouncy-rotation": "spin",
    "spring.spring-chain": "wave",
    "spring.elastic-snap": "bounce",
    "transition.slide-transition": "slide",
    "transition.scale-transition": "pulse",
    "transition.flip-card": "flip",
    "transition.move-and-fade": "slide",
    "transition.custom-transition": "spin",
    "keyframe.loading-sequence": "spin",
    "keyframe.loading-dots": "wave",
    "keyframe.heartbeat": "pulse",
    "keyframe.typing-cursor": "blink",
    "path.circle-path": "orbit",
    "path.figure-eight": "orbit",
    "path.spiral-path": "orbit",
    "path.wave-path": "wave",
    "gesture.drag-and-scale": "bounce",
    "gesture.rotation-gesture": "spin",
    "gesture.multi-touch-transform": "spin",
    "physics.gravity-drop": "fall",
    "physics.collision-bounce": "fall",
    "physics.pendulum-swing": "swing",
    "physics.spring-chain": "wave",
    "particle.confetti-burst": "sparkle",
    "particle.sparkle-effect": "sparkle",
    "particle.fireworks": "sparkle",
    "particle.rain-effect": "fall",
    "particle.rising-bubbles": "rise",
    "particle.starfield": "sparkle",
    "morph.circle-to-square": "morph",
    "morph.color-blend": "hue",
    "morph.path-morph": "morph",
    "morph.gradient-morph": "hue",
    "sequence.loading-sequence": "wave",
    "sequence.domain-effect": "wave",
    "sequence.staggered-fade": "rise",
    "sequence.chain-reaction": "pulse",
    "advanced.particle-system": "sparkle",
    "advanced.morphing-loader": "morph",
    "advanced.interactive-wave": "wave",
    "advanced.galaxy": "spin",
    "advanced.liquid-loader": "morph",
    "advanced.audio-visualizer": "wave",
}

CATEGORY_EFFECTS: dict[str, str] = {
    "basic": "pulse",
    "spring": "bounce",
    "transition": "slide",
    "keyframe": "spin",
    "path": "orbit",
    "gesture": "bounce",
    "physics": "fall",
    "morph": "morph",
    "particle": "sparkle",
    "sequence": "wave",
    "advanced": "spin",
}

DEFAULT_CATEGORY_EFFECT = "pulse"


class UnknownPreviewError(LookupError):
    """Raised when a preview key has no registered gallery effect."""


def resolve_preview_effect(
    preview_key: str, effects: cabc.Mapping[str, str] = PREVIEW_EFFECTS
) -> str:
    """Return the CSS effect name registered for ``preview_key``.

    Raises
    ------
    UnknownPreviewError
        If ``preview_key`` is not in ``effects``.
    """
    try:
        return effects[preview_key]
    except KeyError as exc:
        msg = f"No preview effect registered for '{preview_key}'."
        raise UnknownPreviewError(msg) from exc


def category_effect(category_id: str) -> str:
    """Return the effect used on a category's card."""
    return CATEGORY_EFFECTS.get(category_id, DEFAULT_CATEGORY_EFFECT)


def validate_preview_keys(
    examples: cabc.Iterable[Example], effects: cabc.Mapping[str, str] = PREVIEW_EFFECTS
) -> None:
    """Ensure every example's preview key resolves, naming all failures at once.

    Raises
    ------
    UnknownPreviewError
        If one or more preview keys are missing from ``effects``.
    """
    missing = sorted(
        {
            example.preview_key
            for example in examples
            if example.preview_key not in effects
        }
    )
    if missing:
        msg = f"No preview effect registered for: {', '.join(missing)}"
        raise UnknownPreviewError(msg)


__all__ = [
    "CATEGORY_EFFECTS",
    "EFFECTS",
    "PREVIEW_EFFECTS",
    "UnknownPreviewError",
    "category_effect",
    "resolve_preview_effect",
    "validate_preview_keys",
]
