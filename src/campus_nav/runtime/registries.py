# runtime/registries.py
from collections.abc import Callable

from campus_nav.app.protocols import AccessibilityPredicate
from campus_nav.config.models import (
    AccessibilityAlwaysModel,
    AccessibilitySegmentFlagModel,
    AccessibilityUnion,
)
from campus_nav.domain.routing.accessibility import AlwaysAccessible, SegmentFlagAccessibility

AccessibilityFactory = Callable[[AccessibilityUnion], AccessibilityPredicate]

_accessibility_registry: dict[str, AccessibilityFactory] = {}


# ------------------- Accessibility predicates ---------------------------


def register_accessibility(kind: str):
    def deco(fn: AccessibilityFactory):
        _accessibility_registry[kind] = fn
        return fn

    return deco


def make_accessibility(cfg: AccessibilityUnion) -> AccessibilityPredicate:
    try:
        factory = _accessibility_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown accessibility kind {cfg.kind!r}") from None
    return factory(cfg)


@register_accessibility("always")
def _make_always(cfg: AccessibilityAlwaysModel):
    return AlwaysAccessible()


@register_accessibility("segment_flag")
def _make_segment_flag(cfg: AccessibilitySegmentFlagModel):
    return SegmentFlagAccessibility(check_locations=cfg.check_locations)
