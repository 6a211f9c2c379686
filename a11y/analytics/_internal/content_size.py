from __future__ import annotations

"""
Content size ("Dynamic Type") tiers and their analytics rendering.

Rendered strings start with a two-digit rank so that a plain alphabetic sort of
the rendered values reproduces the semantic order, smallest to largest.
"""

import re
from dataclasses import dataclass
from typing import Final, Literal

ContentSizeCategory = Literal[
    "unspecified",
    "extra_small",
    "small",
    "medium",
    "large",
    "extra_large",
    "extra_extra_large",
    "extra_extra_extra_large",
    "accessibility_medium",
    "accessibility_large",
    "accessibility_extra_large",
    "accessibility_extra_extra_large",
    "accessibility_extra_extra_extra_large",
]


@dataclass(frozen=True, slots=True)
class _Tier:
    name: ContentSizeCategory
    short: str
    label: str
    platform_code: str
    body_points: int | None


# Semantic order. Body sizes are the platform's default body text size per tier.
_TIERS: Final[tuple[_Tier, ...]] = (
    _Tier("unspecified", "", "unspecified", "Unspecified", None),
    _Tier("extra_small", "XS", "extra small", "XS", 14),
    _Tier("small", "S", "small", "S", 15),
    _Tier("medium", "M", "medium", "M", 16),
    _Tier("large", "L", "large", "L", 17),
    _Tier("extra_large", "XL", "extra large", "XL", 19),
    _Tier("extra_extra_large", "XXL", "extra extra large", "XXL", 21),
    _Tier("extra_extra_extra_large", "XXXL", "extra extra extra large", "XXXL", 23),
    _Tier("accessibility_medium", "AX1", "accessibility medium", "AccessibilityM", 28),
    _Tier("accessibility_large", "AX2", "accessibility large", "AccessibilityL", 33),
    _Tier("accessibility_extra_large", "AX3", "accessibility extra large", "AccessibilityXL", 40),
    _Tier(
        "accessibility_extra_extra_large",
        "AX4",
        "accessibility extra extra large",
        "AccessibilityXXL",
        47,
    ),
    _Tier(
        "accessibility_extra_extra_extra_large",
        "AX5",
        "accessibility extra extra extra large",
        "AccessibilityXXXL",
        53,
    ),
)

DEFAULT_CONTENT_SIZE: Final[ContentSizeCategory] = "large"

CONTENT_SIZE_ORDER: Final[tuple[ContentSizeCategory, ...]] = tuple(t.name for t in _TIERS)

UNKNOWN_CONTENT_SIZE_PREFIX: Final[str] = "unknown content size"

_PLATFORM_PREFIXES: Final[tuple[str, ...]] = ("uictcontentsizecategory", "uicontentsizecategory")

_NON_ALNUM_RE: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")

_DEFAULT_RANK: Final[int] = CONTENT_SIZE_ORDER.index(DEFAULT_CONTENT_SIZE)


def _alias_key(raw: str) -> str:
    key = _NON_ALNUM_RE.sub("", raw.lower())
    for prefix in _PLATFORM_PREFIXES:
        if key.startswith(prefix) and len(key) > len(prefix):
            return key[len(prefix) :]
    return key


def _build_aliases() -> dict[str, ContentSizeCategory]:
    out: dict[str, ContentSizeCategory] = {}
    for tier in _TIERS:
        for alias in (tier.name, tier.short, tier.platform_code):
            if not alias:
                continue
            key = _alias_key(alias)
            existing = out.get(key)
            if existing is not None and existing != tier.name:
                raise RuntimeError(f"ambiguous content size alias: {alias}")
            out[key] = tier.name
    return out


_ALIASES: Final[dict[str, ContentSizeCategory]] = _build_aliases()


def normalize_content_size(raw: str) -> ContentSizeCategory | None:
    """
    Map a tier id or a platform spelling (`extra_large`, `XL`,
    `UICTContentSizeCategoryXL`) to the canonical tier id.

    Returns None for anything unrecognized.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    return _ALIASES.get(_alias_key(raw))


def render_content_size(raw: str) -> str:
    name = normalize_content_size(raw)
    if name is None:
        return f"{UNKNOWN_CONTENT_SIZE_PREFIX} ({raw})"
    rank = CONTENT_SIZE_ORDER.index(name)
    tier = _TIERS[rank]
    if tier.body_points is None:
        return f"{rank:02d} {tier.label}"
    offset = rank - _DEFAULT_RANK
    offset_text = "default" if offset == 0 else f"{offset:+d}"
    return f"{rank:02d} {tier.short} {tier.label} ({offset_text})"


def content_size_for_points(points: float) -> ContentSizeCategory | None:
    """Nearest sized tier for a body text size in points; ties go to the smaller tier."""
    if not points > 0:
        return None
    best: _Tier | None = None
    for tier in _TIERS:
        if tier.body_points is None:
            continue
        if best is None or abs(tier.body_points - points) < abs(best.body_points - points):
            best = tier
    return best.name if best is not None else None


def default_body_points() -> int:
    points = _TIERS[_DEFAULT_RANK].body_points
    assert points is not None
    return points
