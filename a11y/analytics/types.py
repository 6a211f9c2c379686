from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, Protocol

from ._internal.content_size import ContentSizeCategory, normalize_content_size, render_content_size
from ._internal.errors import invalid_value_error

Capability = Literal[
    "assistive_touch_running",
    "voice_over_running",
    "switch_control_running",
    "shake_to_undo_enabled",
    "closed_captioning_enabled",
    "bold_text_enabled",
    "darker_system_colors_enabled",
    "grayscale_enabled",
    "guided_access_enabled",
    "invert_colors_enabled",
    "mono_audio_enabled",
    "reduce_motion_enabled",
    "reduce_transparency_enabled",
    "speak_screen_enabled",
    "speak_selection_enabled",
    # Also known as "Dynamic Type".
    "preferred_content_size",
]
Category = Literal["audio", "interaction", "visual"]
ValueKind = Literal["flag", "content_size"]

CATEGORIES: Final[tuple[Category, ...]] = ("audio", "interaction", "visual")


@dataclass(frozen=True, slots=True)
class FlagValue:
    kind: Literal["flag"] = "flag"
    enabled: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.enabled, bool):
            raise ValueError("FlagValue.enabled must be bool")

    def render(self) -> str:
        return "true" if self.enabled else "false"


@dataclass(frozen=True, slots=True)
class ContentSizeValue:
    kind: Literal["content_size"] = "content_size"
    category: ContentSizeCategory | str = "large"

    def __post_init__(self) -> None:
        if not isinstance(self.category, str):
            raise ValueError("ContentSizeValue.category must be a string")
        # Keep unrecognized tiers verbatim; they render as the unknown sentinel.
        name = normalize_content_size(self.category)
        if name is not None:
            object.__setattr__(self, "category", name)

    def render(self) -> str:
        return render_content_size(self.category)


CapabilityValue = FlagValue | ContentSizeValue


def render_value(value: CapabilityValue) -> str:
    return value.render()


def coerce_value(kind: ValueKind, raw: object, *, capability: str | None = None) -> CapabilityValue:
    """
    Convert a raw platform reading into a `CapabilityValue` of the given kind.

    Flag capabilities accept `bool` or `FlagValue`; the content size capability accepts a
    tier string (canonical or platform spelling) or `ContentSizeValue`.
    """
    if kind == "flag":
        if isinstance(raw, FlagValue):
            return raw
        if isinstance(raw, bool):
            return FlagValue(enabled=raw)
        raise invalid_value_error(
            f"expected bool reading, got {type(raw).__name__}", capability=capability
        )
    if kind == "content_size":
        if isinstance(raw, ContentSizeValue):
            return raw
        if isinstance(raw, str):
            return ContentSizeValue(category=raw)
        raise invalid_value_error(
            f"expected content size string, got {type(raw).__name__}", capability=capability
        )
    raise invalid_value_error(f"unknown value kind: {kind}", capability=capability)


class AccessibilityProvider(Protocol):
    """
    Read-only source of live accessibility settings.

    `read` returns a raw reading (`bool`, a content size string, or a `CapabilityValue`).
    A provider that cannot reach the platform raises `A11yAnalyticsError`; callers fall
    back to the factory default.
    """

    def read(self, capability: Capability) -> object: ...
