from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..types import Capability, CapabilityValue, Category, ContentSizeValue, FlagValue, ValueKind


@dataclass(frozen=True, slots=True)
class CapabilityInfo:
    capability: Capability
    analytics_key: str
    category: Category
    kind: ValueKind
    default: CapabilityValue


_OFF = FlagValue(enabled=False)
_ON = FlagValue(enabled=True)


# NOTE: Hand-maintained copy of the platform's factory defaults.
#
# Nothing verifies these against the OS; when a platform release changes a default,
# this table has to be updated by hand or users get misreported as customized.
# Row order is the order of the full snapshot.
CAPABILITY_TABLE: Final[tuple[CapabilityInfo, ...]] = (
    CapabilityInfo("assistive_touch_running", "assistiveTouchEnabled", "interaction", "flag", _OFF),
    CapabilityInfo("voice_over_running", "voiceOverEnabled", "visual", "flag", _OFF),
    CapabilityInfo("switch_control_running", "switchControlEnabled", "interaction", "flag", _OFF),
    CapabilityInfo("shake_to_undo_enabled", "shakeToUndoEnabled", "interaction", "flag", _ON),
    CapabilityInfo("closed_captioning_enabled", "closedCaptioningEnabled", "audio", "flag", _OFF),
    CapabilityInfo("bold_text_enabled", "boldTextEnabled", "visual", "flag", _OFF),
    CapabilityInfo("darker_system_colors_enabled", "darkerSystemColorsEnabled", "visual", "flag", _OFF),
    CapabilityInfo("grayscale_enabled", "grayscaleEnabled", "visual", "flag", _OFF),
    CapabilityInfo("guided_access_enabled", "guidedAccessEnabled", "interaction", "flag", _OFF),
    CapabilityInfo("invert_colors_enabled", "invertColorsEnabled", "visual", "flag", _OFF),
    CapabilityInfo("mono_audio_enabled", "monoAudioEnabled", "audio", "flag", _OFF),
    CapabilityInfo("reduce_motion_enabled", "reduceMotionEnabled", "visual", "flag", _OFF),
    CapabilityInfo("reduce_transparency_enabled", "reduceTransparencyEnabled", "visual", "flag", _OFF),
    CapabilityInfo("speak_screen_enabled", "speakScreenEnabled", "audio", "flag", _OFF),
    CapabilityInfo("speak_selection_enabled", "speakSelectionEnabled", "audio", "flag", _OFF),
    CapabilityInfo(
        "preferred_content_size",
        "preferredContentSize",
        "visual",
        "content_size",
        ContentSizeValue(category="large"),
    ),
)
