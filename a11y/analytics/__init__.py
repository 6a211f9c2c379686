from __future__ import annotations

from ._internal.errors import A11yAnalyticsError, ErrorInfo
from .providers import GnomeProvider, StaticProvider, detect_provider
from .reference import ALL_CAPABILITIES, get_capability_table
from .reporting import (
    FONT_SETTINGS_EVENT,
    SETTINGS_EVENT,
    AnalyticsReporter,
    LoggingReporter,
    MemoryReporter,
    PrintReporter,
    report_current_settings,
)
from .snapshot import (
    OVERALL_SUMMARY_KEY,
    SUMMARY_KEYS,
    AccessibilitySnapshotter,
    category_summary_key,
    current_settings,
    current_settings_for,
)
from .types import (
    CATEGORIES,
    AccessibilityProvider,
    Capability,
    CapabilityValue,
    Category,
    ContentSizeValue,
    FlagValue,
    render_value,
)

__all__ = [
    "ALL_CAPABILITIES",
    "CATEGORIES",
    "FONT_SETTINGS_EVENT",
    "OVERALL_SUMMARY_KEY",
    "SETTINGS_EVENT",
    "SUMMARY_KEYS",
    "A11yAnalyticsError",
    "AccessibilityProvider",
    "AccessibilitySnapshotter",
    "AnalyticsReporter",
    "Capability",
    "CapabilityValue",
    "Category",
    "ContentSizeValue",
    "ErrorInfo",
    "FlagValue",
    "GnomeProvider",
    "LoggingReporter",
    "MemoryReporter",
    "PrintReporter",
    "StaticProvider",
    "category_summary_key",
    "current_settings",
    "current_settings_for",
    "detect_provider",
    "get_capability_table",
    "render_value",
    "report_current_settings",
]
