from __future__ import annotations

from .capability_table import CAPABILITY_TABLE, CapabilityInfo
from .catalog import (
    ALL_CAPABILITIES,
    analytics_key,
    capabilities_in_category,
    category_of,
    default_value,
    get_capability_info,
    get_capability_table,
    resolve_capabilities,
    resolve_capability,
)

__all__ = [
    "ALL_CAPABILITIES",
    "CAPABILITY_TABLE",
    "CapabilityInfo",
    "analytics_key",
    "capabilities_in_category",
    "category_of",
    "default_value",
    "get_capability_info",
    "get_capability_table",
    "resolve_capabilities",
    "resolve_capability",
]
