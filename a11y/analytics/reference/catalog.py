from __future__ import annotations

from typing import Any, Final, Iterable, get_args

from .._internal.errors import invalid_request_error
from ..types import Capability, CapabilityValue, Category, CATEGORIES
from .capability_table import CAPABILITY_TABLE, CapabilityInfo


def _index_table() -> dict[str, CapabilityInfo]:
    declared = set(get_args(Capability))
    by_id: dict[str, CapabilityInfo] = {}
    keys: set[str] = set()
    for info in CAPABILITY_TABLE:
        if info.capability not in declared:
            raise RuntimeError(f"capability table lists undeclared capability: {info.capability}")
        if info.capability in by_id:
            raise RuntimeError(f"capability listed twice: {info.capability}")
        if info.analytics_key in keys:
            raise RuntimeError(f"analytics key used twice: {info.analytics_key}")
        if info.category not in CATEGORIES:
            raise RuntimeError(f"unknown category for {info.capability}: {info.category}")
        if info.default.kind != info.kind:
            raise RuntimeError(f"default value kind mismatch for {info.capability}")
        by_id[info.capability] = info
        keys.add(info.analytics_key)
    missing = declared - set(by_id)
    if missing:
        raise RuntimeError(f"capability table is missing: {', '.join(sorted(missing))}")
    return by_id


_BY_ID: Final[dict[str, CapabilityInfo]] = _index_table()
_BY_KEY: Final[dict[str, CapabilityInfo]] = {info.analytics_key: info for info in CAPABILITY_TABLE}

ALL_CAPABILITIES: Final[tuple[Capability, ...]] = tuple(info.capability for info in CAPABILITY_TABLE)


def resolve_capability(name: str) -> Capability:
    """
    Accept a capability id (`reduce_motion_enabled`) or its analytics key
    (`reduceMotionEnabled`).
    """
    if isinstance(name, str):
        info = _BY_ID.get(name) or _BY_KEY.get(name)
        if info is not None:
            return info.capability
    raise invalid_request_error(f"unknown capability: {name!r}")


def get_capability_info(capability: str) -> CapabilityInfo:
    return _BY_ID[resolve_capability(capability)]


def analytics_key(capability: str) -> str:
    return get_capability_info(capability).analytics_key


def category_of(capability: str) -> Category:
    return get_capability_info(capability).category


def default_value(capability: str) -> CapabilityValue:
    return get_capability_info(capability).default


def capabilities_in_category(category: Category) -> list[Capability]:
    if category not in CATEGORIES:
        raise invalid_request_error(f"unknown category: {category!r}")
    return [info.capability for info in CAPABILITY_TABLE if info.category == category]


def resolve_capabilities(names: Iterable[str]) -> list[Capability]:
    """Resolve and de-duplicate, keeping first-seen order."""
    if isinstance(names, str):
        raise invalid_request_error("capabilities must be an iterable of names, not a single string")
    out: list[Capability] = []
    seen: set[str] = set()
    for name in names:
        capability = resolve_capability(name)
        if capability in seen:
            continue
        seen.add(capability)
        out.append(capability)
    return out


def get_capability_table() -> list[dict[str, Any]]:
    """
    Return a JSON-friendly table of every known capability with its analytics key,
    category and rendered factory default.
    """
    return [
        {
            "capability": info.capability,
            "analytics_key": info.analytics_key,
            "category": info.category,
            "kind": info.kind,
            "default": info.default.render(),
        }
        for info in CAPABILITY_TABLE
    ]
