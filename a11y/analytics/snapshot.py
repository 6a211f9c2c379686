from __future__ import annotations

import logging
from typing import Callable, Final, Iterable, Literal

from ._internal.errors import A11yAnalyticsError, invalid_request_error
from .providers import detect_provider
from .reference import ALL_CAPABILITIES, CAPABILITY_TABLE, get_capability_info, resolve_capabilities
from .types import (
    CATEGORIES,
    AccessibilityProvider,
    Capability,
    CapabilityValue,
    Category,
    FlagValue,
    coerce_value,
)

logger = logging.getLogger(__name__)

SummaryScope = Literal["all", "requested"]

SUMMARY_KEY_PREFIX: Final[str] = "a11y: "
OVERALL_SUMMARY_KEY: Final[str] = f"{SUMMARY_KEY_PREFIX}anything enabled?"


def category_summary_key(category: Category) -> str:
    return f"{SUMMARY_KEY_PREFIX}{category} enabled?"


SUMMARY_KEYS: Final[tuple[str, ...]] = (OVERALL_SUMMARY_KEY,) + tuple(
    category_summary_key(c) for c in CATEGORIES
)

for _info in CAPABILITY_TABLE:
    if _info.analytics_key.startswith(SUMMARY_KEY_PREFIX):
        raise RuntimeError(f"analytics key collides with summary namespace: {_info.analytics_key}")
del _info


class AccessibilitySnapshotter:
    """
    Snapshots the current accessibility settings into a flat `{key: value}` mapping of
    strings, ready to be attached to an analytics event.

    Every public method is total for known capabilities: when the provider cannot read a
    setting, the factory default is reported instead.
    """

    def __init__(self, provider: AccessibilityProvider | None = None) -> None:
        self._provider = provider if provider is not None else detect_provider()

    def current_value(self, capability: str) -> CapabilityValue:
        info = get_capability_info(capability)
        try:
            raw = self._provider.read(info.capability)
        except A11yAnalyticsError as e:
            logger.debug("cannot read %s, reporting default: %s", info.capability, e)
            return info.default
        try:
            return coerce_value(info.kind, raw, capability=info.capability)
        except A11yAnalyticsError as e:
            logger.warning("invalid reading for %s, reporting default: %s", info.capability, e)
            return info.default

    def default_value(self, capability: str) -> CapabilityValue:
        return get_capability_info(capability).default

    def is_non_default(self, capability: str) -> bool:
        # Compared on rendered form: values that render the same are equal.
        info = get_capability_info(capability)
        return self.current_value(info.capability).render() != info.default.render()

    def snapshot(
        self,
        capabilities: Iterable[str] | None = None,
        *,
        include_summary: bool = True,
        summary_scope: SummaryScope = "all",
    ) -> dict[str, str]:
        """
        Build the settings mapping for `capabilities` (all known capabilities when None).

        With `include_summary`, the mapping also carries `"a11y: anything enabled?"` and one
        `"a11y: <category> enabled?"` flag per category. `summary_scope="all"` computes those
        flags over the full capability list whatever subset was requested;
        `"requested"` restricts them to the requested capabilities.
        """
        if summary_scope not in ("all", "requested"):
            raise invalid_request_error(f"unknown summary_scope: {summary_scope!r}")
        requested = list(ALL_CAPABILITIES) if capabilities is None else resolve_capabilities(capabilities)

        # One platform read per capability per snapshot.
        rendered: dict[Capability, str] = {}

        def _rendered(capability: Capability) -> str:
            value = rendered.get(capability)
            if value is None:
                value = self.current_value(capability).render()
                rendered[capability] = value
            return value

        out: dict[str, str] = {}
        if include_summary:
            scanned = ALL_CAPABILITIES if summary_scope == "all" else tuple(requested)
            out.update(_summarize(scanned, _rendered))
        for capability in requested:
            out[get_capability_info(capability).analytics_key] = _rendered(capability)
        return out

    def current_settings(self, *, include_summary: bool = True) -> dict[str, str]:
        return self.snapshot(None, include_summary=include_summary)

    def current_settings_for(
        self, capabilities: Iterable[str], *, include_summary: bool = True
    ) -> dict[str, str]:
        """
        Snapshot a subset, e.g. `["preferred_content_size"]` when only Dynamic Type matters.
        """
        return self.snapshot(capabilities, include_summary=include_summary)


def _summarize(
    capabilities: Iterable[Capability], rendered: Callable[[Capability], str]
) -> dict[str, str]:
    by_category: dict[Category, bool] = {c: False for c in CATEGORIES}
    for capability in capabilities:
        info = get_capability_info(capability)
        if rendered(capability) != info.default.render():
            by_category[info.category] = True
    out = {OVERALL_SUMMARY_KEY: FlagValue(enabled=any(by_category.values())).render()}
    for category in CATEGORIES:
        out[category_summary_key(category)] = FlagValue(enabled=by_category[category]).render()
    return out


def current_settings(
    *, include_summary: bool = True, provider: AccessibilityProvider | None = None
) -> dict[str, str]:
    """Full snapshot over the detected (or given) provider."""
    return AccessibilitySnapshotter(provider).current_settings(include_summary=include_summary)


def current_settings_for(
    capabilities: Iterable[str],
    *,
    include_summary: bool = True,
    provider: AccessibilityProvider | None = None,
) -> dict[str, str]:
    return AccessibilitySnapshotter(provider).current_settings_for(
        capabilities, include_summary=include_summary
    )
