from __future__ import annotations

from typing import Mapping

from ..reference import default_value, get_capability_info, resolve_capability
from ..types import Capability, CapabilityValue, coerce_value


class StaticProvider:
    """
    Fixed readings, keyed by capability id or analytics key.

    Capabilities that are not listed read as their factory defaults, so
    `StaticProvider()` stands in for a platform without an accessibility subsystem.
    """

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[Capability, CapabilityValue] = {}
        for name, raw in (values or {}).items():
            capability = resolve_capability(name)
            info = get_capability_info(capability)
            self._values[capability] = coerce_value(info.kind, raw, capability=capability)

    @property
    def values(self) -> dict[Capability, CapabilityValue]:
        return dict(self._values)

    def read(self, capability: Capability) -> CapabilityValue:
        value = self._values.get(capability)
        if value is None:
            return default_value(capability)
        return value
