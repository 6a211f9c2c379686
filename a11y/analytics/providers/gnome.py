from __future__ import annotations

import logging
import math
import shutil
import subprocess
from typing import Final

from .._internal.config import get_gsettings_bin, get_gsettings_timeout_ms
from .._internal.content_size import content_size_for_points, default_body_points
from .._internal.errors import provider_unavailable_error
from ..reference import default_value
from ..types import Capability

logger = logging.getLogger(__name__)

_A11Y_APPLICATIONS: Final[str] = "org.gnome.desktop.a11y.applications"
_A11Y_INTERFACE: Final[str] = "org.gnome.desktop.a11y.interface"
_INTERFACE: Final[str] = "org.gnome.desktop.interface"

# capability -> (schema, key). Capabilities GNOME has no setting for are absent.
_GSETTINGS_KEYS: Final[dict[str, tuple[str, str]]] = {
    "voice_over_running": (_A11Y_APPLICATIONS, "screen-reader-enabled"),
    "darker_system_colors_enabled": (_A11Y_INTERFACE, "high-contrast"),
    "reduce_motion_enabled": (_INTERFACE, "enable-animations"),
    "preferred_content_size": (_INTERFACE, "text-scaling-factor"),
}

# GNOME stores "animations on"; the capability is "motion reduced".
_INVERTED: Final[frozenset[str]] = frozenset({"reduce_motion_enabled"})


class GnomeProvider:
    """
    Reads the GNOME desktop accessibility settings through the `gsettings` command.

    The text scaling factor is mapped onto the nearest content size tier by body text
    size (default tier size multiplied by the factor).
    """

    def __init__(self, *, gsettings_bin: str | None = None, timeout_ms: int | None = None) -> None:
        self._bin = gsettings_bin or get_gsettings_bin()
        self._timeout_ms = timeout_ms if timeout_ms is not None else get_gsettings_timeout_ms()

    def is_available(self) -> bool:
        return shutil.which(self._bin) is not None

    def read(self, capability: Capability) -> object:
        mapping = _GSETTINGS_KEYS.get(capability)
        if mapping is None:
            return default_value(capability)
        schema, key = mapping
        out = self._get(schema, key, capability=capability)
        if capability == "preferred_content_size":
            return _content_size_from_scaling(out, capability=capability)
        enabled = _parse_bool(out, capability=capability)
        return (not enabled) if capability in _INVERTED else enabled

    def _get(self, schema: str, key: str, *, capability: str) -> str:
        cmd = [self._bin, "get", schema, key]
        try:
            p = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout_ms / 1000,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise provider_unavailable_error(
                f"gsettings timed out after {self._timeout_ms}ms: {schema} {key}", capability=capability
            ) from e
        except OSError as e:
            raise provider_unavailable_error(f"cannot run {self._bin}: {e}", capability=capability) from e
        if p.returncode != 0:
            err = (p.stderr or "").strip() or f"exit code {p.returncode}"
            raise provider_unavailable_error(
                f"gsettings get {schema} {key} failed: {err}", capability=capability
            )
        out = (p.stdout or "").strip()
        logger.debug("gsettings %s %s -> %s", schema, key, out)
        return out


def _parse_bool(out: str, *, capability: str) -> bool:
    if out == "true":
        return True
    if out == "false":
        return False
    raise provider_unavailable_error(f"unexpected gsettings boolean: {out!r}", capability=capability)


def _content_size_from_scaling(out: str, *, capability: str) -> str:
    try:
        factor = float(out)
    except ValueError as e:
        raise provider_unavailable_error(
            f"unexpected gsettings text-scaling-factor: {out!r}", capability=capability
        ) from e
    if not math.isfinite(factor):
        return f"text-scaling-factor {out}"
    name = content_size_for_points(factor * default_body_points())
    if name is None:
        # Passed through as an unrecognized tier.
        return f"text-scaling-factor {out}"
    return name
