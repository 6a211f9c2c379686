from __future__ import annotations

import logging
import sys

from .._internal.config import get_provider_name, load_env_files
from .._internal.errors import invalid_request_error
from ..types import AccessibilityProvider
from .gnome import GnomeProvider
from .static import StaticProvider

logger = logging.getLogger(__name__)

_STATIC_NAMES = frozenset({"static", "none"})


def detect_provider(name: str | None = None) -> AccessibilityProvider:
    """
    Pick a provider by name (`static`/`none`, `gnome`, `auto`), falling back to the
    `A11Y_ANALYTICS_PROVIDER` setting. `auto` uses GNOME on Linux when `gsettings` is
    installed and the all-defaults static provider everywhere else.
    """
    if name is None:
        load_env_files()
        choice = get_provider_name()
    else:
        choice = name.strip().lower()

    if choice in _STATIC_NAMES:
        return StaticProvider()
    if choice == "gnome":
        return GnomeProvider()
    if choice == "auto":
        if sys.platform.startswith("linux"):
            gnome = GnomeProvider()
            if gnome.is_available():
                return gnome
        logger.debug("no accessibility settings source on %s; reporting defaults", sys.platform)
        return StaticProvider()
    raise invalid_request_error(f"unknown accessibility provider: {choice}")


__all__ = [
    "GnomeProvider",
    "StaticProvider",
    "detect_provider",
]
