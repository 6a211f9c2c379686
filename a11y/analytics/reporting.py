from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Mapping, Protocol, TextIO

from .snapshot import AccessibilitySnapshotter

logger = logging.getLogger(__name__)

SETTINGS_EVENT = "accessibility_settings"
FONT_SETTINGS_EVENT = "accessibility_settings_font"


class AnalyticsReporter(Protocol):
    def report_event(self, name: str, info: Mapping[str, str]) -> None: ...


class PrintReporter:
    """Writes each event as a text block; handy for demos and local debugging."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report_event(self, name: str, info: Mapping[str, str]) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print("--------", file=stream)
        print(f"Logging analytics event named: {name} with info:", file=stream)
        for key in sorted(info):
            print(f"  {key}: {info[key]}", file=stream)
        print(file=stream)


class LoggingReporter:
    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log if log is not None else logger

    def report_event(self, name: str, info: Mapping[str, str]) -> None:
        self._log.info("analytics event %s %s", name, dict(sorted(info.items())))


@dataclass(slots=True)
class ReportedEvent:
    name: str
    info: dict[str, str]


@dataclass(slots=True)
class MemoryReporter:
    events: list[ReportedEvent] = field(default_factory=list)

    def report_event(self, name: str, info: Mapping[str, str]) -> None:
        self.events.append(ReportedEvent(name=name, info=dict(info)))


def report_current_settings(
    reporter: AnalyticsReporter, snapshotter: AccessibilitySnapshotter
) -> dict[str, str]:
    """
    Report the full snapshot as `accessibility_settings` and the text size alone as
    `accessibility_settings_font`. Returns the full snapshot.
    """
    settings = snapshotter.current_settings()
    reporter.report_event(SETTINGS_EVENT, settings)
    font = snapshotter.current_settings_for(["preferred_content_size"], include_summary=False)
    reporter.report_event(FONT_SETTINGS_EVENT, font)
    return settings
