"""
a11y-analytics demo: snapshot the current accessibility settings and report them.

Usage:
  uv run examples/demo.py
  uv run examples/demo.py --provider gnome
  uv run examples/demo.py --provider static --set preferredContentSize=XL --set voiceOverEnabled=true

See also:
  uv run examples/demo.py --help
"""

from __future__ import annotations

import argparse
import json

from a11y.analytics import (
    A11yAnalyticsError,
    AccessibilitySnapshotter,
    PrintReporter,
    StaticProvider,
    detect_provider,
    report_current_settings,
)


def _parse_override(item: str) -> tuple[str, object]:
    if "=" not in item:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {item!r}")
    key, value = item.split("=", 1)
    lowered = value.strip().lower()
    if lowered in {"true", "false"}:
        return key.strip(), lowered == "true"
    return key.strip(), value.strip()


def _print_table(settings: dict[str, str]) -> None:
    width = max((len(k) for k in settings), default=0)
    for key, value in sorted(settings.items()):
        print(f"{key.ljust(width)}  {value}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="a11y-analytics demo")
    parser.add_argument(
        "--provider",
        default=None,
        help='settings source: "auto", "gnome", "static" (default: A11Y_ANALYTICS_PROVIDER or auto)',
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        type=_parse_override,
        metavar="KEY=VALUE",
        help="static reading, e.g. reduceMotionEnabled=true (implies --provider static)",
    )
    parser.add_argument("--json", action="store_true", help="print the snapshot as JSON instead of a table")

    args = parser.parse_args(argv)
    try:
        if args.overrides:
            provider = StaticProvider(dict(args.overrides))
        else:
            provider = detect_provider(args.provider)
        snapshotter = AccessibilitySnapshotter(provider)
        settings = report_current_settings(PrintReporter(), snapshotter)
    except A11yAnalyticsError as e:
        raise SystemExit(f"{e.info.type}: {e.info.message}") from None

    if args.json:
        print(json.dumps(settings, ensure_ascii=False, indent=2, sort_keys=True))
    else:
        _print_table(settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
