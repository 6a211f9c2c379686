import io
import unittest


class TestReporting(unittest.TestCase):
    def test_report_current_settings_emits_both_events(self) -> None:
        from a11y.analytics import (
            FONT_SETTINGS_EVENT,
            SETTINGS_EVENT,
            AccessibilitySnapshotter,
            MemoryReporter,
            StaticProvider,
            report_current_settings,
        )

        reporter = MemoryReporter()
        snapshotter = AccessibilitySnapshotter(StaticProvider({"preferred_content_size": "XL"}))
        settings = report_current_settings(reporter, snapshotter)

        self.assertEqual([e.name for e in reporter.events], [SETTINGS_EVENT, FONT_SETTINGS_EVENT])
        self.assertEqual(SETTINGS_EVENT, "accessibility_settings")
        self.assertEqual(FONT_SETTINGS_EVENT, "accessibility_settings_font")
        self.assertEqual(reporter.events[0].info, settings)
        self.assertEqual(reporter.events[1].info, {"preferredContentSize": "05 XL extra large (+1)"})
        self.assertEqual(settings["a11y: anything enabled?"], "true")

    def test_memory_reporter_copies_info(self) -> None:
        from a11y.analytics import MemoryReporter

        reporter = MemoryReporter()
        info = {"boldTextEnabled": "true"}
        reporter.report_event("accessibility_settings", info)
        info["boldTextEnabled"] = "false"
        self.assertEqual(reporter.events[0].info, {"boldTextEnabled": "true"})

    def test_print_reporter_writes_sorted_block(self) -> None:
        from a11y.analytics import PrintReporter

        buf = io.StringIO()
        PrintReporter(buf).report_event("accessibility_settings", {"b": "2", "a": "1"})
        text = buf.getvalue()

        self.assertIn("Logging analytics event named: accessibility_settings", text)
        self.assertLess(text.index("  a: 1"), text.index("  b: 2"))

    def test_logging_reporter_logs_info(self) -> None:
        from a11y.analytics import LoggingReporter

        with self.assertLogs("a11y.analytics.reporting", level="INFO") as cm:
            LoggingReporter().report_event("accessibility_settings_font", {"preferredContentSize": "04 L large (default)"})
        self.assertIn("accessibility_settings_font", cm.output[0])
        self.assertIn("preferredContentSize", cm.output[0])
