import unittest


class TestSnapshotSummary(unittest.TestCase):
    def test_only_text_size_customized(self) -> None:
        from a11y.analytics import AccessibilitySnapshotter, StaticProvider

        provider = StaticProvider({"preferred_content_size": "extra_large"})
        out = AccessibilitySnapshotter(provider).snapshot(include_summary=True)

        self.assertEqual(out["preferredContentSize"], "05 XL extra large (+1)")
        self.assertEqual(out["a11y: visual enabled?"], "true")
        self.assertEqual(out["a11y: audio enabled?"], "false")
        self.assertEqual(out["a11y: interaction enabled?"], "false")
        self.assertEqual(out["a11y: anything enabled?"], "true")
        self.assertEqual(len(out), 20)

    def test_all_defaults(self) -> None:
        from a11y.analytics import SUMMARY_KEYS, AccessibilitySnapshotter, StaticProvider

        out = AccessibilitySnapshotter(StaticProvider()).snapshot(include_summary=True)

        for key in SUMMARY_KEYS:
            self.assertEqual(out[key], "false", key)
        self.assertEqual(out["shakeToUndoEnabled"], "true")
        self.assertEqual(out["voiceOverEnabled"], "false")
        self.assertEqual(out["preferredContentSize"], "04 L large (default)")

    def test_shake_to_undo_off_counts_as_interaction(self) -> None:
        from a11y.analytics import AccessibilitySnapshotter, StaticProvider

        out = AccessibilitySnapshotter(StaticProvider({"shakeToUndoEnabled": False})).snapshot()

        self.assertEqual(out["shakeToUndoEnabled"], "false")
        self.assertEqual(out["a11y: interaction enabled?"], "true")
        self.assertEqual(out["a11y: visual enabled?"], "false")
        self.assertEqual(out["a11y: anything enabled?"], "true")

    def test_summary_scans_full_list_by_default(self) -> None:
        from a11y.analytics import AccessibilitySnapshotter, StaticProvider

        snapshotter = AccessibilitySnapshotter(StaticProvider({"mono_audio_enabled": True}))
        out = snapshotter.snapshot(["preferred_content_size"], include_summary=True)

        self.assertEqual(out["a11y: audio enabled?"], "true")
        self.assertEqual(out["a11y: anything enabled?"], "true")
        self.assertEqual(out["preferredContentSize"], "04 L large (default)")
        self.assertNotIn("monoAudioEnabled", out)

    def test_summary_scope_requested_restricts_summary(self) -> None:
        from a11y.analytics import AccessibilitySnapshotter, StaticProvider

        snapshotter = AccessibilitySnapshotter(StaticProvider({"mono_audio_enabled": True}))
        out = snapshotter.snapshot(
            ["preferred_content_size"], include_summary=True, summary_scope="requested"
        )

        self.assertEqual(out["a11y: audio enabled?"], "false")
        self.assertEqual(out["a11y: visual enabled?"], "false")
        self.assertEqual(out["a11y: interaction enabled?"], "false")
        self.assertEqual(out["a11y: anything enabled?"], "false")

    def test_unknown_summary_scope_is_rejected(self) -> None:
        from a11y.analytics import A11yAnalyticsError, AccessibilitySnapshotter, StaticProvider

        with self.assertRaises(A11yAnalyticsError) as cm:
            AccessibilitySnapshotter(StaticProvider()).snapshot(summary_scope="some")  # type: ignore[arg-type]
        self.assertEqual(cm.exception.info.type, "InvalidRequestError")

    def test_equal_rendering_is_not_customized(self) -> None:
        from a11y.analytics import AccessibilitySnapshotter, StaticProvider

        snapshotter = AccessibilitySnapshotter(
            StaticProvider({"preferred_content_size": "UICTContentSizeCategoryL"})
        )
        self.assertFalse(snapshotter.is_non_default("preferred_content_size"))
        self.assertEqual(snapshotter.snapshot()["a11y: anything enabled?"], "false")

    def test_unknown_tier_counts_as_customized(self) -> None:
        from a11y.analytics import AccessibilitySnapshotter, StaticProvider

        snapshotter = AccessibilitySnapshotter(StaticProvider({"preferredContentSize": "brand_new_size"}))
        out = snapshotter.snapshot()

        self.assertEqual(out["preferredContentSize"], "unknown content size (brand_new_size)")
        self.assertEqual(out["a11y: visual enabled?"], "true")

    def test_render_value_is_the_canonical_string_form(self) -> None:
        from a11y.analytics import ContentSizeValue, FlagValue, render_value

        self.assertEqual(render_value(FlagValue(enabled=True)), "true")
        self.assertEqual(render_value(FlagValue(enabled=False)), "false")
        self.assertEqual(render_value(ContentSizeValue(category="XL")), "05 XL extra large (+1)")
        self.assertEqual(render_value(ContentSizeValue()), "04 L large (default)")
        self.assertEqual(render_value(ContentSizeValue(category="jumbo")), "unknown content size (jumbo)")
