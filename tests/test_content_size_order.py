import unittest


class TestContentSizeOrder(unittest.TestCase):
    def test_rendered_tiers_are_alphabetically_sorted(self) -> None:
        from a11y.analytics._internal.content_size import CONTENT_SIZE_ORDER, render_content_size

        rendered = [render_content_size(name) for name in CONTENT_SIZE_ORDER]
        self.assertEqual(len(rendered), 13)
        self.assertEqual(rendered, sorted(rendered))

    def test_each_pair_of_tiers_compares_in_size_order(self) -> None:
        from a11y.analytics._internal.content_size import CONTENT_SIZE_ORDER, render_content_size

        for i, smaller in enumerate(CONTENT_SIZE_ORDER):
            for larger in CONTENT_SIZE_ORDER[i + 1 :]:
                self.assertLess(render_content_size(smaller), render_content_size(larger))

    def test_rendered_labels(self) -> None:
        from a11y.analytics._internal.content_size import render_content_size

        self.assertEqual(render_content_size("unspecified"), "00 unspecified")
        self.assertEqual(render_content_size("extra_small"), "01 XS extra small (-3)")
        self.assertEqual(render_content_size("large"), "04 L large (default)")
        self.assertEqual(render_content_size("extra_large"), "05 XL extra large (+1)")
        self.assertEqual(render_content_size("accessibility_medium"), "08 AX1 accessibility medium (+4)")
        self.assertEqual(
            render_content_size("accessibility_extra_extra_extra_large"),
            "12 AX5 accessibility extra extra extra large (+8)",
        )

    def test_platform_spellings_are_accepted(self) -> None:
        from a11y.analytics._internal.content_size import normalize_content_size

        self.assertEqual(normalize_content_size("UICTContentSizeCategoryXL"), "extra_large")
        self.assertEqual(normalize_content_size("UICTContentSizeCategoryUnspecified"), "unspecified")
        self.assertEqual(
            normalize_content_size("UICTContentSizeCategoryAccessibilityXXXL"),
            "accessibility_extra_extra_extra_large",
        )
        self.assertEqual(normalize_content_size("ax3"), "accessibility_extra_large")
        self.assertEqual(normalize_content_size("Extra Large"), "extra_large")
        self.assertEqual(normalize_content_size("M"), "medium")
        self.assertIsNone(normalize_content_size("gigantic"))
        self.assertIsNone(normalize_content_size(""))

    def test_unknown_tier_renders_sentinel_after_known_tiers(self) -> None:
        from a11y.analytics._internal.content_size import render_content_size

        sentinel = render_content_size("UICTContentSizeCategoryXXXXL")
        self.assertEqual(sentinel, "unknown content size (UICTContentSizeCategoryXXXXL)")
        self.assertGreater(sentinel, render_content_size("accessibility_extra_extra_extra_large"))

    def test_content_size_for_points_picks_nearest_tier(self) -> None:
        from a11y.analytics._internal.content_size import content_size_for_points

        self.assertEqual(content_size_for_points(17), "large")
        self.assertEqual(content_size_for_points(19.4), "extra_large")
        self.assertEqual(content_size_for_points(18), "large")
        self.assertEqual(content_size_for_points(34), "accessibility_large")
        self.assertEqual(content_size_for_points(100), "accessibility_extra_extra_extra_large")
        self.assertEqual(content_size_for_points(1), "extra_small")
        self.assertIsNone(content_size_for_points(0))
        self.assertIsNone(content_size_for_points(float("nan")))
