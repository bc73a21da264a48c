import unittest

from rangebar_core.core.units import DisplayMetrics


class DisplayMetricsTests(unittest.TestCase):
    def test_dp_to_px_scales_by_density(self) -> None:
        metrics = DisplayMetrics(density=2.625)
        self.assertAlmostEqual(metrics.dp_to_px(24), 63.0)
        self.assertAlmostEqual(metrics.px_to_dp(63.0), 24.0)

    def test_default_density_is_identity(self) -> None:
        self.assertEqual(DisplayMetrics().dp_to_px(9), 9.0)

    def test_from_dpi_uses_160_baseline(self) -> None:
        self.assertEqual(DisplayMetrics.from_dpi(320).density, 2.0)

    def test_rejects_non_positive_density(self) -> None:
        with self.assertRaisesRegex(ValueError, "density"):
            DisplayMetrics(density=0)
        with self.assertRaisesRegex(ValueError, "dpi"):
            DisplayMetrics.from_dpi(-1)


if __name__ == "__main__":
    unittest.main()
