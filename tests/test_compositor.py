from __future__ import annotations

import unittest

import numpy as np

from linechart import (
    DataPoint,
    DataSeries,
    InvalidInput,
    Legend,
    LineChartStyle,
    LineStyle,
    Paint,
    Rect,
    StrokeStyle,
    build_line_path,
    compose,
)


def _series(values, color=(0, 122, 255), label="s", **kwargs) -> DataSeries:
    return DataSeries(points=[DataPoint(v) for v in values], legend=Legend(color=color, label=label), **kwargs)


class ComposeTests(unittest.TestCase):
    def test_series_share_largest_peak_as_scale(self) -> None:
        low = _series([1, 5, 2], label="low")
        high = _series([3, 10, 4], label="high")
        chart = compose([low, high], Rect(120, 100))

        self.assertEqual(chart.max_value, 10.0)
        self.assertIs(chart.max_series, high)
        low_path, high_path = (item.path for item in chart.series)
        self.assertGreater(low_path.bounds()[1], 0.0)
        self.assertEqual(high_path.bounds()[1], 0.0)
        self.assertAlmostEqual(low_path.bounds()[1], 50.0)

    def test_paths_match_direct_builder_with_shared_max(self) -> None:
        a = _series([2, 4, 6], label="a")
        b = _series([1, 8], label="b")
        rect = Rect(80, 40)
        chart = compose([a, b], rect)
        self.assertEqual(chart.series[0].path, build_line_path(a.values(), rect, 8.0, LineStyle.FILL))
        self.assertEqual(chart.series[1].path, build_line_path(b.values(), rect, 8.0, LineStyle.FILL))

    def test_max_series_ties_resolve_to_first(self) -> None:
        first = _series([1, 7], label="first")
        second = _series([7, 2], label="second")
        chart = compose([first, second], Rect(10, 10))
        self.assertIs(chart.max_series, first)
        self.assertEqual(chart.max_points, first.points)

    def test_keys_default_to_index_and_keep_caller_keys(self) -> None:
        chart = compose([_series([1]), _series([2], key="revenue")], Rect(10, 10))
        self.assertEqual([item.key for item in chart.series], [0, "revenue"])
        self.assertIs(chart.path_for("revenue"), chart.series[1].path)
        with self.assertRaises(KeyError):
            chart.path_for("missing")

    def test_duplicate_keys_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            compose([_series([1], key="a"), _series([2], key="a")], Rect(10, 10))

    def test_fill_charts_close_by_default_with_per_series_override(self) -> None:
        bottom = _series([1, 2, 3])
        top = _series([2, 3, 1], close_path=False)
        chart = compose([bottom, top], Rect(60, 30))
        self.assertTrue(chart.series[0].path.is_closed)
        self.assertFalse(chart.series[1].path.is_closed)

    def test_chart_level_close_path_false(self) -> None:
        chart = compose([_series([1, 2])], Rect(60, 30), LineChartStyle(close_path=False))
        self.assertFalse(chart.series[0].path.is_closed)

    def test_stroke_charts_carry_stroke_paint(self) -> None:
        style = LineChartStyle(line_style=LineStyle.STROKE, stroke=StrokeStyle(line_width=2.0))
        chart = compose([_series([1, 2], color=(255, 149, 0))], Rect(60, 30), style)
        paint = chart.series[0].paint
        self.assertIs(paint.mode, LineStyle.STROKE)
        self.assertEqual(paint.stops, ((255, 149, 0, 255), (255, 149, 0, 255)))
        self.assertEqual((paint.line_width, paint.line_join), (2.0, "round"))
        self.assertTrue(chart.series[0].path.is_closed)

    def test_custom_paint_provider_receives_key_and_index(self) -> None:
        seen = []

        def provider(key, legend, index):
            seen.append((key, legend.label, index))
            return Paint(mode=LineStyle.FILL, stops=(legend.color, (255, 255, 255, 0)))

        chart = compose([_series([1], label="a"), _series([2], label="b", key="k")], Rect(10, 10), paint_provider=provider)
        self.assertEqual(seen, [(0, "a", 0), ("k", "b", 1)])
        self.assertEqual(chart.series[0].paint.stops[1], (255, 255, 255, 0))

    def test_legends_follow_series_order(self) -> None:
        chart = compose([_series([1], label="a"), _series([2], label="b")], Rect(10, 10))
        self.assertEqual([legend.label for legend in chart.legends()], ["a", "b"])

    def test_all_zero_series_use_degenerate_scale(self) -> None:
        chart = compose([_series([0, 0]), _series([0])], Rect(20, 10), LineChartStyle(close_path=False))
        self.assertEqual(chart.max_value, 0.0)
        for item in chart.series:
            self.assertTrue(np.all(item.path.points()[:, 1] == 10.0))

    def test_negative_values_warn(self) -> None:
        with self.assertLogs("linechart.compositor", level="WARNING") as logs:
            compose([_series([-1, 2])], Rect(20, 10))
        self.assertIn("negative", logs.output[0])

    def test_rejects_empty_collection(self) -> None:
        with self.assertRaises(InvalidInput):
            compose([], Rect(10, 10))

    def test_rejects_non_finite_values(self) -> None:
        with self.assertRaises(InvalidInput):
            compose([_series([1.0, float("inf")])], Rect(10, 10))

    def test_compose_is_repeatable(self) -> None:
        series = [_series([3, 1, 2], label="a"), _series([5, 4], label="b")]
        self.assertEqual(compose(series, Rect(50, 50)), compose(series, Rect(50, 50)))


class SeriesModelTests(unittest.TestCase):
    def test_empty_series_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            _series([])

    def test_raw_numbers_become_points(self) -> None:
        series = DataSeries(points=[1, 2.5], legend=Legend(color=(1, 2, 3), label="x"))
        self.assertEqual(series.points, (DataPoint(1.0), DataPoint(2.5)))
        self.assertEqual(series.legend.color, (1, 2, 3, 255))
        self.assertEqual(series.peak(), 2.5)

    def test_style_validation(self) -> None:
        with self.assertRaises(InvalidInput):
            LineChartStyle(label_count=0)
        with self.assertRaises(InvalidInput):
            LineChartStyle(step_mode="diagonal")
        with self.assertRaises(InvalidInput):
            StrokeStyle(line_width=0)
        for bad in (float("nan"), float("inf")):
            with self.assertRaises(InvalidInput):
                LineChartStyle(min_height=bad)
            with self.assertRaises(InvalidInput):
                LineChartStyle(axis_leading_padding=bad)
        style = LineChartStyle().replace(show_axis=False)
        self.assertFalse(style.show_axis)


if __name__ == "__main__":
    unittest.main()
