from __future__ import annotations

import unittest

from linechart import DataPoint, InvalidInput, Rect, axis_values, grid_path, label_indices, x_labels
from linechart.scales import format_tick, format_ticks


class DecorationTests(unittest.TestCase):
    def test_grid_has_top_middle_bottom_rules(self) -> None:
        path = grid_path(Rect(200, 80))
        self.assertEqual([c.op for c in path], ["move", "line"] * 3)
        self.assertEqual(sorted({c.y for c in path}), [0.0, 40.0, 80.0])
        self.assertEqual(len(path.subpaths()), 3)

    def test_axis_values_follow_grid_rules(self) -> None:
        points = [DataPoint(3.0), DataPoint(12.0), DataPoint(7.0)]
        values = axis_values(points, Rect(100, 60))
        self.assertEqual([v.value for v in values], [12.0, 6.0, 0.0])
        self.assertEqual([v.text for v in values], ["12", "6", "0"])
        self.assertEqual([v.y for v in values], [0.0, 30.0, 60.0])

    def test_axis_values_keep_fractional_steps(self) -> None:
        values = axis_values([DataPoint(3.0)], Rect(10, 10))
        self.assertEqual([v.text for v in values], ["3", "1.5", "0"])

    def test_label_indices_stride(self) -> None:
        self.assertEqual(label_indices(5), [0, 1, 2, 3, 4])
        self.assertEqual(label_indices(10, 3), [0, 4, 8])
        self.assertEqual(label_indices(4, 8), [0, 1, 2, 3])
        self.assertEqual(label_indices(0, 3), [])
        with self.assertRaises(InvalidInput):
            label_indices(5, 0)

    def test_x_labels_sit_on_step_boundaries_and_skip_unlabelled(self) -> None:
        points = [DataPoint(1.0, "Mon"), DataPoint(2.0), DataPoint(3.0, "Wed"), DataPoint(4.0, "Thu")]
        labels = x_labels(points, Rect(100, 50))
        self.assertEqual([(l.index, l.x, l.text) for l in labels], [(0, 25.0, "Mon"), (2, 75.0, "Wed"), (3, 100.0, "Thu")])

    def test_x_labels_in_span_mode(self) -> None:
        points = [DataPoint(1.0, "a"), DataPoint(2.0, "b"), DataPoint(3.0, "c")]
        labels = x_labels(points, Rect(100, 50), 2, step_mode="span")
        self.assertEqual([(l.x, l.text) for l in labels], [(0.0, "a"), (100.0, "c")])

    def test_single_point_label_centres_on_span_segment(self) -> None:
        labels = x_labels([DataPoint(4.0, "only")], Rect(80, 20), step_mode="span")
        self.assertEqual([(l.x, l.text) for l in labels], [(40.0, "only")])


class TickFormatTests(unittest.TestCase):
    def test_integer_values_keep_trailing_zeros(self) -> None:
        self.assertEqual(format_ticks([40.0, 20.0, 0.0]), ["40", "20", "0"])

    def test_large_values_use_exponent(self) -> None:
        self.assertEqual(format_tick(2.5e7), "2.5000e+07")

    def test_near_zero_snaps(self) -> None:
        self.assertEqual(format_tick(-1e-17, step=0.5), "0")


if __name__ == "__main__":
    unittest.main()
