from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from linechart import InvalidInput, Legend
from linechart.adapters import coerce_values, series_from_frame, series_from_values


class CoerceValuesTests(unittest.TestCase):
    def test_numpy_ints_become_float64(self) -> None:
        arr = coerce_values(np.asarray([1, 2, 3], dtype=np.int32))
        self.assertEqual(arr.dtype, np.float64)
        self.assertEqual(arr.tolist(), [1.0, 2.0, 3.0])

    def test_mixed_python_sequence(self) -> None:
        arr = coerce_values([1, Decimal("2.5"), "4"])
        self.assertEqual(arr.tolist(), [1.0, 2.5, 4.0])

    def test_missing_values_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            coerce_values([1.0, None, 3.0])

    def test_non_numeric_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            coerce_values([1.0, "abc"])

    def test_empty_and_scalar_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            coerce_values([])
        with self.assertRaises(InvalidInput):
            coerce_values(3.0)
        with self.assertRaises(InvalidInput):
            coerce_values(np.zeros((2, 2)))

    @unittest.skipUnless(importlib.util.find_spec("torch") is not None, "torch is not installed")
    def test_torch_tensor(self) -> None:
        import torch

        arr = coerce_values(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(arr.dtype, np.float64)
        self.assertEqual(arr.tolist(), [1.0, 2.0, 3.0])


class SeriesFactoryTests(unittest.TestCase):
    def test_series_from_values_with_labels(self) -> None:
        series = series_from_values([2, 4], Legend(color=(10, 20, 30), label="a"), labels=["x", None], key="a")
        self.assertEqual([p.value for p in series.points], [2.0, 4.0])
        self.assertEqual(series.labels(), ["x", None])
        self.assertEqual(series.key, "a")

    def test_label_length_mismatch(self) -> None:
        with self.assertRaises(InvalidInput):
            series_from_values([1, 2], Legend(color=(0, 0, 0), label="a"), labels=["x"])

    def test_series_from_frame(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"day": ["Mon", "Tue"], "cpu": [10, 30], "mem": [20.5, 5.0]})
        series = series_from_frame(df, [(255, 0, 0), (0, 0, 255)], label_column="day")
        self.assertEqual([s.key for s in series], ["cpu", "mem"])
        self.assertEqual(series[1].legend.color, (0, 0, 255, 255))
        self.assertEqual(series[0].labels(), ["Mon", "Tue"])
        self.assertEqual(series[1].peak(), 20.5)


if __name__ == "__main__":
    unittest.main()
