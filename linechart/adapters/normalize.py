from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from linechart.errors import InvalidInput
from linechart.series import DataPoint, DataSeries, Legend


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_values(values: Any, *, label: str = "values") -> np.ndarray:
    """Turn a list, ndarray, pandas Series or torch tensor into a 1-D float64 array."""
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise InvalidInput(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        arr = tensor.to(torch.float64).numpy()
    elif pd is not None and isinstance(values, pd.Series):
        arr = _coerce_ndarray(values.to_numpy(), label=label)
    elif isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidInput(f"{label} must be 1-D")
        arr = _coerce_ndarray(values, label=label)
    elif isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        arr = _coerce_ndarray(np.asarray(values, dtype=object), label=label)
    else:
        raise InvalidInput(f"unsupported {label} input type: {type(values)!r}")

    if arr.size == 0:
        raise InvalidInput(f"{label} is empty")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"{label} contains missing or non-finite values")
    return arr


def series_from_values(
    values: Any,
    legend: Legend,
    *,
    labels: Sequence[str | None] | None = None,
    key: Hashable | None = None,
    close_path: bool | None = None,
) -> DataSeries:
    arr = coerce_values(values)
    if labels is not None and len(labels) != arr.size:
        raise InvalidInput(f"labels length mismatch: {len(labels)} != {arr.size}")
    points = [
        DataPoint(value=float(v), label=(labels[i] if labels is not None else None))
        for i, v in enumerate(arr.tolist())
    ]
    return DataSeries(points=points, legend=legend, key=key, close_path=close_path)


def series_from_frame(
    frame: Any,
    colors: Mapping[str, tuple[int, ...]] | Sequence[tuple[int, ...]],
    *,
    columns: Sequence[str] | None = None,
    label_column: str | None = None,
) -> list[DataSeries]:
    """One series per numeric DataFrame column, keyed and labelled by column name."""
    if pd is None:
        raise InvalidInput("pandas is required for DataFrame input")
    if not isinstance(frame, pd.DataFrame):
        raise InvalidInput("frame must be a pandas DataFrame")
    if columns is None:
        columns = [
            c for c in frame.columns if c != label_column and pd.api.types.is_numeric_dtype(frame[c])
        ]
    if not columns:
        raise InvalidInput("frame has no numeric columns")

    labels = None
    if label_column is not None:
        if label_column not in frame.columns:
            raise InvalidInput(f"column not found: {label_column}")
        labels = [str(v) for v in frame[label_column].tolist()]

    out: list[DataSeries] = []
    for i, column in enumerate(columns):
        if column not in frame.columns:
            raise InvalidInput(f"column not found: {column}")
        color = colors[column] if isinstance(colors, Mapping) else colors[i % len(colors)]
        out.append(
            series_from_values(
                frame[column],
                Legend(color=tuple(color), label=str(column)),
                labels=labels,
                key=column,
            )
        )
    return out


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
