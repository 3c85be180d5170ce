"""Layout helpers for the overlays drawn around a composed chart.

Everything here is derived from the max series so that the grid, axis values
and x labels describe the shared scale rather than any single series.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from linechart.errors import InvalidInput
from linechart.path import Path, PathWriter
from linechart.scales import format_ticks
from linechart.series import DataPoint, Rect
from linechart.style import StepMode


GRID_FRACTIONS = (0.0, 0.5, 1.0)


@dataclass(frozen=True)
class AxisValue:
    value: float
    text: str
    y: float


@dataclass(frozen=True)
class XLabel:
    index: int
    x: float
    text: str


def grid_path(rect: Rect) -> Path:
    """Three horizontal rules: top, middle and bottom of the rect."""
    writer = PathWriter()
    for fraction in GRID_FRACTIONS:
        y = rect.height * fraction
        writer.move_to(0.0, y)
        writer.line_to(rect.width, y)
    return writer.build()


def axis_values(max_points: Sequence[DataPoint], rect: Rect) -> list[AxisValue]:
    """Values matching the grid rules, top to bottom."""
    if not max_points:
        raise InvalidInput("axis values need at least one point")
    peak = max(0.0, max(p.value for p in max_points))
    values = [peak * (1.0 - fraction) for fraction in GRID_FRACTIONS]
    texts = format_ticks(values)
    return [
        AxisValue(value=v, text=t, y=rect.height * fraction)
        for v, t, fraction in zip(values, texts, GRID_FRACTIONS, strict=True)
    ]


def label_indices(count: int, label_count: int | None = None) -> list[int]:
    if count <= 0:
        return []
    if label_count is None:
        return list(range(count))
    if label_count <= 0:
        raise InvalidInput("label_count must be > 0")
    stride = max(1, math.ceil(count / label_count))
    return list(range(0, count, stride))


def x_labels(
    max_points: Sequence[DataPoint],
    rect: Rect,
    label_count: int | None = None,
    *,
    step_mode: StepMode = "origin",
) -> list[XLabel]:
    count = len(max_points)
    out: list[XLabel] = []
    for index in label_indices(count, label_count):
        text = max_points[index].label
        if text is None:
            continue
        if step_mode == "origin":
            x = rect.width * (index + 1) / count
        elif count > 1:
            x = rect.width * index / (count - 1)
        else:
            # A lone point is drawn as a flat segment across the rect.
            x = rect.width / 2
        out.append(XLabel(index=index, x=x, text=text))
    return out
