from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable, Iterable

import numpy as np

from linechart.errors import InvalidInput
from linechart.path import Path
from linechart.path_builder import build_line_path
from linechart.series import RGBA, DataPoint, DataSeries, Legend, LineStyle, Rect
from linechart.style import LineChartStyle, LineJoin


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Paint:
    """How a front-end should paint one series path.

    ``stops`` is a left-to-right gradient; a flat colour is two equal stops.
    """

    mode: LineStyle
    stops: tuple[RGBA, ...]
    line_width: float | None = None
    line_join: LineJoin | None = None

    @property
    def color(self) -> RGBA:
        return self.stops[0]


PaintProvider = Callable[[Hashable, Legend, int], Paint]


def flat_gradient_provider(style: LineChartStyle) -> PaintProvider:
    def provide(key: Hashable, legend: Legend, index: int) -> Paint:
        if style.line_style is LineStyle.STROKE:
            return Paint(
                mode=LineStyle.STROKE,
                stops=(legend.color, legend.color),
                line_width=style.stroke.line_width,
                line_join=style.stroke.line_join,
            )
        return Paint(mode=LineStyle.FILL, stops=(legend.color, legend.color))

    return provide


@dataclass(frozen=True)
class ComposedSeries:
    key: Hashable
    path: Path
    legend: Legend
    paint: Paint
    peak: float


@dataclass(frozen=True)
class ChartComposition:
    series: tuple[ComposedSeries, ...]
    max_value: float
    max_series: DataSeries
    rect: Rect
    style: LineChartStyle

    @property
    def max_points(self) -> tuple[DataPoint, ...]:
        return tuple(self.max_series.points)

    def legends(self) -> list[Legend]:
        return [item.legend for item in self.series]

    def path_for(self, key: Hashable) -> Path:
        for item in self.series:
            if item.key == key:
                return item.path
        raise KeyError(key)


def find_max_series(series: Iterable[DataSeries]) -> DataSeries:
    """Return the series with the largest peak; the earliest one wins ties."""
    best: DataSeries | None = None
    best_peak = -np.inf
    for item in series:
        peak = item.peak()
        if best is None or peak > best_peak:
            best = item
            best_peak = peak
    if best is None:
        raise InvalidInput("at least one data series is required")
    return best


def compose(
    series: Iterable[DataSeries],
    rect: Rect,
    style: LineChartStyle | None = None,
    *,
    paint_provider: PaintProvider | None = None,
) -> ChartComposition:
    """Scale every series against one shared maximum and build a path for each.

    The shared maximum is the largest peak across all series, so a series
    whose peak is lower never reaches the top edge. The series holding that
    peak is exposed as ``max_series`` for axis, grid and label layout.
    """
    items = list(series)
    if not items:
        raise InvalidInput("at least one data series is required")
    style = style or LineChartStyle()
    provider = paint_provider or flat_gradient_provider(style)

    for index, item in enumerate(items):
        values = item.values()
        if not np.all(np.isfinite(values)):
            raise InvalidInput(f"series {index} contains non-finite values")
        if np.any(values < 0.0):
            LOGGER.warning("series %d has negative values; they are clipped to the bottom edge", index)

    keys = [item.key if item.key is not None else index for index, item in enumerate(items)]
    if len(set(keys)) != len(keys):
        raise InvalidInput("series keys must be unique within one chart")

    max_series = find_max_series(items)
    max_value = max(0.0, max_series.peak())

    composed: list[ComposedSeries] = []
    for index, (key, item) in enumerate(zip(keys, items, strict=True)):
        close_path = style.close_path if item.close_path is None else item.close_path
        path = build_line_path(
            item.values(),
            rect,
            max_value,
            style.line_style,
            close_path=close_path,
            step_mode=style.step_mode,
            ribbon_offset=style.ribbon_offset,
        )
        composed.append(
            ComposedSeries(
                key=key,
                path=path,
                legend=item.legend,
                paint=provider(key, item.legend, index),
                peak=item.peak(),
            )
        )

    LOGGER.debug(
        "composed %d series in %.1fx%.1f rect, shared max %.6g",
        len(composed),
        rect.width,
        rect.height,
        max_value,
    )
    return ChartComposition(
        series=tuple(composed),
        max_value=max_value,
        max_series=max_series,
        rect=rect,
        style=style,
    )
