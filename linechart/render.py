from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path as FsPath
from typing import Iterable

import numpy as np
from PIL import Image

from linechart.compositor import ChartComposition, PaintProvider, compose, find_max_series
from linechart.decorations import axis_values, x_labels
from linechart.errors import InvalidInput
from linechart.raster import draw_dashed_hline, draw_hline, draw_text, fill_path, new_canvas, stroke_path, text_size
from linechart.raster.draw_text import DEFAULT_FONT_SIZE_PX
from linechart.series import RGBA, DataSeries, LineStyle, Rect
from linechart.style import LineChartStyle


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderTheme:
    background: RGBA = (0, 0, 0, 0)
    text_color: RGBA = (142, 142, 147, 255)
    grid_color: RGBA = (142, 142, 147, 255)
    font_size_px: float = DEFAULT_FONT_SIZE_PX
    legend_swatch_px: int = 10
    gap_px: int = 4


@dataclass(frozen=True)
class ChartLayout:
    plot_w: int
    plot_h: int
    axis_w: int
    labels_h: int
    legend_h: int

    @property
    def width(self) -> int:
        return self.plot_w + self.axis_w

    @property
    def height(self) -> int:
        return self.plot_h + self.labels_h + self.legend_h


def render_chart(
    series: Iterable[DataSeries],
    width: int,
    height: int,
    style: LineChartStyle | None = None,
    *,
    paint_provider: PaintProvider | None = None,
    theme: RenderTheme | None = None,
) -> np.ndarray:
    """Paint a multi-series line chart into an (H, W, 4) uint8 frame.

    The plot area keeps at least ``style.min_height`` rows; when the requested
    height cannot fit it alongside the label and legend rows the frame grows.
    """
    if width <= 1 or height <= 1:
        raise InvalidInput("frame width/height must be > 1")
    items = list(series)
    style = style or LineChartStyle()
    theme = theme or RenderTheme()
    if not items:
        raise InvalidInput("at least one data series is required")

    layout = _layout(items, width, height, style, theme)
    composition = compose(items, Rect(layout.plot_w, layout.plot_h), style, paint_provider=paint_provider)
    canvas = new_canvas(layout.width, layout.height, color=theme.background)

    if style.show_axis:
        _draw_grid(canvas, composition, theme)
    for item in composition.series:
        paint = item.paint
        if paint.mode is LineStyle.STROKE:
            stroke_path(
                canvas,
                item.path,
                paint.stops,
                line_width=paint.line_width or style.stroke.line_width,
                line_join=paint.line_join or style.stroke.line_join,
                width=layout.plot_w,
                height=layout.plot_h,
            )
        else:
            fill_path(canvas, item.path, paint.stops, width=layout.plot_w, height=layout.plot_h)
    if style.show_axis:
        _draw_axis(canvas, composition, layout, theme)
    if style.show_labels:
        _draw_x_labels(canvas, composition, layout, theme)
    if style.show_legends:
        _draw_legends(canvas, composition, layout, theme)
    return canvas


def save_png(frame: np.ndarray, path: str | FsPath) -> FsPath:
    if frame.dtype != np.uint8 or frame.ndim != 3 or frame.shape[2] != 4:
        raise InvalidInput("frame must be a uint8 (H, W, 4) array")
    out = FsPath(path)
    Image.fromarray(frame).save(out, format="PNG")
    LOGGER.debug("wrote %dx%d chart to %s", frame.shape[1], frame.shape[0], out)
    return out


def _layout(
    items: list[DataSeries],
    width: int,
    height: int,
    style: LineChartStyle,
    theme: RenderTheme,
) -> ChartLayout:
    font_px = theme.font_size_px
    _, line_h = text_size("", font_size_px=font_px)

    axis_w = 0
    if style.show_axis:
        # Axis values depend only on the max series, so a unit rect is enough here.
        texts = [v.text for v in axis_values(find_max_series(items).points, Rect(1.0, 1.0))]
        axis_w = int(math.ceil(style.axis_leading_padding)) + theme.gap_px * 2
        axis_w += max(text_size(t, font_size_px=font_px)[0] for t in texts)

    labels_h = line_h + theme.gap_px * 2 if style.show_labels else 0
    legend_h = 0
    if style.show_legends:
        rows = _legend_rows([item.legend.label for item in items], width, theme)
        legend_h = len(rows) * (max(line_h, theme.legend_swatch_px) + theme.gap_px) + theme.gap_px * 2

    plot_w = width - axis_w
    if plot_w <= 1:
        raise InvalidInput(f"frame width {width} leaves no room for the plot area")
    plot_h = max(height - labels_h - legend_h, int(math.ceil(style.min_height)), 2)
    return ChartLayout(plot_w=plot_w, plot_h=plot_h, axis_w=axis_w, labels_h=labels_h, legend_h=legend_h)


def _legend_item_width(label: str, theme: RenderTheme) -> int:
    return theme.legend_swatch_px + theme.gap_px + text_size(label, font_size_px=theme.font_size_px)[0] + theme.gap_px * 3


def _legend_rows(labels: list[str], width: int, theme: RenderTheme) -> list[list[int]]:
    rows: list[list[int]] = [[]]
    used = theme.gap_px * 2
    for index, label in enumerate(labels):
        item_w = _legend_item_width(label, theme)
        if rows[-1] and used + item_w > width:
            rows.append([])
            used = theme.gap_px * 2
        rows[-1].append(index)
        used += item_w
    return rows


def _draw_grid(canvas: np.ndarray, composition: ChartComposition, theme: RenderTheme) -> None:
    plot_w = int(composition.rect.width)
    plot_h = int(composition.rect.height)
    for value in axis_values(composition.max_points, composition.rect):
        y = min(plot_h - 1, int(round(value.y)))
        draw_dashed_hline(canvas, 0, plot_w - 1, y, theme.grid_color)


def _draw_axis(canvas: np.ndarray, composition: ChartComposition, layout: ChartLayout, theme: RenderTheme) -> None:
    x = layout.plot_w + int(math.ceil(composition.style.axis_leading_padding)) + theme.gap_px
    for value in axis_values(composition.max_points, composition.rect):
        _, th = text_size(value.text, font_size_px=theme.font_size_px)
        y = int(round(value.y - th / 2))
        y = max(0, min(layout.plot_h - th, y))
        draw_text(canvas, x, y, value.text, theme.text_color, font_size_px=theme.font_size_px)


def _draw_x_labels(canvas: np.ndarray, composition: ChartComposition, layout: ChartLayout, theme: RenderTheme) -> None:
    y = layout.plot_h + theme.gap_px
    labels = x_labels(
        composition.max_points,
        composition.rect,
        composition.style.label_count,
        step_mode=composition.style.step_mode,
    )
    for label in labels:
        tw, _ = text_size(label.text, font_size_px=theme.font_size_px)
        x = int(round(label.x - tw / 2))
        x = max(0, min(layout.plot_w - tw, x))
        draw_text(canvas, x, y, label.text, theme.text_color, font_size_px=theme.font_size_px)


def _draw_legends(canvas: np.ndarray, composition: ChartComposition, layout: ChartLayout, theme: RenderTheme) -> None:
    _, line_h = text_size("", font_size_px=theme.font_size_px)
    row_h = max(line_h, theme.legend_swatch_px) + theme.gap_px
    top = layout.plot_h + layout.labels_h + theme.gap_px
    legends = composition.legends()
    rows = _legend_rows([legend.label for legend in legends], layout.width, theme)
    for row_index, row in enumerate(rows):
        x = theme.gap_px * 2
        y = top + row_index * row_h
        for index in row:
            legend = legends[index]
            swatch = theme.legend_swatch_px
            sy = y + (row_h - theme.gap_px - swatch) // 2
            for yy in range(sy, sy + swatch):
                draw_hline(canvas, x, x + swatch - 1, yy, legend.color)
            draw_text(
                canvas,
                x + swatch + theme.gap_px,
                y + (row_h - theme.gap_px - line_h) // 2,
                legend.label,
                theme.text_color,
                font_size_px=theme.font_size_px,
            )
            x += _legend_item_width(legend.label, theme)
