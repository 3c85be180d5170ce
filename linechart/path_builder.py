from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from linechart.errors import InvalidInput
from linechart.path import Path, PathWriter
from linechart.series import LineStyle, Rect
from linechart.style import DEFAULT_RIBBON_OFFSET, StepMode


LOGGER = logging.getLogger(__name__)


def normalize_heights(values: np.ndarray, max_value: float, height: float) -> np.ndarray:
    """Map values onto y coordinates, 0 at the bottom edge and ``max_value`` at the top."""
    if max_value == 0.0:
        ratios = np.zeros_like(values)
    else:
        ratios = np.clip(values / max_value, 0.0, 1.0)
    return height - ratios * height


def step_positions(count: int, width: float, step_mode: StepMode) -> np.ndarray:
    if step_mode == "origin":
        step = width / count
        xs = np.arange(1, count + 1, dtype=np.float64) * step
        return np.minimum(xs, width)
    if count == 1:
        return np.asarray([width], dtype=np.float64)
    step = width / (count - 1)
    xs = np.arange(count, dtype=np.float64) * step
    return np.minimum(xs, width)


def build_line_path(
    values: Any,
    rect: Rect,
    max_value: float,
    line_style: LineStyle = LineStyle.FILL,
    *,
    close_path: bool = True,
    step_mode: StepMode = "origin",
    ribbon_offset: float = DEFAULT_RIBBON_OFFSET,
) -> Path:
    """Build the path for one series scaled against the chart-wide ``max_value``.

    In ``origin`` mode the first value is drawn twice: once at x=0 as the path
    origin and again at the first step boundary, so ``n`` values occupy ``n``
    steps of ``rect.width / n``. ``span`` mode spreads the values evenly over
    the full width instead.

    FILL paths are sealed against the bottom edge when ``close_path`` is set.
    STROKE paths retrace the points in reverse shifted by ``ribbon_offset`` and
    close, producing a thin ribbon that can be filled instead of hairline-stroked.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidInput("values must be 1-D")
    if arr.size == 0:
        raise InvalidInput("cannot build a path for an empty series")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("values must be finite")
    max_value = float(max_value)
    if not math.isfinite(max_value) or max_value < 0.0:
        raise InvalidInput(f"max_value must be finite and >= 0, got {max_value!r}")
    if max_value == 0.0:
        LOGGER.debug("degenerate scale: all %d points collapse to the bottom edge", arr.size)

    height = float(rect.height)
    width = float(rect.width)
    ys = normalize_heights(arr, max_value, height)
    xs = step_positions(arr.size, width, step_mode)

    writer = PathWriter()
    if step_mode == "origin" or arr.size == 1:
        writer.move_to(0.0, ys[0])
        writer.lines_to(xs, ys)
    else:
        writer.move_to(xs[0], ys[0])
        writer.lines_to(xs[1:], ys[1:])
    current_x = float(xs[-1])

    if line_style is LineStyle.FILL:
        if close_path:
            writer.line_to(current_x, height)
            writer.line_to(0.0, height)
            writer.close()
    elif line_style is LineStyle.STROKE:
        # Return edge sits ribbon_offset below the forward edge, toward the baseline;
        # points that would leave the rect flip above the forward edge instead.
        back_ys = ys[::-1] + ribbon_offset
        flipped = back_ys > height
        back_ys[flipped] = ys[::-1][flipped] - ribbon_offset
        back_ys = np.clip(back_ys, 0.0, height)
        writer.lines_to(xs[::-1], back_ys)
        writer.close()
    else:
        raise InvalidInput(f"unsupported line style: {line_style!r}")
    return writer.build()
