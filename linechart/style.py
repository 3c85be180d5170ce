from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from linechart.errors import InvalidInput
from linechart.series import LineStyle


StepMode = Literal["origin", "span"]
LineJoin = Literal["miter", "round", "bevel"]

DEFAULT_RIBBON_OFFSET = 3.0


@dataclass(frozen=True)
class StrokeStyle:
    line_width: float = 3.0
    line_join: LineJoin = "round"

    def __post_init__(self) -> None:
        if not math.isfinite(self.line_width) or self.line_width <= 0:
            raise InvalidInput("stroke line_width must be > 0")
        if self.line_join not in ("miter", "round", "bevel"):
            raise InvalidInput(f"unsupported line_join: {self.line_join}")


@dataclass(frozen=True)
class LineChartStyle:
    """Chart-level configuration passed explicitly into the compositor.

    Only ``line_style``, ``close_path``, ``step_mode`` and ``ribbon_offset``
    shape the geometry. The remaining fields are layout hints read by the
    raster front-end (or any other consumer) and carried through untouched.
    """

    line_style: LineStyle = LineStyle.FILL
    close_path: bool = True
    stroke: StrokeStyle = field(default_factory=StrokeStyle)
    min_height: float = 100.0
    show_axis: bool = True
    axis_leading_padding: float = 0.0
    show_labels: bool = True
    label_count: int | None = None
    show_legends: bool = True
    step_mode: StepMode = "origin"
    ribbon_offset: float = DEFAULT_RIBBON_OFFSET

    def __post_init__(self) -> None:
        if not isinstance(self.line_style, LineStyle):
            raise InvalidInput(f"line_style must be a LineStyle, got {self.line_style!r}")
        if not math.isfinite(self.min_height) or self.min_height < 0:
            raise InvalidInput("min_height must be finite and >= 0")
        if not math.isfinite(self.axis_leading_padding) or self.axis_leading_padding < 0:
            raise InvalidInput("axis_leading_padding must be finite and >= 0")
        if self.label_count is not None and self.label_count <= 0:
            raise InvalidInput("label_count must be > 0 when set")
        if self.step_mode not in ("origin", "span"):
            raise InvalidInput(f"unsupported step_mode: {self.step_mode}")
        if not math.isfinite(self.ribbon_offset) or self.ribbon_offset < 0:
            raise InvalidInput("ribbon_offset must be finite and >= 0")

    def replace(self, **changes: Any) -> "LineChartStyle":
        return replace(self, **changes)
