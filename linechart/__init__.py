from linechart.compositor import ChartComposition, ComposedSeries, Paint, compose, find_max_series, flat_gradient_provider
from linechart.decorations import AxisValue, XLabel, axis_values, grid_path, label_indices, x_labels
from linechart.errors import ChartError, InvalidInput
from linechart.path import Path, PathCommand
from linechart.path_builder import build_line_path
from linechart.render import RenderTheme, render_chart, save_png
from linechart.series import DataPoint, DataSeries, Legend, LineStyle, Rect
from linechart.style import LineChartStyle, StrokeStyle

__all__ = [
    "AxisValue",
    "ChartComposition",
    "ChartError",
    "ComposedSeries",
    "DataPoint",
    "DataSeries",
    "InvalidInput",
    "Legend",
    "LineChartStyle",
    "LineStyle",
    "Paint",
    "Path",
    "PathCommand",
    "Rect",
    "RenderTheme",
    "StrokeStyle",
    "XLabel",
    "axis_values",
    "build_line_path",
    "compose",
    "find_max_series",
    "flat_gradient_provider",
    "grid_path",
    "label_indices",
    "render_chart",
    "save_png",
    "x_labels",
]
