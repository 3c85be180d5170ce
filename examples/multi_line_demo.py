from __future__ import annotations

import argparse
from pathlib import Path

from linechart import DataPoint, DataSeries, Legend, LineChartStyle, LineStyle, StrokeStyle, render_chart, save_png


WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _demo_series() -> list[DataSeries]:
    first = [8, 2, 4, 6, 12, 9, 2]
    second = [2, 7, 5, 9, 4, 6, 11]
    return [
        DataSeries(
            points=[DataPoint(v, day) for v, day in zip(first, WEEKDAYS)],
            legend=Legend(color=(0, 122, 255), label="Series 1"),
            key="series-1",
        ),
        DataSeries(
            points=[DataPoint(v, day) for v, day in zip(second, WEEKDAYS)],
            legend=Legend(color=(255, 149, 0, 200), label="Series 2"),
            key="series-2",
        ),
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the multi-line chart demo to PNG files.")
    parser.add_argument("--out-dir", type=Path, default=Path.cwd())
    parser.add_argument("--width", type=int, default=480)
    parser.add_argument("--height", type=int, default=320)
    args = parser.parse_args()
    args.out_dir.mkdir(parents=True, exist_ok=True)

    series = _demo_series()
    fill_style = LineChartStyle(label_count=4)
    stroke_style = LineChartStyle(
        line_style=LineStyle.STROKE,
        stroke=StrokeStyle(line_width=3.0),
        show_axis=False,
        show_labels=False,
    )
    for name, style in (("fill", fill_style), ("stroke", stroke_style)):
        frame = render_chart(series, args.width, args.height, style)
        out = save_png(frame, args.out_dir / f"multi_line_{name}.png")
        print(f"wrote {out}")


if __name__ == "__main__":
    main()
