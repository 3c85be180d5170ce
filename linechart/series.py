from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Sequence

import numpy as np

from linechart.errors import InvalidInput


RGBA = tuple[int, int, int, int]


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int]) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        return (int(r), int(g), int(b), 255)
    if len(color) == 4:
        r, g, b, a = color
        return (int(r), int(g), int(b), int(a))
    raise InvalidInput(f"color must be RGB or RGBA, got {color!r}")


class LineStyle(Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass(frozen=True)
class Rect:
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidInput(f"rect {name} must be finite and > 0, got {value!r}")


@dataclass(frozen=True)
class DataPoint:
    value: float
    label: str | None = None


@dataclass(frozen=True)
class Legend:
    color: RGBA
    label: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", coerce_color(self.color))


@dataclass(frozen=True)
class DataSeries:
    """Ordered points sharing one legend.

    ``key`` is the caller's stable identity for the series; the compositor
    falls back to the series index when it is omitted. ``close_path`` overrides
    the chart-level default for this series only.
    """

    points: Sequence[DataPoint]
    legend: Legend
    key: Hashable | None = None
    close_path: bool | None = None

    def __post_init__(self) -> None:
        points = tuple(
            p if isinstance(p, DataPoint) else DataPoint(value=float(p)) for p in self.points
        )
        if not points:
            raise InvalidInput("data series must contain at least one point")
        object.__setattr__(self, "points", points)

    def __len__(self) -> int:
        return len(self.points)

    def values(self) -> np.ndarray:
        return np.asarray([p.value for p in self.points], dtype=np.float64)

    def peak(self) -> float:
        return float(np.max(self.values()))

    def labels(self) -> list[str | None]:
        return [p.label for p in self.points]
