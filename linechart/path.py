from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal

import numpy as np


PathOp = Literal["move", "line", "close"]


@dataclass(frozen=True)
class PathCommand:
    op: PathOp
    x: float = 0.0
    y: float = 0.0

    def svg(self, precision: int = 3) -> str:
        if self.op == "close":
            return "Z"
        letter = "M" if self.op == "move" else "L"
        return f"{letter}{_fmt(self.x, precision)},{_fmt(self.y, precision)}"


@dataclass(frozen=True)
class Path:
    """Ordered move/line/close commands in a rect's local coordinates (origin top-left)."""

    commands: tuple[PathCommand, ...]

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and self.commands[-1].op == "close"

    def points(self) -> np.ndarray:
        pts = [(c.x, c.y) for c in self.commands if c.op != "close"]
        if not pts:
            return np.zeros((0, 2), dtype=np.float64)
        return np.asarray(pts, dtype=np.float64)

    def bounds(self) -> tuple[float, float, float, float] | None:
        pts = self.points()
        if pts.shape[0] == 0:
            return None
        xmin, ymin = pts.min(axis=0)
        xmax, ymax = pts.max(axis=0)
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def subpaths(self) -> list[np.ndarray]:
        out: list[np.ndarray] = []
        current: list[tuple[float, float]] = []
        for cmd in self.commands:
            if cmd.op == "move":
                if current:
                    out.append(np.asarray(current, dtype=np.float64))
                current = [(cmd.x, cmd.y)]
            elif cmd.op == "line":
                current.append((cmd.x, cmd.y))
            else:
                if current:
                    out.append(np.asarray(current, dtype=np.float64))
                current = []
        if current:
            out.append(np.asarray(current, dtype=np.float64))
        return out

    def to_svg_d(self, precision: int = 3) -> str:
        return " ".join(cmd.svg(precision) for cmd in self.commands)


class PathWriter:
    """Collects commands; mirrors the move/add-line/close vocabulary of 2D path APIs."""

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []

    def move_to(self, x: float, y: float) -> "PathWriter":
        self._commands.append(PathCommand("move", float(x), float(y)))
        return self

    def line_to(self, x: float, y: float) -> "PathWriter":
        self._commands.append(PathCommand("line", float(x), float(y)))
        return self

    def lines_to(self, xs: np.ndarray, ys: np.ndarray) -> "PathWriter":
        for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
            self.line_to(x, y)
        return self

    def close(self) -> "PathWriter":
        self._commands.append(PathCommand("close"))
        return self

    def build(self) -> Path:
        return Path(commands=tuple(self._commands))


def _fmt(value: float, precision: int) -> str:
    out = f"{value:.{precision}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
