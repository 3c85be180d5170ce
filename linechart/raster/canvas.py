from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw

from linechart.path import Path
from linechart.series import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blend_mask(
    dst: np.ndarray,
    x: int,
    y: int,
    mask: np.ndarray,
    colors: np.ndarray,
) -> None:
    """Alpha-blend per-column ``colors`` (W x 4) through coverage ``mask`` onto ``dst`` at (x, y)."""
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    cols = colors[x0 - x : x1 - x].astype(np.float32)
    src_alpha = cov * (cols[None, :, 3] / 255.0)
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_num = cols[None, :, :3] * src_alpha[:, :, None] + dst_rgb * (dst_alpha * (1.0 - src_alpha))[:, :, None]
    safe = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    patch[:, :, :3] = np.clip(np.rint(out_num / safe[:, :, None]), 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


def gradient_columns(stops: tuple[RGBA, ...], width: int) -> np.ndarray:
    """Left-to-right linear gradient sampled once per pixel column."""
    stop_arr = np.asarray(stops, dtype=np.float32)
    if stop_arr.shape[0] == 1 or width <= 1:
        return np.repeat(stop_arr[:1], max(1, width), axis=0)
    positions = np.linspace(0.0, 1.0, stop_arr.shape[0])
    t = np.linspace(0.0, 1.0, width)
    return np.stack([np.interp(t, positions, stop_arr[:, c]) for c in range(4)], axis=1)


def path_mask(path: Path, width: int, height: int, *, supersample: int = 4) -> np.ndarray:
    """Coverage mask (uint8) of the filled sub-paths of ``path``."""
    scale = max(1, int(supersample))
    image = Image.new("L", (width * scale, height * scale), 0)
    draw = ImageDraw.Draw(image)
    for poly in path.subpaths():
        if poly.shape[0] < 3:
            continue
        pts = [(float(px) * scale, float(py) * scale) for px, py in poly.tolist()]
        draw.polygon(pts, fill=255)
    if scale > 1:
        image = image.resize((width, height), Image.Resampling.BOX)
    return np.asarray(image, dtype=np.uint8)


def fill_path(
    dst: np.ndarray,
    path: Path,
    stops: tuple[RGBA, ...],
    *,
    x: int = 0,
    y: int = 0,
    width: int,
    height: int,
) -> None:
    mask = path_mask(path, width, height)
    blend_mask(dst, x, y, mask, gradient_columns(stops, width))


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    draw_dashed_hline(dst, x0, x1, y, color, dash=None)


def draw_dashed_hline(
    dst: np.ndarray,
    x0: int,
    x1: int,
    y: int,
    color: RGBA,
    *,
    dash: tuple[int, int] | None = (1, 8),
    phase: int = 1,
) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    cols = np.arange(xa, xb + 1)
    if dash is not None:
        on, off = dash
        cols = cols[((cols - xa + phase) % (on + off)) < on]
        if cols.size == 0:
            return
    a = color[3] / 255.0
    row = dst[y, cols]
    row[:, :3] = np.rint(np.asarray(color[:3], dtype=np.float32) * a + row[:, :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    row[:, 3] = np.maximum(row[:, 3], color[3])
    dst[y, cols] = row


def stroke_mask(
    path: Path,
    width: int,
    height: int,
    *,
    line_width: float,
    line_join: str = "round",
    supersample: int = 4,
) -> np.ndarray:
    """Coverage mask (uint8) of the outline of every sub-path, closed ones included."""
    scale = max(1, int(supersample))
    image = Image.new("L", (width * scale, height * scale), 0)
    draw = ImageDraw.Draw(image)
    stroke_px = max(1, int(round(line_width * scale)))
    joint = "curve" if line_join == "round" else None
    closed = path.is_closed
    for poly in path.subpaths():
        pts = [(float(px) * scale, float(py) * scale) for px, py in poly.tolist()]
        if closed and len(pts) > 2:
            pts.append(pts[0])
        if len(pts) == 1:
            pts.append(pts[0])
        draw.line(pts, fill=255, width=stroke_px, joint=joint)
    if scale > 1:
        image = image.resize((width, height), Image.Resampling.BOX)
    return np.asarray(image, dtype=np.uint8)


def stroke_path(
    dst: np.ndarray,
    path: Path,
    stops: tuple[RGBA, ...],
    *,
    line_width: float,
    line_join: str = "round",
    x: int = 0,
    y: int = 0,
    width: int,
    height: int,
) -> None:
    mask = stroke_mask(path, width, height, line_width=line_width, line_join=line_join)
    blend_mask(dst, x, y, mask, gradient_columns(stops, width))
