from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from linechart.raster.canvas import blend_mask
from linechart.series import RGBA


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 11.0
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)
FALLBACK_PATTERNS = ("dejavusans", "helvetica", "arial", "liberationsans")


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> None:
    if not text:
        return
    mask = _render_mask(text, load_font(font_family, font_size_px))
    colors = np.repeat(np.asarray([color], dtype=np.float32), mask.shape[1], axis=0)
    blend_mask(dst, x, y, mask, colors)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = load_font(font_family, font_size_px)
    if not text:
        _, top, _, bottom = font.getbbox("Ag")
        return (0, max(1, int(bottom - top)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=32)
def load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    path = _resolve_font_path(font_family)
    if path is not None:
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError as exc:
            LOGGER.warning("could not load font %s: %s", path, exc)
    LOGGER.debug("no truetype font for %r, using the Pillow default", font_family)
    return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower().replace(" ", "")
    patterns = ((wanted,) if wanted else ()) + FALLBACK_PATTERNS
    candidates: list[Path] = []
    for base in FONT_DIRS:
        if base.exists():
            for ext in ("*.ttf", "*.otf"):
                candidates.extend(sorted(base.rglob(ext)))
    for pattern in patterns:
        for path in candidates:
            if pattern in path.name.lower().replace(" ", "").replace("-", ""):
                return path
    return None
