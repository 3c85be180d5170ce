from .canvas import (
    blend_mask,
    draw_dashed_hline,
    draw_hline,
    fill_path,
    gradient_columns,
    new_canvas,
    path_mask,
    stroke_mask,
    stroke_path,
)
from .draw_text import draw_text, text_size

__all__ = [
    "blend_mask",
    "draw_dashed_hline",
    "draw_hline",
    "draw_text",
    "fill_path",
    "gradient_columns",
    "new_canvas",
    "path_mask",
    "stroke_mask",
    "stroke_path",
    "text_size",
]
