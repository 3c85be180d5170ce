from .normalize import coerce_values, series_from_frame, series_from_values

__all__ = ["coerce_values", "series_from_frame", "series_from_values"]
