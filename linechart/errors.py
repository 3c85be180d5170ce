from __future__ import annotations


class ChartError(ValueError):
    """Base class for chart geometry failures."""


class InvalidInput(ChartError):
    """Raised for malformed series, rects or style values."""
