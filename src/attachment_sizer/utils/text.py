"""Text helpers for rendering report lines."""

from __future__ import annotations

_UNITS = ("B", "KB", "MB", "GB", "TB")
_STEP = 1024.0


def format_size(num_bytes: int) -> str:
    """Render a byte count in the largest binary unit keeping the value at least 1.

    ``147561`` becomes ``"144.1 KB"``. The unit is picked after rounding, so
    ``1048575`` reads ``"1.0 MB"`` rather than ``"1024.0 KB"``.
    """
    value = float(num_bytes)
    for unit in _UNITS:
        if round(value, 1) < _STEP:
            return f"{value:.1f} {unit}"
        value /= _STEP
    return f"{value:.1f} PB"
