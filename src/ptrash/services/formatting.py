# Filename: formatting.py
# Author: Rich Lewis @RichLewis007
# Description: Formatting helpers for user-facing values. Provides the byte-count formatter
#              used when reporting trash directory sizes on the console.

from __future__ import annotations

from typing import Final

_SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def format_bytes(
    num_bytes: int | float | None,
    *,
    empty: str = "",
    decimals: int = 1,
) -> str:
    """Return a human-friendly string for a byte count.

    Uses binary multiples (powers of 1024) up to exabytes. Plain byte counts
    are shown without decimals.
    """
    if num_bytes is None:
        return empty

    value = float(max(num_bytes, 0))
    decimals = max(decimals, 0)

    if value < 1024:
        return f"{int(value):,} B"

    for unit in _SIZE_UNITS[1:]:
        value /= 1024
        if value < 1024 or unit == _SIZE_UNITS[-1]:
            return f"{value:,.{decimals}f} {unit}"

    # Fallback; loop always returns before reaching this line.
    return f"{value:,.{decimals}f} {_SIZE_UNITS[-1]}"


__all__ = ["format_bytes"]
