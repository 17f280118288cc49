from __future__ import annotations


def clamp_int(value: int, lower: int, upper: int) -> int:
    """Constrain *value* to ``[lower, upper]``.

    When ``lower > upper`` the range is empty and ``lower`` is returned.
    """
    return max(lower, min(value, upper))
