from __future__ import annotations

from typing import Sized


def points_for_length(length: int) -> int:
    """1 + 2 + ... + length: later cells of a cascade are worth more."""
    if length <= 0:
        return 0
    return length * (length + 1) // 2


def points_for_path(segment: Sized) -> int:
    return points_for_length(len(segment))
