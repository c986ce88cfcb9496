# app/core.py

from datetime import time


def overlaps(start_a: time, end_a: time, start_b: time, end_b: time) -> bool:
    """Half-open ranges [start, end) overlap unless one ends before the other starts."""
    return not (end_a <= start_b or start_a >= end_b)


def within(moment: time, start: time, end: time) -> bool:
    # start inclusive, end exclusive
    return start <= moment < end
