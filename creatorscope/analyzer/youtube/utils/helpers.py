"""
Helper utility functions for YouTube channel analysis.

This module contains general-purpose numeric and formatting helpers used
across the evaluation components.
"""

import math
import re
from datetime import datetime
from typing import Any, Sequence

import numpy as np

_INT_PREFIX = re.compile(r'^\s*([+-]?\d+)')


def _format_error(e):
    """Format error message to include only error type and brief summary."""
    et = type(e).__name__
    if hasattr(e, 'resp') and hasattr(e.resp, 'status'):
        return f"{et} ({e.resp.status})"
    msg = re.sub(r'https?://\S+', '', str(e)).split('\n')[0].strip()
    msg = re.sub(r'key=[\w-]+', 'key=***', msg)
    return f"{et} ({msg})"


def safe_int(value: Any) -> int:
    """Parse a count from the API (string or number), defaulting to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    """Round a ratio or percentage to two decimal places."""
    return math.floor(value * 100 + 0.5) / 100


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def coefficient_of_variation(values: Sequence[float]) -> float:
    """
    Population standard deviation divided by mean.

    Returns 0.0 for fewer than two values or a zero mean.
    """
    if len(values) < 2:
        return 0.0
    arr = np.asarray(values, dtype=np.float64)
    mean = float(arr.mean())
    if mean == 0:
        return 0.0
    return float(arr.std()) / mean


def median_int(values: Sequence[int]) -> int:
    """Median of integer counts; even-length medians are rounded half up."""
    if not values:
        return 0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return round_half_up((ordered[mid - 1] + ordered[mid]) / 2)


def format_count(n: int) -> str:
    """Compact human-readable count (1.2M, 45.0K, 812)."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    return f"{value:g}"


def to_date_string(dt: datetime) -> str:
    return dt.strftime('%Y-%m-%d')


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + '...'
