"""
YouTube utilities module.

Helpers for number formatting, quota accounting and API error translation.
"""

from .helpers import (
    _format_error,
    clamp,
    coefficient_of_variation,
    format_count,
    format_number,
    median_int,
    round2,
    round_half_up,
    safe_int,
    to_date_string,
    truncate,
)
from .quota import QuotaSnapshot, QuotaTracker

__all__ = [
    '_format_error',
    'clamp',
    'coefficient_of_variation',
    'format_count',
    'format_number',
    'median_int',
    'round2',
    'round_half_up',
    'safe_int',
    'to_date_string',
    'truncate',
    'QuotaSnapshot',
    'QuotaTracker',
]
