"""
Video normalization for channel analysis.

This module converts raw YouTube ``videos.list`` items into immutable
``VideoRecord`` objects: counts are parsed defensively, durations are turned
into seconds and records without a usable publish date are dropped.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import bittensor as bt

from creatorscope.analyzer.models import VideoRecord
from creatorscope.analyzer.youtube.utils.helpers import safe_int

DURATION_PATTERN = re.compile(
    r'^P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?$',
    re.IGNORECASE,
)

# fromisoformat before 3.11 only accepts 3 or 6 fractional digits
FRACTION_PATTERN = re.compile(r'([T ]\d{2}:\d{2}:\d{2})\.(\d+)')


def parse_duration(iso_duration: Optional[str]) -> int:
    """
    Parse an ISO 8601 duration into total seconds.

    Supports day, hour, minute and second components.

    Examples:
        >>> parse_duration("PT1H2M30S")
        3750
        >>> parse_duration("P1DT12H")
        129600
        >>> parse_duration("PT0S")
        0
    """
    if not iso_duration or not isinstance(iso_duration, str):
        return 0
    match = DURATION_PATTERN.match(iso_duration.strip())
    if not match:
        return 0
    days, hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return days * 86_400 + hours * 3_600 + minutes * 60 + seconds


def parse_published_at(value: Any) -> Optional[datetime]:
    """Parse an API timestamp into an aware UTC datetime, or None if unusable."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = FRACTION_PATTERN.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text)
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def normalize_video(raw: Dict[str, Any]) -> Optional[VideoRecord]:
    """Normalize a single raw video item; returns None when its publish date is unusable."""
    snippet = raw.get("snippet") or {}
    stats = raw.get("statistics") or {}
    content = raw.get("contentDetails") or {}

    published_at = parse_published_at(
        snippet.get("publishedAt") or content.get("videoPublishedAt")
    )
    if published_at is None:
        return None

    duration = content.get("duration") or "PT0S"

    return VideoRecord(
        video_id=str(raw.get("id", "")),
        title=snippet.get("title") or "Unknown",
        description=snippet.get("description") or "",
        tags=tuple(snippet.get("tags") or ()),
        published_at=published_at,
        views=max(0, safe_int(stats.get("viewCount"))),
        likes=max(0, safe_int(stats.get("likeCount"))),
        comments=max(0, safe_int(stats.get("commentCount"))),
        duration=duration,
        duration_seconds=parse_duration(duration),
        likes_disabled=stats.get("likeCount") is None,
        comments_disabled=stats.get("commentCount") is None,
    )


def normalize_videos(raw_videos: Iterable[Dict[str, Any]]) -> List[VideoRecord]:
    """
    Convert raw video items into VideoRecords ordered most recent first.

    Items with a missing or unparseable publish date are silently excluded.

    Args:
        raw_videos: Items as returned by ``videos.list`` (snippet, statistics, contentDetails)

    Returns:
        List of VideoRecord sorted by publish time, newest first
    """
    records = []
    dropped = 0
    for raw in raw_videos or []:
        record = normalize_video(raw or {})
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        bt.logging.debug(f"Dropped {dropped} videos with invalid publish dates")

    records.sort(key=lambda v: v.published_at, reverse=True)
    return records
