"""Data models for channel-level inputs."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from creatorscope.analyzer.youtube.utils.helpers import safe_int

WIKIPEDIA_TOPIC_PREFIX = "https://en.wikipedia.org/wiki/"


@dataclass(frozen=True)
class ChannelStats:
    """Lifetime channel statistics as reported by the API."""
    subscriber_count: int = 0
    view_count: int = 0
    video_count: int = 0
    hidden_subscriber_count: bool = False

    @classmethod
    def from_api(cls, statistics: Optional[Dict[str, Any]]) -> 'ChannelStats':
        """Build from a ``statistics`` block, tolerating missing or string values."""
        statistics = statistics or {}
        return cls(
            subscriber_count=max(0, safe_int(statistics.get("subscriberCount"))),
            view_count=max(0, safe_int(statistics.get("viewCount"))),
            video_count=max(0, safe_int(statistics.get("videoCount"))),
            hidden_subscriber_count=statistics.get("hiddenSubscriberCount") is True,
        )


def topic_urls_to_categories(topic_urls) -> Tuple[str, ...]:
    """Turn topic category URLs into readable labels ("Video_game_culture" -> "Video game culture")."""
    return tuple(
        url.replace(WIKIPEDIA_TOPIC_PREFIX, "").replace("_", " ")
        for url in (topic_urls or [])
    )


@dataclass(frozen=True)
class ChannelProfile:
    """Channel identity, statistics and topic data returned by a data source."""
    channel_id: str
    title: str = "Unknown"
    stats: ChannelStats = field(default_factory=ChannelStats)
    handle: Optional[str] = None
    description: str = ""
    country: Optional[str] = None
    joined_date: Optional[str] = None
    thumbnail_url: Optional[str] = None
    uploads_playlist_id: Optional[str] = None
    topic_categories: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def content_categories(self) -> Tuple[str, ...]:
        return topic_urls_to_categories(self.topic_categories)

    @property
    def channel_url(self) -> str:
        return f"https://youtube.com/channel/{self.channel_id}"
