"""Data models for normalized videos."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class VideoRecord:
    """A single video in canonical shape, produced by the normalizer."""
    video_id: str
    title: str
    description: str
    published_at: datetime
    views: int
    likes: int
    comments: int
    duration: str = "PT0S"
    duration_seconds: int = 0
    tags: Tuple[str, ...] = field(default_factory=tuple)
    likes_disabled: bool = False
    comments_disabled: bool = False

    @property
    def is_short(self) -> bool:
        """Shorts are videos with a known duration of at most 60 seconds."""
        return 0 < self.duration_seconds <= 60

    @property
    def engagement(self) -> float:
        """(likes + comments) / views as a percentage, 0 when there are no views."""
        if self.views <= 0:
            return 0.0
        return (self.likes + self.comments) / self.views * 100

    @property
    def url(self) -> str:
        return f"https://youtube.com/watch?v={self.video_id}"
