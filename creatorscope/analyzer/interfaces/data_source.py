"""Abstract interface for channel data sources."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from creatorscope.analyzer.models import ChannelProfile


class ChannelDataSource(ABC):
    """Abstract interface for fetching channel and video data."""

    @abstractmethod
    def resolve(self, channel_input: str) -> Optional[str]:
        """Resolve a URL, @handle or raw id to a channel id, or None when not found."""
        pass

    @abstractmethod
    def fetch_channel(self, channel_id: str) -> Optional[ChannelProfile]:
        """Return the channel profile, or None when the channel is missing or private."""
        pass

    @abstractmethod
    def fetch_recent_videos(self, profile: ChannelProfile, max_count: int) -> List[Dict[str, Any]]:
        """Return up to ``max_count`` raw video resources, most recent uploads first."""
        pass

    def quota_snapshot(self):
        """Return the current quota usage, or None when the source does not track quota."""
        return None

    def close(self) -> None:
        """Release any resources held by the source."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
