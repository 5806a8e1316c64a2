"""YouTube Data API v3 implementation of the channel data source."""

from typing import Any, Dict, List, Optional

import bittensor as bt

from creatorscope.analyzer.interfaces import ChannelDataSource
from creatorscope.analyzer.models import ChannelProfile

from ..cache import ChannelIdCache
from ..utils.quota import QuotaSnapshot, QuotaTracker
from .channel import get_channel_data, resolve_channel_id
from .clients import initialize_youtube_client
from .video import get_recent_video_ids, get_video_data_batch


class YouTubeDataSource(ChannelDataSource):
    """
    Fetches channel and video data with quota accounting.

    Quota costs per call: channels.list, playlistItems.list and videos.list
    are 1 unit each. A typical channel costs 3-5 units.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        cache: ChannelIdCache = None,
        quota: QuotaTracker = None,
        client=None,
    ):
        self.youtube = client or initialize_youtube_client(api_key)
        self._owns_cache = cache is None
        self.cache = cache or ChannelIdCache()
        self.quota = quota or QuotaTracker()

    def resolve(self, channel_input: str) -> Optional[str]:
        return resolve_channel_id(self.youtube, self.quota, self.cache, channel_input)

    def fetch_channel(self, channel_id: str) -> Optional[ChannelProfile]:
        return get_channel_data(self.youtube, self.quota, channel_id)

    def fetch_recent_videos(self, profile: ChannelProfile, max_count: int) -> List[Dict[str, Any]]:
        if not profile.uploads_playlist_id:
            return []
        video_ids = get_recent_video_ids(self.youtube, self.quota, profile.uploads_playlist_id, max_count)
        if not video_ids:
            return []
        videos = get_video_data_batch(self.youtube, self.quota, video_ids)
        bt.logging.info(f"Fetched {len(videos)} videos for {profile.title}")
        return videos

    def quota_snapshot(self) -> QuotaSnapshot:
        return self.quota.snapshot()

    def close(self) -> None:
        if self._owns_cache:
            self.cache.close()
