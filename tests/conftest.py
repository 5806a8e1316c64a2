"""
Global pytest configuration and fixtures.

Provides raw API-shaped video fixtures, an in-memory channel data source and
autouse fixtures that keep tests fast and quiet. No test touches the network.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from tenacity import wait_none

from creatorscope.analyzer.interfaces import ChannelDataSource
from creatorscope.analyzer.models import ChannelProfile, ChannelStats
from creatorscope.analyzer.youtube.api.request import execute_request
from creatorscope.analyzer.youtube.utils.quota import QuotaTracker

BASE_DATE = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def build_raw_video(video_id, days_ago=0, views=1000, likes=50, comments=5,
                    description="", duration="PT8M", title=None, published_at=None):
    """Build a ``videos.list`` item; pass None for likes/comments to hide the counter."""
    if published_at is None:
        published_at = (BASE_DATE - timedelta(days=days_ago)).strftime("%Y-%m-%dT%H:%M:%SZ")
    statistics = {"viewCount": str(views)}
    if likes is not None:
        statistics["likeCount"] = str(likes)
    if comments is not None:
        statistics["commentCount"] = str(comments)
    return {
        "id": video_id,
        "snippet": {
            "title": title or f"Video {video_id}",
            "description": description,
            "publishedAt": published_at,
            "tags": ["test"],
        },
        "statistics": statistics,
        "contentDetails": {"duration": duration},
    }


class FakeDataSource(ChannelDataSource):
    """In-memory data source keyed by channel input."""

    def __init__(self, channels=None, videos=None, aliases=None):
        self.channels = channels or {}
        self.videos = videos or {}
        self.aliases = aliases or {}
        self.quota = QuotaTracker()
        self.closed = False
        self.requested_counts = []

    def resolve(self, channel_input):
        self.quota.record()
        if channel_input in self.channels:
            return channel_input
        return self.aliases.get(channel_input)

    def fetch_channel(self, channel_id):
        self.quota.record()
        return self.channels.get(channel_id)

    def fetch_recent_videos(self, profile, max_count):
        self.quota.record()
        self.requested_counts.append(max_count)
        return list(self.videos.get(profile.channel_id, []))[:max_count]

    def quota_snapshot(self):
        return self.quota.snapshot()

    def close(self):
        self.closed = True


def build_profile(channel_id="UC_test_channel_00000001", title="Test Channel", subscribers=25_000,
                  total_views=5_000_000, video_count=120, hidden=False,
                  uploads="UU_test_uploads", topics=()):
    return ChannelProfile(
        channel_id=channel_id,
        title=title,
        stats=ChannelStats(
            subscriber_count=subscribers,
            view_count=total_views,
            video_count=video_count,
            hidden_subscriber_count=hidden,
        ),
        handle="@testchannel",
        description="A channel about testing.",
        country="US",
        joined_date="2019-03-04",
        uploads_playlist_id=uploads,
        topic_categories=tuple(topics),
    )


@pytest.fixture
def raw_video_factory():
    return build_raw_video


@pytest.fixture
def profile_factory():
    return build_profile


@pytest.fixture
def data_source_factory():
    return FakeDataSource


@pytest.fixture
def sample_raw_videos():
    """Ten weekly uploads with natural variation and a sponsored video."""
    views = [12_000, 8_500, 15_200, 9_800, 22_000, 7_300, 11_100, 13_400, 6_900, 10_500]
    likes = [540, 310, 820, 365, 1_200, 250, 480, 600, 230, 410]
    comments = [42, 18, 75, 30, 110, 12, 35, 51, 15, 28]
    videos = [
        build_raw_video(f"vid{i:02d}", days_ago=i * 7, views=v, likes=l, comments=c)
        for i, (v, l, c) in enumerate(zip(views, likes, comments))
    ]
    videos[2]["snippet"]["description"] = (
        "This video is sponsored by Skillshare. Use code LEARN20 at "
        "https://skillshare.com/r/test?via=yt #ad"
    )
    return videos


@pytest.fixture
def fake_data_source(profile_factory, sample_raw_videos):
    profile = profile_factory(topics=("https://en.wikipedia.org/wiki/Technology",))
    return FakeDataSource(
        channels={profile.channel_id: profile},
        videos={profile.channel_id: sample_raw_videos},
        aliases={"@testchannel": profile.channel_id},
    )


@pytest.fixture(autouse=True)
def disable_delays():
    """
    Auto-use fixture that removes the wait between API retry attempts.
    """
    with patch.object(execute_request.retry, "wait", wait_none()):
        yield


# Performance optimization: disable logging during tests unless explicitly enabled
@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt

    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)

    yield

    logging.getLogger().setLevel(logging.INFO)
