"""
Quota accounting for the YouTube Data API.

Every Data API call made by the collaborator is recorded here. One tracker is
created per data source, so the counters live exactly as long as the run that
owns them.
"""

from dataclasses import dataclass

from creatorscope.analyzer.utils.config import YT_DAILY_QUOTA, YT_UNITS_PER_CHANNEL


@dataclass(frozen=True)
class QuotaSnapshot:
    """Point-in-time view of quota usage, echoed into channel results."""
    quota_used: int
    request_count: int
    estimated_remaining: int
    estimated_channels_remaining: int

    def to_dict(self):
        return {
            "quotaUsed": self.quota_used,
            "requestCount": self.request_count,
            "estimatedRemaining": self.estimated_remaining,
            "estimatedChannelsRemaining": self.estimated_channels_remaining,
        }


class QuotaTracker:
    """Counts API requests and quota units consumed."""

    def __init__(self, daily_quota: int = YT_DAILY_QUOTA, units_per_channel: int = YT_UNITS_PER_CHANNEL):
        self.daily_quota = daily_quota
        self.units_per_channel = units_per_channel
        self.quota_used = 0
        self.request_count = 0

    def record(self, cost: int = 1) -> None:
        self.quota_used += cost
        self.request_count += 1

    def reset(self) -> None:
        self.quota_used = 0
        self.request_count = 0

    def snapshot(self) -> QuotaSnapshot:
        remaining = max(0, self.daily_quota - self.quota_used)
        return QuotaSnapshot(
            quota_used=self.quota_used,
            request_count=self.request_count,
            estimated_remaining=remaining,
            estimated_channels_remaining=remaining // self.units_per_channel,
        )
