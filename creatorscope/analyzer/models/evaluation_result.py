"""Data models for per-channel and batch evaluation results."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .analytics import AnalyticsResult
from .authenticity import AuthenticityReport
from .partnership import PartnershipInsights
from .rate_card import RateCard
from .score import CompositeScore
from .sponsorship import SponsorshipReport


@dataclass(frozen=True)
class ChannelEvaluation:
    """Complete evaluation of a single channel."""
    channel_id: str
    channel_name: str
    channel_url: str
    subscriber_count: int
    total_views: int
    total_videos: int
    composite_score: CompositeScore
    analytics: AnalyticsResult
    partnership: PartnershipInsights
    analyzed_at: str
    handle: Optional[str] = None
    description: str = ""
    country: Optional[str] = None
    hidden_subscriber_count: bool = False
    joined_date: Optional[str] = None
    thumbnail_url: Optional[str] = None
    sponsorship: Optional[SponsorshipReport] = None
    authenticity: Optional[AuthenticityReport] = None
    rate_card: Optional[RateCard] = None
    quota_snapshot: Optional[Any] = None
    status: str = "success"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize into the recorded output shape.

        Optional sections (sponsorship, authenticity, rate card, quota snapshot)
        are omitted when they were disabled or could not be computed.
        """
        result = {
            "status": self.status,
            "channelId": self.channel_id,
            "channelName": self.channel_name,
            "channelUrl": self.channel_url,
            "handle": self.handle,
            "description": self.description,
            "country": self.country,
            "subscriberCount": self.subscriber_count,
            "hiddenSubscriberCount": self.hidden_subscriber_count,
            "totalViews": self.total_views,
            "totalVideos": self.total_videos,
            "joinedDate": self.joined_date,
            "thumbnailUrl": self.thumbnail_url,
            "creatorFusionScore": self.composite_score.to_dict(),
            "analytics": self.analytics.to_dict(),
            "partnership": self.partnership.to_dict(),
        }
        if self.sponsorship is not None:
            result["sponsorship"] = self.sponsorship.to_dict()
        if self.authenticity is not None:
            result["authenticity"] = self.authenticity.to_dict()
        if self.rate_card is not None:
            result["rateCard"] = self.rate_card.to_dict()
        result["analyzedAt"] = self.analyzed_at
        if self.quota_snapshot is not None:
            result["quotaSnapshot"] = self.quota_snapshot.to_dict()
        return result


@dataclass(frozen=True)
class FailedChannelResult:
    """Error entry for a channel that could not be analyzed."""
    channel_input: str
    error: str
    status: str = "failed"

    def to_dict(self) -> Dict[str, Any]:
        return {"channelInput": self.channel_input, "error": self.error, "status": self.status}


@dataclass(frozen=True)
class BatchSummary:
    processed: int
    skipped: int
    failed: int
    total: int
    quota: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processedChannels": self.processed,
            "skippedChannels": self.skipped,
            "failedChannels": self.failed,
            "totalChannels": self.total,
            "quota": self.quota.to_dict() if self.quota is not None else None,
        }
