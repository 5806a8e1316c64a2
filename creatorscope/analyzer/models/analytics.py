"""Data models for engagement and cadence analytics."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class VideoSummary:
    """Compact description of a single video used for top/worst performers."""
    title: str
    video_id: str
    url: str
    views: int
    likes: int
    comments: int
    engagement_rate: float
    published_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "videoId": self.video_id,
            "url": self.url,
            "views": self.views,
            "likes": self.likes,
            "comments": self.comments,
            "engagementRate": self.engagement_rate,
            "publishedAt": self.published_at,
        }


@dataclass(frozen=True)
class DateRange:
    oldest: str
    newest: str
    span_days: int

    def to_dict(self) -> Dict[str, Any]:
        return {"oldest": self.oldest, "newest": self.newest, "spanDays": self.span_days}


@dataclass(frozen=True)
class ViewDistribution:
    median: int
    mean: int
    max: int
    min: int
    skew_ratio: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "median": self.median,
            "mean": self.mean,
            "max": self.max,
            "min": self.min,
            "skewRatio": self.skew_ratio,
        }


@dataclass(frozen=True)
class AnalyticsResult:
    """Per-channel aggregate of rate-based and distribution metrics."""
    video_count: int = 0
    engagement_rate: float = 0.0
    avg_views: int = 0
    avg_likes: int = 0
    avg_comments: int = 0
    like_to_view_ratio: float = 0.0
    comment_to_view_ratio: float = 0.0
    view_to_sub_ratio: float = 0.0
    posts_per_week: float = 0.0
    posting_consistency: int = 0
    top_performing_video: Optional[VideoSummary] = None
    worst_performing_video: Optional[VideoSummary] = None
    view_distribution: Optional[ViewDistribution] = None
    date_range: Optional[DateRange] = None

    @classmethod
    def empty(cls) -> 'AnalyticsResult':
        """Zeroed result for a channel without usable videos."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "videoCount": self.video_count,
            "engagementRate": self.engagement_rate,
            "avgViews": self.avg_views,
            "avgLikes": self.avg_likes,
            "avgComments": self.avg_comments,
            "likeToViewRatio": self.like_to_view_ratio,
            "commentToViewRatio": self.comment_to_view_ratio,
            "viewToSubRatio": self.view_to_sub_ratio,
            "postsPerWeek": self.posts_per_week,
            "postingConsistency": self.posting_consistency,
            "topPerformingVideo": self.top_performing_video.to_dict() if self.top_performing_video else None,
            "worstPerformingVideo": self.worst_performing_video.to_dict() if self.worst_performing_video else None,
            "viewDistribution": self.view_distribution.to_dict() if self.view_distribution else None,
        }
        if self.date_range is not None:
            result["dateRange"] = self.date_range.to_dict()
        return result
