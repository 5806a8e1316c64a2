"""Value objects produced by the channel evaluation pipeline."""

from .analytics import AnalyticsResult, DateRange, VideoSummary, ViewDistribution
from .authenticity import (
    INSUFFICIENT_DATA_STATUS,
    AuthenticityFlag,
    AuthenticityReport,
    AuthenticityResult,
    InsufficientAuthenticityData,
)
from .channel import ChannelProfile, ChannelStats, topic_urls_to_categories
from .evaluation_result import BatchSummary, ChannelEvaluation, FailedChannelResult
from .partnership import EstimatedValue, PartnershipInsights
from .rate_card import PriceRange, RateCard
from .score import CompositeScore, ScoreBreakdown, SubScore, Tier
from .sponsorship import BrandMention, SponsoredVideo, SponsorshipReport, SponsorshipSignal
from .video import VideoRecord

__all__ = [
    "AnalyticsResult",
    "DateRange",
    "VideoSummary",
    "ViewDistribution",
    "INSUFFICIENT_DATA_STATUS",
    "AuthenticityFlag",
    "AuthenticityReport",
    "AuthenticityResult",
    "InsufficientAuthenticityData",
    "ChannelProfile",
    "ChannelStats",
    "topic_urls_to_categories",
    "BatchSummary",
    "ChannelEvaluation",
    "FailedChannelResult",
    "EstimatedValue",
    "PartnershipInsights",
    "PriceRange",
    "RateCard",
    "CompositeScore",
    "ScoreBreakdown",
    "SubScore",
    "Tier",
    "BrandMention",
    "SponsoredVideo",
    "SponsorshipReport",
    "SponsorshipSignal",
    "VideoRecord",
]
