"""
Per-channel evaluation pipeline.

Composes the evaluation components into a single ChannelEvaluation. Apart
from the analysis timestamp, everything here is a pure function of the
channel profile and its normalized videos.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

import bittensor as bt

from creatorscope.analyzer.models import ChannelEvaluation, ChannelProfile, VideoRecord
from creatorscope.analyzer.utils.config import (
    CHANNEL_DESCRIPTION_MAX_LENGTH,
    ENABLE_AUTHENTICITY_CHECK,
    ENABLE_RATE_CARD,
    ENABLE_SPONSORSHIP_DETECTION,
    YT_DEFAULT_VIDEOS_PER_CHANNEL,
    YT_MAX_VIDEOS_PER_CHANNEL,
    YT_MIN_VIDEOS_PER_CHANNEL,
)
from creatorscope.analyzer.youtube.evaluation import (
    compute_analytics,
    compute_authenticity,
    compute_composite_score,
    detect_sponsorship,
    generate_rate_card,
    synthesize_partnership_insights,
)
from creatorscope.analyzer.youtube.utils.helpers import clamp, truncate


@dataclass
class AnalysisOptions:
    """Per-run analysis settings; ``videos_per_channel`` is clamped to 5..200."""
    videos_per_channel: int = YT_DEFAULT_VIDEOS_PER_CHANNEL
    enable_sponsorship_detection: bool = ENABLE_SPONSORSHIP_DETECTION
    enable_authenticity_check: bool = ENABLE_AUTHENTICITY_CHECK
    enable_rate_card: bool = ENABLE_RATE_CARD
    min_subscribers: int = 0
    min_engagement_rate: float = 0.0

    def __post_init__(self):
        if self.videos_per_channel is None:
            self.videos_per_channel = YT_DEFAULT_VIDEOS_PER_CHANNEL
        self.videos_per_channel = int(clamp(
            self.videos_per_channel, YT_MIN_VIDEOS_PER_CHANNEL, YT_MAX_VIDEOS_PER_CHANNEL
        ))


def evaluate_channel(
    profile: ChannelProfile,
    videos: Sequence[VideoRecord],
    options: Optional[AnalysisOptions] = None,
    quota_snapshot=None,
) -> ChannelEvaluation:
    """
    Run the full evaluation for one channel.

    Args:
        profile: Channel identity and statistics
        videos: Normalized videos for the channel
        options: Feature toggles; defaults to AnalysisOptions()
        quota_snapshot: Optional quota usage echoed into the result

    Returns:
        ChannelEvaluation. Authenticity is attached only when a score could
        be computed; disabled sections are left as None.
    """
    options = options or AnalysisOptions()
    stats = profile.stats
    categories = profile.content_categories

    analytics = compute_analytics(videos, stats.subscriber_count)
    composite = compute_composite_score(analytics, stats)
    partnership = synthesize_partnership_insights(analytics, categories, composite)

    sponsorship = detect_sponsorship(videos) if options.enable_sponsorship_detection else None

    authenticity = None
    if options.enable_authenticity_check:
        result = compute_authenticity(videos, stats)
        if result.is_computed:
            authenticity = result
        else:
            bt.logging.debug(f"{profile.title}: authenticity skipped ({result.note})")

    rate_card = None
    if options.enable_rate_card:
        rate_card = generate_rate_card(
            avg_views=analytics.avg_views,
            subscribers=stats.subscriber_count,
            tier=composite.tier,
            engagement_rate=analytics.engagement_rate,
            composite_score=composite.score,
            content_categories=categories,
            sponsorship=sponsorship,
        )

    return ChannelEvaluation(
        channel_id=profile.channel_id,
        channel_name=profile.title,
        channel_url=profile.channel_url,
        subscriber_count=stats.subscriber_count,
        total_views=stats.view_count,
        total_videos=stats.video_count,
        composite_score=composite,
        analytics=analytics,
        partnership=partnership,
        analyzed_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        handle=profile.handle,
        description=truncate(profile.description or "", CHANNEL_DESCRIPTION_MAX_LENGTH),
        country=profile.country,
        hidden_subscriber_count=stats.hidden_subscriber_count,
        joined_date=profile.joined_date,
        thumbnail_url=profile.thumbnail_url,
        sponsorship=sponsorship,
        authenticity=authenticity,
        rate_card=rate_card,
        quota_snapshot=quota_snapshot,
    )
