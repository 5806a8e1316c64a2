"""
Engagement and cadence analytics.

Aggregates normalized videos into rate-based metrics, a posting-regularity
score and a view-count distribution.
"""

from typing import List, Sequence

import numpy as np

from creatorscope.analyzer.models import (
    AnalyticsResult,
    DateRange,
    VideoRecord,
    VideoSummary,
    ViewDistribution,
)
from creatorscope.analyzer.youtube.utils.helpers import (
    median_int,
    round2,
    round_half_up,
    to_date_string,
)

SECONDS_PER_DAY = 86_400

# Two videos give a single gap, which says nothing about regularity
SINGLE_GAP_CONSISTENCY = 60
MIN_MEAN_GAP_DAYS = 1.0


def summarize_video(video: VideoRecord) -> VideoSummary:
    return VideoSummary(
        title=video.title,
        video_id=video.video_id,
        url=video.url,
        views=video.views,
        likes=video.likes,
        comments=video.comments,
        engagement_rate=round2(video.engagement),
        published_at=to_date_string(video.published_at),
    )


def calculate_posting_gaps(videos: Sequence[VideoRecord]) -> List[float]:
    """Days between consecutive uploads, oldest to newest."""
    dates = sorted(v.published_at for v in videos)
    return [
        (dates[i] - dates[i - 1]).total_seconds() / SECONDS_PER_DAY
        for i in range(1, len(dates))
    ]


def calculate_posting_consistency(gaps: Sequence[float]) -> int:
    """
    Score upload regularity from 0 to 100 (higher is more regular).

    Uses the standard deviation of the gaps between uploads relative to the
    mean gap, the mean being floored at one day. A single gap earns fixed partial credit; no gaps at
    all scores 100.
    """
    if len(gaps) >= 2:
        arr = np.asarray(gaps, dtype=np.float64)
        variation = float(arr.std()) / max(float(arr.mean()), MIN_MEAN_GAP_DAYS)
        return max(0, round_half_up((1 - min(variation, 1.0)) * 100))
    if len(gaps) == 1:
        return SINGLE_GAP_CONSISTENCY
    return 100


def compute_analytics(videos: Sequence[VideoRecord], subscriber_count: int) -> AnalyticsResult:
    """
    Compute engagement, cadence and distribution metrics for a channel.

    Args:
        videos: Normalized videos (any order)
        subscriber_count: Channel subscriber count

    Returns:
        AnalyticsResult; zeroed with no top/worst video when ``videos`` is empty
    """
    if not videos:
        return AnalyticsResult.empty()

    count = len(videos)
    total_views = sum(v.views for v in videos)
    total_likes = sum(v.likes for v in videos)
    total_comments = sum(v.comments for v in videos)

    avg_views = round_half_up(total_views / count)
    avg_likes = round_half_up(total_likes / count)
    avg_comments = round_half_up(total_comments / count)

    if total_views > 0:
        engagement_rate = (total_likes + total_comments) / total_views * 100
        like_to_view = total_likes / total_views * 100
        comment_to_view = total_comments / total_views * 100
    else:
        engagement_rate = like_to_view = comment_to_view = 0.0

    view_to_sub = avg_views / subscriber_count * 100 if subscriber_count > 0 else 0.0

    # Posting cadence
    dates = sorted(v.published_at for v in videos)
    oldest, newest = dates[0], dates[-1]
    span_days = max(1.0, (newest - oldest).total_seconds() / SECONDS_PER_DAY)
    posts_per_week = count / span_days * 7

    consistency = calculate_posting_consistency(calculate_posting_gaps(videos))

    # Stable sort keeps the most recent video first among equal view counts
    by_views = sorted(videos, key=lambda v: v.views, reverse=True)
    median_views = median_int([v.views for v in videos])

    return AnalyticsResult(
        video_count=count,
        engagement_rate=round2(engagement_rate),
        avg_views=avg_views,
        avg_likes=avg_likes,
        avg_comments=avg_comments,
        like_to_view_ratio=round2(like_to_view),
        comment_to_view_ratio=round2(comment_to_view),
        view_to_sub_ratio=round2(view_to_sub),
        posts_per_week=round2(posts_per_week),
        posting_consistency=consistency,
        top_performing_video=summarize_video(by_views[0]),
        worst_performing_video=summarize_video(by_views[-1]) if count > 1 else None,
        view_distribution=ViewDistribution(
            median=median_views,
            mean=avg_views,
            max=by_views[0].views,
            min=by_views[-1].views,
            skew_ratio=round2(avg_views / median_views) if median_views > 0 else 0.0,
        ),
        date_range=DateRange(
            oldest=to_date_string(oldest),
            newest=to_date_string(newest),
            span_days=round_half_up(span_days),
        ),
    )
