"""
Composite score calculation for channel evaluation.

Combines analyzer output and the audience tier into five tier-benchmarked
sub-scores and a single weighted 0-100 score with a letter grade.

Weights:
    Engagement (tier-adjusted)  35%
    Posting consistency         20%
    Posting frequency           15%
    View-to-subscriber ratio    15%
    Audience reach              15%
"""

import bittensor as bt

from creatorscope.analyzer.models import (
    AnalyticsResult,
    ChannelStats,
    CompositeScore,
    ScoreBreakdown,
    SubScore,
)
from creatorscope.analyzer.youtube.utils.helpers import (
    clamp,
    format_count,
    format_number,
    round_half_up,
)

from .tiers import get_engagement_benchmark, get_tier_band

SCORE_WEIGHTS = {
    "engagement": 0.35,
    "consistency": 0.20,
    "frequency": 0.15,
    "view_to_sub_ratio": 0.15,
    "audience_size": 0.15,
}

# (minimum subscribers, score), checked top to bottom
AUDIENCE_REACH_STEPS = (
    (1_000_000, 95),
    (500_000, 85),
    (100_000, 75),
    (50_000, 65),
    (10_000, 50),
    (1_000, 30),
    (0, 10),
)

# (inclusive lower bound, grade), checked top to bottom
GRADE_THRESHOLDS = (
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C+"),
    (40, "C"),
    (30, "D"),
)


def score_to_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


def calculate_engagement_score(engagement_rate: float, good: float, great: float) -> float:
    if engagement_rate >= great:
        return 90 + min(10, (engagement_rate - great) * 2)
    if engagement_rate >= good:
        return 60 + (engagement_rate - good) / (great - good) * 30
    if engagement_rate > 0:
        return engagement_rate / good * 60
    return 0.0


def calculate_frequency_score(posts_per_week: float) -> float:
    """Sweet spot is 2-5 posts per week; overposting gets a mild penalty."""
    if 2 <= posts_per_week <= 5:
        return 90 + min(10, (posts_per_week - 2) * 3)
    if posts_per_week > 5:
        return max(70, 100 - (posts_per_week - 5) * 5)
    if posts_per_week >= 1:
        return 50 + (posts_per_week - 1) * 40
    if posts_per_week >= 0.25:
        return min(50.0, posts_per_week * 200)
    if posts_per_week > 0:
        return 10.0
    return 0.0


def calculate_view_to_sub_score(view_to_sub_ratio: float) -> float:
    if view_to_sub_ratio >= 30:
        return 90 + min(10, (view_to_sub_ratio - 30) * 0.5)
    if view_to_sub_ratio >= 15:
        return 60 + (view_to_sub_ratio - 15) / 15 * 30
    if view_to_sub_ratio > 0:
        return view_to_sub_ratio / 15 * 60
    return 0.0


def calculate_audience_score(subscribers: int) -> float:
    for minimum, score in AUDIENCE_REACH_STEPS:
        if subscribers >= minimum:
            return float(score)
    return 10.0


def compute_composite_score(analytics: AnalyticsResult, channel_stats: ChannelStats) -> CompositeScore:
    """
    Calculate the weighted composite score for a channel.

    Args:
        analytics: Output of compute_analytics
        channel_stats: Channel statistics (subscriber count drives the tier)

    Returns:
        CompositeScore with grade, tier and per-component breakdown
    """
    subscribers = channel_stats.subscriber_count
    band = get_tier_band(subscribers)
    bench = get_engagement_benchmark(band.tier)

    components = {
        "engagement": clamp(
            calculate_engagement_score(analytics.engagement_rate, bench.good, bench.great), 0, 100
        ),
        "consistency": clamp(analytics.posting_consistency, 0, 100),
        "frequency": clamp(calculate_frequency_score(analytics.posts_per_week), 0, 100),
        "view_to_sub_ratio": clamp(calculate_view_to_sub_score(analytics.view_to_sub_ratio), 0, 100),
        "audience_size": clamp(calculate_audience_score(subscribers), 0, 100),
    }

    weighted = sum(components[name] * weight for name, weight in SCORE_WEIGHTS.items())
    score = int(clamp(round_half_up(weighted), 0, 100))

    tier_name = band.tier.value
    details = {
        "engagement": (
            f"{format_number(analytics.engagement_rate)}% (benchmark: "
            f"{format_number(bench.good)}-{format_number(bench.great)}% for {tier_name})"
        ),
        "consistency": f"{analytics.posting_consistency}/100 consistency",
        "frequency": f"{format_number(analytics.posts_per_week)} posts/week",
        "view_to_sub_ratio": f"{format_number(analytics.view_to_sub_ratio)}% of subs watch each video",
        "audience_size": f"{format_count(subscribers)} subscribers ({tier_name})",
    }

    breakdown = ScoreBreakdown(**{
        name: SubScore(
            score=round_half_up(components[name]),
            weight=SCORE_WEIGHTS[name],
            detail=details[name],
        )
        for name in SCORE_WEIGHTS
    })

    bt.logging.debug(f"Composite score: {score} ({tier_name}), components={components}")

    return CompositeScore(
        score=score,
        grade=score_to_grade(score),
        tier=band.tier,
        tier_label=band.label,
        breakdown=breakdown,
    )
