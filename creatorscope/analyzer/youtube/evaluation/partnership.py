"""Partnership strengths, flags and headline sponsored-post value."""

from typing import Sequence

from creatorscope.analyzer.models import (
    AnalyticsResult,
    CompositeScore,
    EstimatedValue,
    PartnershipInsights,
    Tier,
)
from creatorscope.analyzer.youtube.utils.helpers import round_half_up

# Headline value only; the rate card uses its own, finer table
ESTIMATED_VALUE_CPM = {
    Tier.NANO: (5, 15),
    Tier.MICRO: (8, 20),
    Tier.MID_TIER: (12, 25),
    Tier.MACRO: (15, 30),
    Tier.MEGA: (20, 50),
}

STRONG_SUBSCORE = 80
WEAK_ENGAGEMENT_SUBSCORE = 40
HIGH_VIEW_TO_SUB = 30
LOW_VIEW_TO_SUB = 10
MIN_POSTS_PER_WEEK = 0.5
MIN_CONSISTENCY = 30
EVEN_SKEW_MAX = 1.5
HIGH_SKEW = 3
RECOMMEND_MIN_SCORE = 50
RECOMMEND_MAX_FLAGS = 1


def synthesize_partnership_insights(analytics: AnalyticsResult, content_categories: Sequence[str],
                                    composite_score: CompositeScore) -> PartnershipInsights:
    cpm_low, cpm_high = ESTIMATED_VALUE_CPM.get(composite_score.tier, ESTIMATED_VALUE_CPM[Tier.MID_TIER])
    breakdown = composite_score.breakdown
    skew = analytics.view_distribution.skew_ratio if analytics.view_distribution else None

    strengths = []
    if breakdown.engagement.score >= STRONG_SUBSCORE:
        strengths.append("Exceptional engagement rate for tier")
    if breakdown.consistency.score >= STRONG_SUBSCORE:
        strengths.append("Very consistent posting schedule")
    if breakdown.frequency.score >= STRONG_SUBSCORE:
        strengths.append("Strong posting cadence")
    if analytics.view_to_sub_ratio >= HIGH_VIEW_TO_SUB:
        strengths.append("High subscriber-to-view conversion")
    if skew is not None and 0 < skew <= EVEN_SKEW_MAX:
        strengths.append("Consistent video performance (low variance)")

    flags = []
    if breakdown.engagement.score < WEAK_ENGAGEMENT_SUBSCORE:
        flags.append("Below-average engagement for tier")
    if analytics.posts_per_week < MIN_POSTS_PER_WEEK:
        flags.append("Infrequent posting (<1 per 2 weeks)")
    if analytics.posting_consistency < MIN_CONSISTENCY:
        flags.append("Irregular posting schedule")
    if skew is not None and skew > HIGH_SKEW:
        flags.append("High view variance - possible viral outliers skewing averages")
    if analytics.view_to_sub_ratio < LOW_VIEW_TO_SUB:
        flags.append("Low view-to-sub ratio - possible inactive audience")

    return PartnershipInsights(
        estimated_sponsored_post_value=EstimatedValue(
            low=round_half_up(analytics.avg_views / 1000 * cpm_low),
            high=round_half_up(analytics.avg_views / 1000 * cpm_high),
        ),
        strengths=tuple(strengths),
        flags=tuple(flags),
        content_categories=tuple(content_categories),
        recommended_for_brands=(
            composite_score.score >= RECOMMEND_MIN_SCORE and len(flags) <= RECOMMEND_MAX_FLAGS
        ),
    )
