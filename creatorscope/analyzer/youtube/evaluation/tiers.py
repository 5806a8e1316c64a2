"""
Audience tier classification.

Tiers are fixed, gap-free subscriber-count bands. Each tier carries its own
engagement benchmarks since a given engagement percentage means different
things at different audience sizes.
"""

from collections import namedtuple

from creatorscope.analyzer.models import Tier

TierBand = namedtuple("TierBand", ["tier", "min_subscribers", "max_subscribers", "label"])
EngagementBenchmark = namedtuple("EngagementBenchmark", ["good", "great"])

# Inclusive bounds; the last band is open-ended
AUDIENCE_TIERS = (
    TierBand(Tier.NANO, 0, 9_999, "nano (1K-10K)"),
    TierBand(Tier.MICRO, 10_000, 49_999, "micro (10K-50K)"),
    TierBand(Tier.MID_TIER, 50_000, 499_999, "mid-tier (50K-500K)"),
    TierBand(Tier.MACRO, 500_000, 999_999, "macro (500K-1M)"),
    TierBand(Tier.MEGA, 1_000_000, float("inf"), "mega (1M+)"),
)

# "good" = average performer; "great" = top-quartile performer (engagement %)
ENGAGEMENT_BENCHMARKS = {
    Tier.NANO: EngagementBenchmark(8.0, 12.0),
    Tier.MICRO: EngagementBenchmark(5.0, 8.0),
    Tier.MID_TIER: EngagementBenchmark(3.0, 5.0),
    Tier.MACRO: EngagementBenchmark(2.0, 3.5),
    Tier.MEGA: EngagementBenchmark(1.5, 2.5),
}

_BANDS_BY_TIER = {band.tier: band for band in AUDIENCE_TIERS}


def get_tier_band(subscribers: int) -> TierBand:
    """Return the band containing ``subscribers``, defaulting to Nano."""
    for band in AUDIENCE_TIERS:
        if band.min_subscribers <= subscribers <= band.max_subscribers:
            return band
    return AUDIENCE_TIERS[0]


def classify_tier(subscribers: int) -> Tier:
    """Map a subscriber count to its audience tier."""
    return get_tier_band(subscribers).tier


def tier_label(tier: Tier) -> str:
    return _BANDS_BY_TIER[Tier(tier)].label


def get_engagement_benchmark(tier: Tier) -> EngagementBenchmark:
    return ENGAGEMENT_BENCHMARKS.get(Tier(tier), ENGAGEMENT_BENCHMARKS[Tier.MID_TIER])
