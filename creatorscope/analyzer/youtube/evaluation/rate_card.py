"""
Sponsorship rate card pricing.

Prices integration, dedicated and Shorts deals from average views, tier CPM
benchmarks, a niche multiplier and a composite-score multiplier, with
per-tier floors so small channels never get trivial quotes.
"""

from typing import Optional, Sequence, Tuple

import bittensor as bt

from creatorscope.analyzer.models import PriceRange, RateCard, SponsorshipReport, Tier
from creatorscope.analyzer.youtube.utils.helpers import round2, round_half_up

# USD per 1,000 views for a 30-60s mid-video integration
BASE_CPM = {
    Tier.NANO: (5, 10, 20),
    Tier.MICRO: (10, 18, 30),
    Tier.MID_TIER: (15, 22, 35),
    Tier.MACRO: (20, 28, 40),
    Tier.MEGA: (25, 35, 50),
}

# Minimum fee per deal type regardless of views
TIER_FLOORS = {
    Tier.NANO: {"integration": 100, "dedicated": 200, "shorts": 50},
    Tier.MICRO: {"integration": 500, "dedicated": 1_000, "shorts": 150},
    Tier.MID_TIER: {"integration": 2_500, "dedicated": 5_000, "shorts": 500},
    Tier.MACRO: {"integration": 10_000, "dedicated": 25_000, "shorts": 2_000},
    Tier.MEGA: {"integration": 30_000, "dedicated": 75_000, "shorts": 5_000},
}

NICHE_MULTIPLIERS = (
    ("Finance", 1.5),
    ("Business", 1.4),
    ("Technology", 1.3),
    ("Science", 1.2),
    ("Health", 1.2),
    ("Education", 1.1),
    ("Lifestyle", 1.1),
    ("Sports", 1.0),
    ("Society", 1.0),
    ("Gaming", 0.9),
    ("Film", 0.9),
    ("Entertainment", 0.9),
    ("Comedy", 0.85),
    ("Music", 0.8),
)
DEFAULT_NICHE = ("General", 1.0)

# (minimum composite score, multiplier)
ENGAGEMENT_MULTIPLIERS = (
    (80, 1.25),
    (65, 1.10),
    (50, 1.0),
    (35, 0.85),
)
LOWEST_ENGAGEMENT_MULTIPLIER = 0.7

DEAL_TYPE_MULTIPLIERS = {"integration": 1.0, "dedicated": 2.0, "shorts": 0.3}
SHORTS_VIEW_FACTOR = 0.6

USAGE_RIGHTS_FACTORS = (0.3, 0.65, 1.0)
USAGE_RIGHTS_NOTE = (
    "Additional fee for using creator content in brand advertising (social, display, TV)."
)

RATE_CARD_DISCLAIMER = (
    "Estimated rates based on industry benchmarks, audience tier, engagement quality, "
    "and niche CPMs. Actual rates depend on negotiation, exclusivity, deliverables, "
    "and usage rights."
)

UNKNOWN_EXPERIENCE = "Unknown"
BRAND_DEAL_EXPERIENCE = (
    (10, "Very experienced - frequent brand partnerships"),
    (5, "Experienced - regular brand deals"),
    (1, "Some experience - occasional partnerships"),
)
NO_EXPERIENCE = "No sponsorship history detected - may be open to first deals"


def select_niche(content_categories: Sequence[str]) -> Tuple[str, float]:
    """
    Pick the highest-paying niche any category label mentions.

    Matching is a case-insensitive substring test. Ties keep the first niche
    found; no match falls back to ("General", 1.0).
    """
    best = None
    for category in content_categories:
        lowered = category.lower()
        for niche, multiplier in NICHE_MULTIPLIERS:
            if niche.lower() in lowered and (best is None or multiplier > best[1]):
                best = (niche, multiplier)
    return best or DEFAULT_NICHE


def engagement_multiplier(composite_score: int) -> float:
    for minimum, multiplier in ENGAGEMENT_MULTIPLIERS:
        if composite_score >= minimum:
            return multiplier
    return LOWEST_ENGAGEMENT_MULTIPLIER


def calc_rate(views: float, cpm: Tuple[int, int, int], type_multiplier: float,
              quality_multiplier: float, floor: int) -> PriceRange:
    """Price one deal type, holding each point at or above its floor."""
    low, mid, high = (
        round_half_up(views / 1000 * rate * type_multiplier * quality_multiplier)
        for rate in cpm
    )
    return PriceRange(
        low=max(low, floor),
        mid=max(mid, round_half_up(floor * 1.5)),
        high=max(high, round_half_up(floor * 2.5)),
    )


def classify_brand_deal_experience(sponsorship: Optional[SponsorshipReport]) -> str:
    if sponsorship is None:
        return UNKNOWN_EXPERIENCE
    for minimum, label in BRAND_DEAL_EXPERIENCE:
        if sponsorship.total_detected >= minimum:
            return label
    return NO_EXPERIENCE


def generate_rate_card(avg_views: int, subscribers: int, tier: Tier, engagement_rate: float,
                       composite_score: int, content_categories: Sequence[str] = (),
                       sponsorship: Optional[SponsorshipReport] = None) -> RateCard:
    """
    Generate a sponsorship rate card.

    Args:
        avg_views: Average views per video
        subscribers: Subscriber count
        tier: Audience tier
        engagement_rate: Channel engagement rate (%)
        composite_score: Overall composite score (0-100)
        content_categories: Channel category labels
        sponsorship: Sponsorship report, or None when detection did not run

    Returns:
        RateCard with USD price ranges per deal type
    """
    tier = Tier(tier)
    cpm = BASE_CPM.get(tier, BASE_CPM[Tier.MID_TIER])
    floors = TIER_FLOORS.get(tier, TIER_FLOORS[Tier.MID_TIER])

    niche, niche_multiplier = select_niche(content_categories)
    quality = engagement_multiplier(composite_score)
    combined = niche_multiplier * quality

    integration = calc_rate(avg_views, cpm, DEAL_TYPE_MULTIPLIERS["integration"], combined,
                            floors["integration"])
    dedicated = calc_rate(avg_views, cpm, DEAL_TYPE_MULTIPLIERS["dedicated"], combined,
                          floors["dedicated"])
    shorts = calc_rate(avg_views * SHORTS_VIEW_FACTOR, cpm, DEAL_TYPE_MULTIPLIERS["shorts"],
                       combined, floors["shorts"])

    usage_low, usage_mid, usage_high = (
        round_half_up(integration.mid * factor) for factor in USAGE_RIGHTS_FACTORS
    )

    bt.logging.debug(
        f"Rate card: tier={tier.value}, subscribers={subscribers}, avg_views={avg_views}, "
        f"engagement={engagement_rate}%, niche={niche} x{niche_multiplier}, quality x{quality}"
    )

    return RateCard(
        integration_rate=integration,
        dedicated_rate=dedicated,
        shorts_rate=shorts,
        usage_rights_addon=PriceRange(usage_low, usage_mid, usage_high, note=USAGE_RIGHTS_NOTE),
        niche_category=niche,
        niche_multiplier=round2(niche_multiplier),
        engagement_multiplier=round2(quality),
        combined_multiplier=round2(combined),
        composite_score=composite_score,
        brand_deal_experience=classify_brand_deal_experience(sponsorship),
        disclaimer=RATE_CARD_DISCLAIMER,
    )
