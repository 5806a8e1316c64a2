"""Data models for sponsorship rate cards."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PriceRange:
    """A low/mid/high USD price triple; low <= mid <= high."""
    low: int
    mid: int
    high: int
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"low": self.low, "mid": self.mid, "high": self.high}
        if self.note:
            result["note"] = self.note
        return result


@dataclass(frozen=True)
class RateCard:
    """Priced ranges across deal types plus the multipliers behind them."""
    integration_rate: PriceRange
    dedicated_rate: PriceRange
    shorts_rate: PriceRange
    usage_rights_addon: PriceRange
    niche_category: str
    niche_multiplier: float
    engagement_multiplier: float
    combined_multiplier: float
    composite_score: int
    brand_deal_experience: str
    currency: str = "USD"
    disclaimer: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currency": self.currency,
            "estimatedIntegrationRate": self.integration_rate.to_dict(),
            "estimatedDedicatedRate": self.dedicated_rate.to_dict(),
            "estimatedShortsRate": self.shorts_rate.to_dict(),
            "usageRightsAddon": self.usage_rights_addon.to_dict(),
            "adjustments": {
                "niche": {"category": self.niche_category, "multiplier": self.niche_multiplier},
                "engagement": {
                    "creatorFusionScore": self.composite_score,
                    "multiplier": self.engagement_multiplier,
                },
                "combined": self.combined_multiplier,
            },
            "brandDealExperience": self.brand_deal_experience,
            "disclaimer": self.disclaimer,
        }
