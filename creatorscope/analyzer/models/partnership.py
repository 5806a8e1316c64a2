"""Data models for partnership insights."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class EstimatedValue:
    low: int
    high: int
    currency: str = "USD"
    note: str = "Based on industry CPM averages. Actual rates vary by niche."

    def to_dict(self) -> Dict[str, Any]:
        return {"low": self.low, "high": self.high, "currency": self.currency, "note": self.note}


@dataclass(frozen=True)
class PartnershipInsights:
    estimated_sponsored_post_value: EstimatedValue
    strengths: Tuple[str, ...] = field(default_factory=tuple)
    flags: Tuple[str, ...] = field(default_factory=tuple)
    content_categories: Tuple[str, ...] = field(default_factory=tuple)
    recommended_for_brands: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "estimatedSponsoredPostValue": self.estimated_sponsored_post_value.to_dict(),
            "strengths": list(self.strengths),
            "flags": list(self.flags),
            "contentCategories": list(self.content_categories),
            "recommendedForBrands": self.recommended_for_brands,
        }
