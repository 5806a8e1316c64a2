"""Data models for audience tiers and the composite score."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Tier(str, Enum):
    """Subscriber-count band used to normalize benchmarks."""
    NANO = "Nano"
    MICRO = "Micro"
    MID_TIER = "Mid-Tier"
    MACRO = "Macro"
    MEGA = "Mega"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SubScore:
    """One weighted component of the composite score."""
    score: int
    weight: float
    detail: str

    @property
    def weight_label(self) -> str:
        return f"{round(self.weight * 100)}%"

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "weight": self.weight_label, "detail": self.detail}


@dataclass(frozen=True)
class ScoreBreakdown:
    engagement: SubScore
    consistency: SubScore
    frequency: SubScore
    view_to_sub_ratio: SubScore
    audience_size: SubScore

    def items(self):
        return (
            ("engagement", self.engagement),
            ("consistency", self.consistency),
            ("frequency", self.frequency),
            ("viewToSubRatio", self.view_to_sub_ratio),
            ("audienceSize", self.audience_size),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {name: sub.to_dict() for name, sub in self.items()}


@dataclass(frozen=True)
class CompositeScore:
    """The 0-100 weighted evaluation of brand-partnership readiness."""
    score: int
    grade: str
    tier: Tier
    tier_label: str
    breakdown: ScoreBreakdown

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "grade": self.grade,
            "tier": self.tier.value,
            "tierLabel": self.tier_label,
            "breakdown": self.breakdown.to_dict(),
        }
