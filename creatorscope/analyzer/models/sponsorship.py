"""Data models for sponsorship detection."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class SponsorshipSignal:
    type: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class SponsoredVideo:
    video_id: str
    title: str
    published_at: str
    signals: Tuple[SponsorshipSignal, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "videoId": self.video_id,
            "title": self.title,
            "publishedAt": self.published_at,
            "signals": [signal.to_dict() for signal in self.signals],
        }


@dataclass(frozen=True)
class BrandMention:
    brand: str
    mention_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"brand": self.brand, "mentionCount": self.mention_count}


@dataclass(frozen=True)
class SponsorshipReport:
    """Sponsorship history derived from video descriptions."""
    total_videos_scanned: int = 0
    total_detected: int = 0
    sponsorship_rate: int = 0
    sponsorship_rate_label: str = "None detected"
    has_proper_disclosure: bool = True
    disclosure_rate: int = 100
    disclosure_tag_count: int = 0
    detected_brands: Tuple[BrandMention, ...] = field(default_factory=tuple)
    promo_codes: Tuple[str, ...] = field(default_factory=tuple)
    affiliate_networks: Tuple[str, ...] = field(default_factory=tuple)
    sponsored_videos: Tuple[SponsoredVideo, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> 'SponsorshipReport':
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalVideosScanned": self.total_videos_scanned,
            "totalDetected": self.total_detected,
            "sponsorshipRate": self.sponsorship_rate,
            "sponsorshipRateLabel": self.sponsorship_rate_label,
            "hasProperDisclosure": self.has_proper_disclosure,
            "disclosureRate": self.disclosure_rate,
            "detectedBrands": [brand.to_dict() for brand in self.detected_brands],
            "promoCodes": list(self.promo_codes),
            "affiliateNetworks": list(self.affiliate_networks),
            "sponsoredVideos": [video.to_dict() for video in self.sponsored_videos],
        }
