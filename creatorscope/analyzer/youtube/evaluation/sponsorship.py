"""
Sponsorship signal scanning over video descriptions.

Looks for disclosure hashtags, sponsorship phrases, affiliate and tracking
links, and promo codes. Uses only the description text already fetched with
the videos.
"""

import re
from collections import OrderedDict
from typing import Dict, List, Sequence

import bittensor as bt

from creatorscope.analyzer.models import (
    BrandMention,
    SponsoredVideo,
    SponsorshipReport,
    SponsorshipSignal,
    VideoRecord,
)
from creatorscope.analyzer.youtube.utils.helpers import round_half_up, to_date_string

# Required-disclosure hashtags, matched as case-insensitive substrings
DISCLOSURE_HASHTAGS = (
    "#ad", "#sponsored", "#partner", "#paidpartnership",
    "#collab", "#gifted", "#brandambassador", "#affiliate",
)

# Checked in order; the first match per video wins
SPONSORSHIP_PHRASES = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\bsponsored\s+by\b",
    r"\bbrought\s+to\s+you\s+by\b",
    r"\bthanks?\s+to\s+\w+\s+for\s+sponsor",
    r"\bthis\s+video\s+is\s+sponsored\b",
    r"\bpartnership\s+with\b",
    r"\bpaid\s+promotion\b",
    r"\bpaid\s+partnership\b",
    r"\bincludes\s+paid\s+promotion\b",
    r"\buse\s+(?:my\s+)?(?:code|link)\b",
    r"\bdiscount\s+code\b",
    r"\bpromo\s+code\b",
    r"\bcoupon\s+code\b",
    r"\bspecial\s+offer\b",
    r"\bcheck\s+(?:them\s+)?out\s+at\b",
    r"\bsign\s+up\s+(?:with|using)\s+(?:my|the)\s+link\b",
))

BRAND_PATTERNS = (
    re.compile(r"(?:sponsored|brought\s+to\s+you)\s+by\s+([\w\s&'.]+?)(?:\.|,|!|\n|$)", re.IGNORECASE),
    re.compile(r"\bthanks?\s+to\s+([\w\s&'.]+?)\s+for\s+sponsor", re.IGNORECASE),
)
BRAND_MIN_LENGTH = 2
BRAND_MAX_LENGTH = 40

# Network or brand name -> URL pattern
AFFILIATE_PATTERNS = tuple((name, re.compile(pattern, re.IGNORECASE)) for name, pattern in (
    ("Amazon Associates", r"(?:amzn\.to|amazon\.\w+/.*[?&]tag=)"),
    ("ShareASale", r"shareasale\.com"),
    ("Impact Radius", r"(?:impact\.com|goto\.target\.com|pntrs\.com|pntra\.com|pntrac\.com)"),
    ("CJ Affiliate", r"(?:cj\.com|commission-junction|anrdoezrs\.net|jdoqocy\.com|dpbolvw\.net|kqzyfj\.com)"),
    ("Rakuten", r"(?:rakuten\.com|linksynergy\.com)"),
    ("PartnerStack", r"partnerstack\.com"),
    ("Awin", r"(?:awin\.com|awin1\.com)"),
    ("Bitly (tracking)", r"bit\.ly/"),
    ("Linktree", r"linktr\.ee/"),
    ("UTM tracking", r"[?&]utm_(?:source|medium|campaign)="),
    ("Geni.us", r"geni\.us/"),
    ("LTK/RewardStyle", r"(?:liketoknow\.it|rstyle\.me|ltk\.app)"),
    ("Skillshare", r"skillshare\.com/.*\?"),
    ("Squarespace", r"squarespace\.com/\w+"),
    ("NordVPN", r"nordvpn\.com/\w+"),
    ("ExpressVPN", r"expressvpn\.com/\w+"),
    ("Surfshark", r"surfshark\.(?:com|deals)/\w+"),
    ("Audible", r"audible\.com/\w+"),
    ("Honey/PayPal", r"joinhoney\.com"),
    ("Raid Shadow Legends", r"raid\.plarium"),
    ("HelloFresh", r"hellofresh\.com/\w+"),
    ("Ridge Wallet", r"ridge\.com/\w+"),
    ("Manscaped", r"manscaped\.com/\w+"),
    ("BetterHelp", r"betterhelp\.com/\w+"),
    ("Established Titles", r"establishedtitles\.com"),
    ("Athletic Greens/AG1", r"(?:athleticgreens|drinkag1)\.com"),
    ("Casetify", r"casetify\.com/\w+"),
    ("Fiverr", r"fiverr\.com/\w+"),
    ("Canva", r"canva\.com/\w+"),
    ("Monday.com", r"monday\.com/\w+"),
    ("Notion", r"notion\.so/\w+"),
))

PROMO_CODE_PATTERN = re.compile(r"\bcode[:\s]+([A-Z0-9_-]{3,20})\b", re.IGNORECASE)

# Words the promo code pattern picks up that are not codes
GENERIC_WORDS = frozenset({
    "THE", "AND", "FOR", "USE", "GET", "OFF", "OUT", "NEW", "NOW",
    "FREE", "LINK", "SAVE", "BEST", "DEAL", "SALE", "SHOW", "CODE",
    "THIS", "THAT", "WITH", "YOUR", "FROM", "HERE", "BELOW", "CHECK",
})

SPONSORSHIP_RATE_LABELS = (
    (60, "Very High - majority of content is sponsored"),
    (35, "High - frequent sponsored content"),
    (15, "Moderate - regular but balanced"),
    (1, "Low - occasional sponsored content"),
)
NO_SPONSORSHIP_LABEL = "None detected"


def label_sponsorship_rate(rate: int) -> str:
    for threshold, label in SPONSORSHIP_RATE_LABELS:
        if rate >= threshold:
            return label
    return NO_SPONSORSHIP_LABEL


def extract_brand(description: str):
    """Pull a sponsor name out of 'sponsored by X' or 'thanks to X for sponsoring'."""
    for pattern in BRAND_PATTERNS:
        match = pattern.search(description)
        if match:
            brand = match.group(1).strip()
            if BRAND_MIN_LENGTH <= len(brand) <= BRAND_MAX_LENGTH:
                return brand
            return None
    return None


def scan_description(description: str) -> List[SponsorshipSignal]:
    """Return every sponsorship signal in one description, in detection order."""
    lowered = description.lower()
    signals = [
        SponsorshipSignal("disclosure", tag) for tag in DISCLOSURE_HASHTAGS if tag in lowered
    ]

    for pattern in SPONSORSHIP_PHRASES:
        match = pattern.search(description)
        if match:
            signals.append(SponsorshipSignal("phrase", match.group(0).strip()))
            break

    signals.extend(
        SponsorshipSignal("affiliate", name)
        for name, pattern in AFFILIATE_PATTERNS
        if pattern.search(description)
    )

    for match in PROMO_CODE_PATTERN.finditer(description):
        code = match.group(1).upper()
        if code not in GENERIC_WORDS:
            signals.append(SponsorshipSignal("promo_code", code))

    return signals


def detect_sponsorship(videos: Sequence[VideoRecord]) -> SponsorshipReport:
    """
    Scan a channel's videos for sponsorship history.

    Args:
        videos: Normalized videos

    Returns:
        SponsorshipReport; empty input yields the empty report, whose
        has_proper_disclosure is True. Otherwise has_proper_disclosure is True
        only when at least one disclosure tag was found, so a channel with no
        detected sponsorships reports False.
    """
    if not videos:
        return SponsorshipReport.empty()

    sponsored: List[SponsoredVideo] = []
    brand_counts: Dict[str, int] = OrderedDict()
    promo_codes: Dict[str, None] = OrderedDict()
    networks: Dict[str, None] = OrderedDict()
    disclosure_tags = 0
    disclosed_videos = 0

    for video in videos:
        description = video.description or ""
        signals = scan_description(description)
        if not signals:
            continue

        kinds = [s.type for s in signals]
        disclosure_tags += kinds.count("disclosure")
        if "disclosure" in kinds:
            disclosed_videos += 1

        if "phrase" in kinds:
            brand = extract_brand(description)
            if brand:
                brand_counts[brand] = brand_counts.get(brand, 0) + 1

        for signal in signals:
            if signal.type == "affiliate":
                networks[signal.value] = None
                # Brand-specific affiliate links double as sponsor evidence
                brand_counts[signal.value] = brand_counts.get(signal.value, 0) + 1
            elif signal.type == "promo_code":
                promo_codes[signal.value] = None

        sponsored.append(SponsoredVideo(
            video_id=video.video_id,
            title=video.title,
            published_at=to_date_string(video.published_at),
            signals=tuple(signals),
        ))

    scanned = len(videos)
    detected = len(sponsored)
    rate = round_half_up(detected / scanned * 100)

    # sorted() is stable, so ties keep first-seen order
    brands = sorted(brand_counts.items(), key=lambda item: item[1], reverse=True)

    bt.logging.debug(
        f"Sponsorship scan: {detected}/{scanned} videos with signals, "
        f"{len(brands)} brands, {len(promo_codes)} promo codes"
    )

    return SponsorshipReport(
        total_videos_scanned=scanned,
        total_detected=detected,
        sponsorship_rate=rate,
        sponsorship_rate_label=label_sponsorship_rate(rate),
        has_proper_disclosure=disclosure_tags > 0,
        disclosure_rate=round_half_up(disclosed_videos / detected * 100) if detected else 100,
        disclosure_tag_count=disclosure_tags,
        detected_brands=tuple(BrandMention(brand, count) for brand, count in brands),
        promo_codes=tuple(promo_codes),
        affiliate_networks=tuple(networks),
        sponsored_videos=tuple(sponsored),
    )
