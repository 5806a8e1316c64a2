"""
Engagement authenticity checks.

Runs five independent statistical checks over per-video engagement and
deducts points for each threshold crossed. Computed entirely from data the
channel fetch already returned.
"""

from typing import Any, Dict, List, Sequence

import bittensor as bt

from creatorscope.analyzer.models import (
    AuthenticityFlag,
    AuthenticityReport,
    AuthenticityResult,
    ChannelStats,
    InsufficientAuthenticityData,
    VideoRecord,
)
from creatorscope.analyzer.youtube.utils.helpers import (
    coefficient_of_variation,
    format_number,
    round2,
    round_half_up,
)

MIN_VIDEOS = 3
MIN_ELIGIBLE_VIEWS = 100

# Natural channels show a like-to-view CV of roughly 0.3-0.8
NATURAL_LVR_CV_MIN = 0.15
LOW_LVR_CV = 0.20

# Comments per 100 likes
NORMAL_CTL_MIN = 0.5
NORMAL_CTL_MAX = 20.0

MIN_VIEWS_PER_SUB = 5
VIEWS_PER_SUB_MIN_SUBSCRIBERS = 1_000

ZERO_COMMENT_LIKE_THRESHOLD = 50
ZERO_COMMENT_PERCENT_THRESHOLD = 30

FLAT_VIEWS_CV = 0.10
FLAT_VIEWS_MIN_VIDEOS = 5

DEDUCTIONS = {
    "like_consistency_high": 30,
    "like_consistency_medium": 10,
    "comment_to_like_low": 25,
    "comment_to_like_high": 15,
    "views_per_subscriber": 25,
    "zero_comment": 15,
    "flat_views": 15,
}

AUTHENTICITY_LABELS = (
    (85, "High authenticity - no significant red flags"),
    (65, "Moderate authenticity - minor concerns detected"),
    (40, "Low authenticity - multiple red flags present"),
)
LOWEST_AUTHENTICITY_LABEL = "Very low authenticity - strong indicators of inauthentic engagement"


def label_authenticity_score(score: int) -> str:
    for threshold, label in AUTHENTICITY_LABELS:
        if score >= threshold:
            return label
    return LOWEST_AUTHENTICITY_LABEL


def compute_authenticity(videos: Sequence[VideoRecord], channel_stats: ChannelStats) -> AuthenticityResult:
    """
    Score how authentic a channel's engagement looks (0-100, higher is better).

    Args:
        videos: Normalized videos
        channel_stats: Lifetime channel statistics

    Returns:
        AuthenticityReport, or InsufficientAuthenticityData when fewer than
        three videos (or fewer than three with 100+ views) are available
    """
    if len(videos) < MIN_VIDEOS:
        return InsufficientAuthenticityData(
            note="Need at least 3 videos with engagement data for authenticity analysis."
        )

    eligible = [v for v in videos if v.views >= MIN_ELIGIBLE_VIEWS]
    if len(eligible) < MIN_VIDEOS:
        return InsufficientAuthenticityData(
            note="Need at least 3 videos with 100+ views for authenticity analysis."
        )

    subscribers = channel_stats.subscriber_count
    lifetime_views = channel_stats.view_count
    flags: List[AuthenticityFlag] = []
    signals: Dict[str, Dict[str, Any]] = {}
    deductions = 0

    # Like bots apply likes at a fixed rate, which flattens the variance
    ratios = [v.likes / v.views for v in eligible if not v.likes_disabled and v.views > 0]
    if len(ratios) >= MIN_VIDEOS:
        cv = coefficient_of_variation(ratios)
        signals["likeConsistency"] = {
            "coefficientOfVariation": round2(cv),
            "naturalRange": f"{NATURAL_LVR_CV_MIN}-0.8",
        }
        if cv < NATURAL_LVR_CV_MIN:
            flags.append(AuthenticityFlag(
                severity="high",
                signal="Suspiciously consistent like-to-view ratio",
                detail=(
                    f"CV of {format_number(round2(cv))} across {len(ratios)} videos (natural channels show "
                    f"0.15-0.8). May indicate automated like boosting."
                ),
            ))
            deductions += DEDUCTIONS["like_consistency_high"]
        elif cv < LOW_LVR_CV:
            flags.append(AuthenticityFlag(
                severity="medium",
                signal="Unusually consistent like-to-view ratio",
                detail=f"CV of {format_number(round2(cv))} is on the low end of normal.",
            ))
            deductions += DEDUCTIONS["like_consistency_medium"]

    total_likes = sum(v.likes for v in eligible)
    total_comments = sum(v.comments for v in eligible)
    if total_likes > 0:
        ctl = total_comments / total_likes * 100
        signals["commentToLikeRatio"] = {
            "value": round2(ctl),
            "normalRange": f"{NORMAL_CTL_MIN}-{format_number(NORMAL_CTL_MAX)}",
        }
        if ctl < NORMAL_CTL_MIN:
            flags.append(AuthenticityFlag(
                severity="high",
                signal="Abnormally low comment-to-like ratio",
                detail=(
                    f"{format_number(round2(ctl))} comments per 100 likes (normal: {NORMAL_CTL_MIN}-"
                    f"{format_number(NORMAL_CTL_MAX)}). Likes may be inflated without "
                    f"corresponding real engagement."
                ),
            ))
            deductions += DEDUCTIONS["comment_to_like_low"]
        elif ctl > NORMAL_CTL_MAX:
            flags.append(AuthenticityFlag(
                severity="medium",
                signal="Unusually high comment-to-like ratio",
                detail=(
                    f"{format_number(round2(ctl))} comments per 100 likes. "
                    f"May indicate comment bots or engagement pods."
                ),
            ))
            deductions += DEDUCTIONS["comment_to_like_high"]

    # Bought subscribers don't watch videos
    if subscribers > VIEWS_PER_SUB_MIN_SUBSCRIBERS and lifetime_views > 0:
        views_per_sub = lifetime_views / subscribers
        signals["lifetimeViewsPerSubscriber"] = {
            "value": round2(views_per_sub),
            "minimum": MIN_VIEWS_PER_SUB,
        }
        if views_per_sub < MIN_VIEWS_PER_SUB:
            flags.append(AuthenticityFlag(
                severity="high",
                signal="Very low lifetime views per subscriber",
                detail=(
                    f"{format_number(round2(views_per_sub))} views per subscriber (healthy channels "
                    f"typically exceed {MIN_VIEWS_PER_SUB}). May indicate purchased subscribers."
                ),
            ))
            deductions += DEDUCTIONS["views_per_subscriber"]

    zero_comment = [
        v for v in eligible
        if v.comments == 0 and not v.comments_disabled and v.likes > ZERO_COMMENT_LIKE_THRESHOLD
    ]
    if zero_comment:
        pct = round_half_up(len(zero_comment) / len(eligible) * 100)
        signals["zeroCommentHighEngagement"] = {
            "count": len(zero_comment),
            "percentOfVideos": pct,
        }
        if pct >= ZERO_COMMENT_PERCENT_THRESHOLD:
            flags.append(AuthenticityFlag(
                severity="medium",
                signal="Many videos have likes but zero comments",
                detail=(
                    f"{len(zero_comment)}/{len(eligible)} videos ({pct}%) have 50+ likes but "
                    f"0 comments. Real viewers who like videos occasionally comment."
                ),
            ))
            deductions += DEDUCTIONS["zero_comment"]

    # Bought views create unnaturally flat distributions
    view_cv = coefficient_of_variation([v.views for v in eligible])
    signals["viewCountVariation"] = {"coefficientOfVariation": round2(view_cv)}
    if view_cv < FLAT_VIEWS_CV and len(eligible) >= FLAT_VIEWS_MIN_VIDEOS:
        flags.append(AuthenticityFlag(
            severity="medium",
            signal="Unnaturally consistent view counts",
            detail=(
                f"View count CV of {format_number(round2(view_cv))} across {len(eligible)} videos. "
                f"Natural channels show much higher variation."
            ),
        ))
        deductions += DEDUCTIONS["flat_views"]

    score = max(0, 100 - deductions)
    bt.logging.debug(
        f"Authenticity: score={score}, flags={len(flags)}, eligible={len(eligible)}/{len(videos)}"
    )

    return AuthenticityReport(
        score=score,
        label=label_authenticity_score(score),
        flags=tuple(flags),
        signals=signals,
        videos_analyzed=len(eligible),
    )
