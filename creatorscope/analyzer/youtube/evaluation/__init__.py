from .analytics import compute_analytics, calculate_posting_consistency
from .authenticity import compute_authenticity
from .data_processing import normalize_video, normalize_videos, parse_duration
from .partnership import synthesize_partnership_insights
from .rate_card import generate_rate_card
from .scoring import compute_composite_score, score_to_grade
from .sponsorship import detect_sponsorship
from .tiers import classify_tier

__all__ = [
    "compute_analytics",
    "calculate_posting_consistency",
    "compute_authenticity",
    "normalize_video",
    "normalize_videos",
    "parse_duration",
    "synthesize_partnership_insights",
    "generate_rate_card",
    "compute_composite_score",
    "score_to_grade",
    "detect_sponsorship",
    "classify_tier",
]
