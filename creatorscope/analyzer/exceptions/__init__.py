"""Custom exceptions for the creator analysis system."""

from .api_errors import (
    ApiAccessDeniedError,
    ApiNotEnabledError,
    BadRequestError,
    EndpointNotFoundError,
    InvalidApiKeyError,
    QuotaExceededError,
    TransientYouTubeError,
    YouTubeApiError,
)
from .evaluation_errors import (
    ChannelNotFoundError,
    EvaluationError,
    MissingApiKeyError,
    NoPublicVideosError,
    NoValidVideosError,
)

__all__ = [
    "EvaluationError",
    "ChannelNotFoundError",
    "NoPublicVideosError",
    "NoValidVideosError",
    "MissingApiKeyError",
    "YouTubeApiError",
    "TransientYouTubeError",
    "QuotaExceededError",
    "ApiNotEnabledError",
    "ApiAccessDeniedError",
    "InvalidApiKeyError",
    "BadRequestError",
    "EndpointNotFoundError",
]
