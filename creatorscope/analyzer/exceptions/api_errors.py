"""Custom exceptions for YouTube Data API failures."""


class YouTubeApiError(Exception):
    """Base exception for YouTube Data API errors."""

    def __init__(self, message: str, status_code: int = None, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class TransientYouTubeError(YouTubeApiError):
    """Raised for failures worth retrying (rate limits, 5xx, dropped connections)."""
    pass


class QuotaExceededError(YouTubeApiError):
    """Raised when the daily quota of the API key is used up."""

    def __init__(self):
        super().__init__(
            "YouTube API daily quota exceeded (10,000 units). "
            "Try again tomorrow or use a different API key.",
            status_code=403,
            reason="quotaExceeded",
        )


class ApiNotEnabledError(YouTubeApiError):
    """Raised when the YouTube Data API v3 is not enabled for the key."""

    def __init__(self, reason: str = "forbidden"):
        super().__init__(
            "YouTube Data API v3 is not enabled for this key. "
            "Enable it at https://console.cloud.google.com/apis/library/youtube.googleapis.com",
            status_code=403,
            reason=reason,
        )


class ApiAccessDeniedError(YouTubeApiError):
    """Raised for any other 403 response."""

    def __init__(self, reason: str = ""):
        super().__init__(
            f"API access denied: {reason or 'unknown reason'}",
            status_code=403,
            reason=reason,
        )


class InvalidApiKeyError(YouTubeApiError):
    """Raised when the API key is rejected."""

    def __init__(self):
        super().__init__("YouTube API key is invalid.", status_code=400, reason="keyInvalid")


class BadRequestError(YouTubeApiError):
    """Raised for malformed request parameters."""

    def __init__(self, detail: str = ""):
        super().__init__(
            f"Bad request: {detail or 'invalid parameters'}",
            status_code=400,
            reason="badRequest",
        )


class EndpointNotFoundError(YouTubeApiError):
    """Raised when the API answers 404 for an endpoint."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Endpoint not found: {endpoint}", status_code=404, reason="notFound")
