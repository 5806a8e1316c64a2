"""Custom exceptions for channel evaluation errors."""


class EvaluationError(Exception):
    """Base exception for evaluation errors."""
    pass


class ChannelNotFoundError(EvaluationError):
    """Raised when a channel input cannot be resolved or the channel is private."""

    def __init__(self, channel_input: str, reason: str = ""):
        self.channel_input = channel_input
        self.reason = reason
        message = f"Could not resolve channel for \"{channel_input}\""
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NoPublicVideosError(EvaluationError):
    """Raised when a channel has no uploads playlist or it is empty."""

    def __init__(self, channel_name: str, reason: str = "No videos found in uploads playlist."):
        self.channel_name = channel_name
        super().__init__(f"{channel_name}: {reason}")


class NoValidVideosError(EvaluationError):
    """Raised when every fetched video was dropped during normalization."""

    def __init__(self, channel_name: str):
        self.channel_name = channel_name
        super().__init__(f"{channel_name}: All videos had invalid data.")


class MissingApiKeyError(EvaluationError):
    """Raised when no YouTube Data API key is configured."""

    def __init__(self):
        super().__init__(
            "Missing required YouTube Data API v3 key. "
            "Set YOUTUBE_API_KEY or pass --api-key."
        )
