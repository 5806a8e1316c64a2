from googleapiclient.discovery import build

from creatorscope.analyzer.exceptions import MissingApiKeyError

from ..utils.helpers import _format_error


def initialize_youtube_client(api_key):
    """Initialize a YouTube Data API v3 client.

    Args:
        api_key: YouTube Data API key

    Returns:
        googleapiclient resource for the YouTube Data API

    Raises:
        MissingApiKeyError: If no key was provided
        RuntimeError: If client construction fails
    """
    if not api_key or not isinstance(api_key, str) or not api_key.strip():
        raise MissingApiKeyError()
    try:
        return build("youtube", "v3", developerKey=api_key.strip(), cache_discovery=False)
    except Exception as e:
        raise RuntimeError(f"Failed to initialize YouTube client: {_format_error(e)}") from e
