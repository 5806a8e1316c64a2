# YouTube API layer modules
from .channel import get_channel_data, parse_channel_input, resolve_channel_id
from .clients import initialize_youtube_client
from .data_source import YouTubeDataSource
from .request import YT_API_RETRY_CONFIG, execute_request
from .video import get_recent_video_ids, get_video_data_batch

__all__ = [
    'initialize_youtube_client',
    'execute_request',
    'YT_API_RETRY_CONFIG',
    'parse_channel_input',
    'resolve_channel_id',
    'get_channel_data',
    'get_recent_video_ids',
    'get_video_data_batch',
    'YouTubeDataSource',
]
