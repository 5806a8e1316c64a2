from typing import Any, Dict, List

import bittensor as bt

from creatorscope.analyzer.utils.config import YT_API_PAGE_SIZE

from .request import execute_request

VIDEO_PARTS = "snippet,statistics,contentDetails"


def get_recent_video_ids(youtube, quota, uploads_playlist_id, max_results=30) -> List[str]:
    """Return up to ``max_results`` video IDs from an uploads playlist (1 unit per page)."""
    video_ids = []
    page_token = None

    while len(video_ids) < max_results:
        per_page = min(YT_API_PAGE_SIZE, max_results - len(video_ids))
        params = {
            "part": "contentDetails",
            "playlistId": uploads_playlist_id,
            "maxResults": per_page,
        }
        if page_token:
            params["pageToken"] = page_token
        response = execute_request(youtube.playlistItems().list(**params), quota, "playlistItems")

        items = response.get("items") or []
        if not items:
            break
        video_ids.extend(item["contentDetails"]["videoId"] for item in items)

        page_token = response.get("nextPageToken")
        if not page_token:
            break

    bt.logging.debug(f"Found {len(video_ids)} uploads in playlist {uploads_playlist_id}")
    return video_ids[:max_results]


def get_video_data_batch(youtube, quota, video_ids) -> List[Dict[str, Any]]:
    """Fetch full video resources in batches of 50 (1 unit per batch)."""
    results = []
    for start in range(0, len(video_ids), YT_API_PAGE_SIZE):
        batch = video_ids[start:start + YT_API_PAGE_SIZE]
        response = execute_request(
            youtube.videos().list(part=VIDEO_PARTS, id=",".join(batch)), quota, "videos"
        )
        results.extend(response.get("items") or [])
    return results
