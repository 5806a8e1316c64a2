import re
from typing import Optional, Tuple

import bittensor as bt

from creatorscope.analyzer.models import ChannelProfile, ChannelStats
from creatorscope.analyzer.utils.config import YT_MAX_CHANNEL_INPUT_LENGTH, YT_MAX_HANDLE_LENGTH

from .request import execute_request

CHANNEL_ID_PATTERN = re.compile(r'^UC[\w-]{22}$', re.ASCII)
CHANNEL_URL_PATTERN = re.compile(r'youtube\.com/channel/(UC[\w-]{22})', re.ASCII | re.IGNORECASE)
HANDLE_URL_PATTERN = re.compile(r'youtube\.com/@([\w.-]+)', re.ASCII | re.IGNORECASE)
CUSTOM_URL_PATTERN = re.compile(r'youtube\.com/c/([\w.-]+)', re.ASCII | re.IGNORECASE)
HANDLE_PATTERN = re.compile(r'^[\w.-]+$', re.ASCII)
# Characters that can't appear in URLs or handles
UNSAFE_CHARS = re.compile(r'[<>"{}|\\^`\x00-\x1f]')

CHANNEL_PARTS = "snippet,statistics,contentDetails,brandingSettings,topicDetails"


def parse_channel_input(channel_input) -> Optional[Tuple[str, str]]:
    """Classify a raw channel input without calling the API.

    Args:
        channel_input: Channel URL, @handle, bare handle or channel id

    Returns:
        ("id", channel_id), ("handle", handle), or None for unusable input
    """
    if not channel_input or not isinstance(channel_input, str):
        return None
    trimmed = channel_input.strip()
    if not trimmed or len(trimmed) > YT_MAX_CHANNEL_INPUT_LENGTH:
        return None
    if UNSAFE_CHARS.search(trimmed):
        return None

    if CHANNEL_ID_PATTERN.match(trimmed):
        return "id", trimmed

    match = CHANNEL_URL_PATTERN.search(trimmed)
    if match:
        return "id", match.group(1)

    handle = None
    handle_match = HANDLE_URL_PATTERN.search(trimmed)
    custom_match = CUSTOM_URL_PATTERN.search(trimmed)
    if handle_match:
        handle = handle_match.group(1)
    elif custom_match:
        handle = custom_match.group(1)
    elif trimmed.startswith("@"):
        handle = trimmed[1:]
    elif "/" not in trimmed and "." not in trimmed:
        handle = trimmed

    if not handle or len(handle) > YT_MAX_HANDLE_LENGTH or not HANDLE_PATTERN.match(handle):
        return None
    return "handle", handle


def _first_item_id(response):
    items = response.get("items") or []
    return items[0]["id"] if items else None


def resolve_channel_id(youtube, quota, cache, channel_input) -> Optional[str]:
    """Resolve a channel input to a channel id (1-2 units for handles, 0 for ids).

    Handles are looked up with forHandle first, then the legacy forUsername.
    Every handle resolution, including "not found", is cached.
    """
    parsed = parse_channel_input(channel_input)
    if parsed is None:
        bt.logging.debug(f"Rejected channel input: {channel_input!r}")
        return None

    kind, value = parsed
    if kind == "id":
        return value

    hit, channel_id = cache.lookup(value)
    if hit:
        return channel_id

    response = execute_request(
        youtube.channels().list(part="id", forHandle=value), quota, "channels.forHandle"
    )
    channel_id = _first_item_id(response)
    if channel_id is None:
        response = execute_request(
            youtube.channels().list(part="id", forUsername=value), quota, "channels.forUsername"
        )
        channel_id = _first_item_id(response)

    cache.store(value, channel_id)
    bt.logging.debug(f"Resolved handle {value} -> {channel_id}")
    return channel_id


def channel_profile_from_resource(item) -> ChannelProfile:
    """Build a ChannelProfile from a channels.list item."""
    snippet = item.get("snippet") or {}
    content_details = item.get("contentDetails") or {}
    topic_details = item.get("topicDetails") or {}
    thumbnails = snippet.get("thumbnails") or {}
    published_at = snippet.get("publishedAt")

    return ChannelProfile(
        channel_id=item["id"],
        title=snippet.get("title") or "Unknown",
        stats=ChannelStats.from_api(item.get("statistics")),
        handle=snippet.get("customUrl"),
        description=snippet.get("description") or "",
        country=snippet.get("country"),
        joined_date=published_at.split("T")[0] if published_at else None,
        thumbnail_url=(thumbnails.get("medium") or {}).get("url"),
        uploads_playlist_id=(content_details.get("relatedPlaylists") or {}).get("uploads"),
        topic_categories=tuple(topic_details.get("topicCategories") or ()),
    )


def get_channel_data(youtube, quota, channel_id) -> Optional[ChannelProfile]:
    """Fetch channel details, statistics and topics (1 unit)."""
    response = execute_request(
        youtube.channels().list(part=CHANNEL_PARTS, id=channel_id), quota, "channels"
    )
    items = response.get("items") or []
    if not items:
        bt.logging.info(f"Channel {channel_id} not found or is private")
        return None
    return channel_profile_from_resource(items[0])
