"""
Tests for the YouTube Data API layer.

The googleapiclient resource is replaced with a MagicMock so that each
``youtube.<resource>().list(...).execute()`` chain can be scripted.
"""

import json
import os
from unittest.mock import MagicMock, Mock, patch

import httplib2
import pytest
from googleapiclient.errors import HttpError

from creatorscope.analyzer.exceptions import (
    InvalidApiKeyError,
    MissingApiKeyError,
    QuotaExceededError,
    TransientYouTubeError,
)
from creatorscope.analyzer.youtube.api import (
    YouTubeDataSource,
    execute_request,
    get_channel_data,
    get_recent_video_ids,
    get_video_data_batch,
    initialize_youtube_client,
    parse_channel_input,
    resolve_channel_id,
)
from creatorscope.analyzer.youtube.cache import ChannelIdCache
from creatorscope.analyzer.youtube.utils.quota import QuotaTracker

CHANNEL_ID = "UCabcdefghijklmnopqrstuv"


def make_http_error(status, reason=None, message="API error"):
    error = {"code": status, "message": message}
    if reason:
        error["errors"] = [{"reason": reason, "message": message}]
    return HttpError(Mock(status=status, reason="Error"), json.dumps({"error": error}).encode("utf-8"))


def playlist_page(ids, next_token=None):
    page = {"items": [{"contentDetails": {"videoId": video_id}} for video_id in ids]}
    if next_token:
        page["nextPageToken"] = next_token
    return page


@pytest.fixture
def youtube():
    return MagicMock()


@pytest.fixture
def quota():
    return QuotaTracker()


@pytest.fixture
def cache(tmp_path):
    cache = ChannelIdCache(directory=str(tmp_path / "ids"))
    yield cache
    cache.close()


class TestParseChannelInput:

    @pytest.mark.parametrize("channel_input,expected", [
        (CHANNEL_ID, ("id", CHANNEL_ID)),
        (f"  {CHANNEL_ID}  ", ("id", CHANNEL_ID)),
        (f"https://www.youtube.com/channel/{CHANNEL_ID}", ("id", CHANNEL_ID)),
        (f"https://youtube.com/channel/{CHANNEL_ID}/videos", ("id", CHANNEL_ID)),
        ("https://www.youtube.com/@MrBeast", ("handle", "MrBeast")),
        ("https://www.youtube.com/@tech.reviews/videos", ("handle", "tech.reviews")),
        ("https://www.youtube.com/c/SomeCustomName", ("handle", "SomeCustomName")),
        ("@mkbhd", ("handle", "mkbhd")),
        ("mkbhd", ("handle", "mkbhd")),
        ("some_channel-99", ("handle", "some_channel-99")),
    ])
    def test_accepted_inputs(self, channel_input, expected):
        assert parse_channel_input(channel_input) == expected

    @pytest.mark.parametrize("channel_input", [
        None,
        "",
        "   ",
        42,
        "a" * 301,
        "@" + "a" * 101,
        "<script>alert(1)</script>",
        "@bad handle",
        "https://example.com/somebody",
        "not.a.handle",
    ])
    def test_rejected_inputs(self, channel_input):
        assert parse_channel_input(channel_input) is None


class TestResolveChannelId:

    def test_channel_id_needs_no_api_call(self, youtube, quota, cache):
        assert resolve_channel_id(youtube, quota, cache, CHANNEL_ID) == CHANNEL_ID
        youtube.channels.assert_not_called()
        assert quota.quota_used == 0

    def test_unusable_input_returns_none(self, youtube, quota, cache):
        assert resolve_channel_id(youtube, quota, cache, "<bad>") is None
        youtube.channels.assert_not_called()

    def test_handle_resolved_and_cached(self, youtube, quota, cache):
        channels_list = youtube.channels.return_value.list
        channels_list.return_value.execute.return_value = {"items": [{"id": CHANNEL_ID}]}

        assert resolve_channel_id(youtube, quota, cache, "@mkbhd") == CHANNEL_ID
        channels_list.assert_called_once_with(part="id", forHandle="mkbhd")
        assert quota.quota_used == 1

        # Case-insensitive cache hit
        assert resolve_channel_id(youtube, quota, cache, "https://youtube.com/@MKBHD") == CHANNEL_ID
        assert channels_list.call_count == 1
        assert quota.quota_used == 1

    def test_falls_back_to_legacy_username(self, youtube, quota, cache):
        channels_list = youtube.channels.return_value.list
        channels_list.return_value.execute.side_effect = [{"items": []}, {"items": [{"id": CHANNEL_ID}]}]

        assert resolve_channel_id(youtube, quota, cache, "oldusername") == CHANNEL_ID
        channels_list.assert_any_call(part="id", forHandle="oldusername")
        channels_list.assert_any_call(part="id", forUsername="oldusername")
        assert quota.quota_used == 2

    def test_not_found_is_cached(self, youtube, quota, cache):
        channels_list = youtube.channels.return_value.list
        channels_list.return_value.execute.return_value = {}

        assert resolve_channel_id(youtube, quota, cache, "@ghost") is None
        assert resolve_channel_id(youtube, quota, cache, "@ghost") is None
        assert channels_list.call_count == 2
        assert quota.quota_used == 2
        assert cache.lookup("ghost") == (True, None)


class TestChannelData:

    def test_profile_from_channel_resource(self, youtube, quota):
        youtube.channels.return_value.list.return_value.execute.return_value = {"items": [{
            "id": CHANNEL_ID,
            "snippet": {
                "title": "Tech Reviews",
                "customUrl": "@techreviews",
                "description": "Honest reviews.",
                "country": "GB",
                "publishedAt": "2015-09-01T10:00:00Z",
                "thumbnails": {"medium": {"url": "https://yt3.example/medium.jpg"}},
            },
            "statistics": {"subscriberCount": "48200", "viewCount": "9100000", "videoCount": "310",
                           "hiddenSubscriberCount": False},
            "contentDetails": {"relatedPlaylists": {"uploads": "UUabcdefghijklmnopqrstuv"}},
            "topicDetails": {"topicCategories": ["https://en.wikipedia.org/wiki/Technology"]},
        }]}

        profile = get_channel_data(youtube, quota, CHANNEL_ID)

        assert profile.title == "Tech Reviews"
        assert profile.handle == "@techreviews"
        assert profile.joined_date == "2015-09-01"
        assert profile.stats.subscriber_count == 48200
        assert profile.uploads_playlist_id == "UUabcdefghijklmnopqrstuv"
        assert profile.thumbnail_url == "https://yt3.example/medium.jpg"
        assert profile.content_categories == ("Technology",)
        assert quota.quota_used == 1

    def test_missing_channel_returns_none(self, youtube, quota):
        youtube.channels.return_value.list.return_value.execute.return_value = {"items": []}
        assert get_channel_data(youtube, quota, CHANNEL_ID) is None

    def test_hidden_subscribers(self, youtube, quota):
        youtube.channels.return_value.list.return_value.execute.return_value = {"items": [{
            "id": CHANNEL_ID,
            "snippet": {"title": "Quiet"},
            "statistics": {"hiddenSubscriberCount": True, "viewCount": "500"},
        }]}

        profile = get_channel_data(youtube, quota, CHANNEL_ID)

        assert profile.stats.hidden_subscriber_count is True
        assert profile.stats.subscriber_count == 0
        assert profile.uploads_playlist_id is None


class TestVideoFetching:

    def test_paginates_uploads(self, youtube, quota):
        playlist_list = youtube.playlistItems.return_value.list
        playlist_list.return_value.execute.side_effect = [
            playlist_page([f"a{i}" for i in range(50)], next_token="page2"),
            playlist_page([f"b{i}" for i in range(10)]),
        ]

        ids = get_recent_video_ids(youtube, quota, "UUplaylist", max_results=100)

        assert len(ids) == 60
        assert ids[0] == "a0" and ids[-1] == "b9"
        first, second = playlist_list.call_args_list
        assert first.kwargs == {"part": "contentDetails", "playlistId": "UUplaylist", "maxResults": 50}
        assert second.kwargs["pageToken"] == "page2"
        assert quota.quota_used == 2

    def test_stops_at_max_results(self, youtube, quota):
        playlist_list = youtube.playlistItems.return_value.list
        playlist_list.return_value.execute.return_value = playlist_page(
            [f"v{i}" for i in range(30)], next_token="more"
        )

        ids = get_recent_video_ids(youtube, quota, "UUplaylist", max_results=30)

        assert len(ids) == 30
        playlist_list.assert_called_once()
        assert playlist_list.call_args.kwargs["maxResults"] == 30

    def test_empty_playlist(self, youtube, quota):
        youtube.playlistItems.return_value.list.return_value.execute.return_value = {"items": []}
        assert get_recent_video_ids(youtube, quota, "UUplaylist") == []

    def test_batches_video_details(self, youtube, quota):
        videos_list = youtube.videos.return_value.list
        videos_list.return_value.execute.side_effect = lambda: {"items": [{"id": "x"}]}

        video_ids = [f"v{i}" for i in range(120)]
        items = get_video_data_batch(youtube, quota, video_ids)

        assert videos_list.call_count == 3
        batch_sizes = [len(call.kwargs["id"].split(",")) for call in videos_list.call_args_list]
        assert batch_sizes == [50, 50, 20]
        assert videos_list.call_args_list[0].kwargs["part"] == "snippet,statistics,contentDetails"
        assert len(items) == 3
        assert quota.quota_used == 3


class TestExecuteRequest:

    def test_success_records_quota(self, quota):
        request = Mock()
        request.execute.return_value = {"items": []}

        assert execute_request(request, quota, "videos", cost=2) == {"items": []}
        assert quota.quota_used == 2
        assert quota.request_count == 1

    def test_retries_transient_errors(self, quota):
        request = Mock()
        request.execute.side_effect = [make_http_error(500), {"items": [{"id": "ok"}]}]

        assert execute_request(request, quota, "videos") == {"items": [{"id": "ok"}]}
        assert request.execute.call_count == 2
        assert quota.quota_used == 1

    def test_gives_up_after_max_attempts(self, quota):
        request = Mock()
        request.execute.side_effect = make_http_error(503, "backendError")

        with pytest.raises(TransientYouTubeError) as exc_info:
            execute_request(request, quota, "videos")

        assert request.execute.call_count == 3
        assert exc_info.value.status_code == 503
        assert quota.quota_used == 0

    def test_connection_errors_are_retried(self, quota):
        request = Mock()
        request.execute.side_effect = [ConnectionResetError("reset"), {"items": []}]

        assert execute_request(request, quota, "channels") == {"items": []}
        assert request.execute.call_count == 2

    def test_dns_failures_are_retried(self, quota):
        request = Mock()
        request.execute.side_effect = [httplib2.ServerNotFoundError("Unable to find the server"), {"items": []}]

        assert execute_request(request, quota, "channels") == {"items": []}
        assert request.execute.call_count == 2
        assert quota.quota_used == 1

    def test_persistent_transport_errors_become_transient(self, quota):
        request = Mock()
        request.execute.side_effect = httplib2.ServerNotFoundError("Unable to find the server")

        with pytest.raises(TransientYouTubeError):
            execute_request(request, quota, "channels")
        assert request.execute.call_count == 3

    def test_quota_exceeded_is_not_retried(self, quota):
        request = Mock()
        request.execute.side_effect = make_http_error(403, "quotaExceeded")

        with pytest.raises(QuotaExceededError):
            execute_request(request, quota, "channels")
        assert request.execute.call_count == 1

    def test_invalid_key_is_not_retried(self, quota):
        request = Mock()
        request.execute.side_effect = make_http_error(400, "keyInvalid")

        with pytest.raises(InvalidApiKeyError):
            execute_request(request, quota, "channels")
        assert request.execute.call_count == 1


class TestClientInitialization:

    @pytest.mark.parametrize("api_key", [None, "", "   "])
    def test_missing_key(self, api_key):
        with pytest.raises(MissingApiKeyError):
            initialize_youtube_client(api_key)

    def test_builds_data_api_client(self):
        with patch("creatorscope.analyzer.youtube.api.clients.build") as mock_build:
            client = initialize_youtube_client(" secret-key ")

        mock_build.assert_called_once_with("youtube", "v3", developerKey="secret-key", cache_discovery=False)
        assert client is mock_build.return_value

    def test_build_failure(self):
        with patch("creatorscope.analyzer.youtube.api.clients.build", side_effect=ValueError("boom")):
            with pytest.raises(RuntimeError, match="Failed to initialize YouTube client"):
                initialize_youtube_client("secret-key")


class TestYouTubeDataSource:

    def test_fetch_recent_videos(self, youtube, profile_factory, raw_video_factory):
        youtube.playlistItems.return_value.list.return_value.execute.return_value = playlist_page(["v1", "v2"])
        youtube.videos.return_value.list.return_value.execute.return_value = {
            "items": [raw_video_factory("v1"), raw_video_factory("v2")]
        }

        with YouTubeDataSource(client=youtube) as source:
            videos = source.fetch_recent_videos(profile_factory(), 30)
            snapshot = source.quota_snapshot()

        assert [video["id"] for video in videos] == ["v1", "v2"]
        assert snapshot.quota_used == 2
        assert snapshot.request_count == 2
        assert snapshot.estimated_remaining == 9_998

    def test_no_uploads_playlist(self, youtube, profile_factory):
        source = YouTubeDataSource(client=youtube)
        try:
            assert source.fetch_recent_videos(profile_factory(uploads=None), 30) == []
            youtube.playlistItems.assert_not_called()
        finally:
            source.close()

    def test_empty_playlist_skips_video_lookup(self, youtube, profile_factory):
        youtube.playlistItems.return_value.list.return_value.execute.return_value = {"items": []}

        with YouTubeDataSource(client=youtube) as source:
            assert source.fetch_recent_videos(profile_factory(), 30) == []

        youtube.videos.assert_not_called()

    def test_owned_cache_is_removed_on_close(self, youtube):
        source = YouTubeDataSource(client=youtube)
        directory = source.cache.directory
        assert os.path.isdir(directory)

        source.close()

        assert not os.path.exists(directory)

    def test_shared_cache_survives_close(self, youtube, cache):
        with YouTubeDataSource(client=youtube, cache=cache) as source:
            source.resolve(CHANNEL_ID)

        assert os.path.isdir(cache.directory)
        assert len(cache) == 0

    def test_requires_api_key_without_client(self):
        with pytest.raises(MissingApiKeyError):
            YouTubeDataSource(api_key="")
