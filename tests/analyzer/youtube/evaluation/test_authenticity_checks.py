"""
Unit tests for the engagement authenticity checks.
"""

import unittest
from datetime import datetime, timedelta, timezone

from creatorscope.analyzer.models import ChannelStats, VideoRecord
from creatorscope.analyzer.youtube.evaluation.authenticity import (
    compute_authenticity,
    label_authenticity_score,
)

START = datetime(2024, 3, 1, tzinfo=timezone.utc)

NATURAL_VIEWS = [1000, 2000, 1500, 3000, 800]
NATURAL_LIKES = [30, 120, 45, 240, 20]
NATURAL_COMMENTS = [3, 10, 4, 20, 2]


def make_videos(views, likes, comments, comments_disabled=()):
    return [
        VideoRecord(
            video_id=f"v{i}",
            title=f"Video {i}",
            description="",
            published_at=START - timedelta(days=i * 3),
            views=v,
            likes=l,
            comments=c,
            comments_disabled=i in comments_disabled,
        )
        for i, (v, l, c) in enumerate(zip(views, likes, comments))
    ]


class TestInsufficientData(unittest.TestCase):

    def test_fewer_than_three_videos(self):
        result = compute_authenticity(make_videos([1000, 2000], [10, 20], [1, 2]), ChannelStats())

        self.assertFalse(result.is_computed)
        self.assertIsNone(result.score)
        self.assertEqual(result.status, "insufficient_data")
        self.assertIn("at least 3 videos", result.note)

    def test_fewer_than_three_eligible_videos(self):
        videos = make_videos([1000, 2000, 99, 50, 10], [10, 20, 1, 1, 1], [1, 2, 0, 0, 0])
        result = compute_authenticity(videos, ChannelStats())

        self.assertIsNone(result.score)
        self.assertIn("100+ views", result.note)
        self.assertIsNone(result.to_dict()["score"])


class TestAuthenticitySignals(unittest.TestCase):
    """Test cases for the individual anomaly checks."""

    def test_natural_channel_scores_100(self):
        videos = make_videos(NATURAL_VIEWS, NATURAL_LIKES, NATURAL_COMMENTS)
        result = compute_authenticity(videos, ChannelStats(subscriber_count=500, view_count=100_000))

        self.assertTrue(result.is_computed)
        self.assertEqual(result.score, 100)
        self.assertEqual(result.flags, ())
        self.assertEqual(result.videos_analyzed, 5)
        self.assertTrue(result.label.startswith("High authenticity"))
        self.assertIn("likeConsistency", result.signals)
        self.assertIn("viewCountVariation", result.signals)
        # Views-per-subscriber only applies above 1,000 subscribers
        self.assertNotIn("lifetimeViewsPerSubscriber", result.signals)

    def test_identical_like_ratios_flagged(self):
        n = range(1, 11)
        videos = make_videos([1000 * i for i in n], [50 * i for i in n], [5 * i for i in n])
        result = compute_authenticity(videos, ChannelStats(subscriber_count=5000, view_count=1_000_000))

        self.assertLess(result.score, 100)
        self.assertEqual(result.score, 70)
        self.assertTrue(any("like-to-view ratio" in flag.signal for flag in result.flags))
        self.assertEqual(result.flags[0].severity, "high")
        self.assertEqual(result.videos_analyzed, 10)

    def test_low_comment_to_like_ratio(self):
        videos = make_videos(NATURAL_VIEWS, [100, 250, 120, 400, 60], [1, 1, 1, 1, 0])
        result = compute_authenticity(videos, ChannelStats())

        signals = [flag.signal for flag in result.flags]
        self.assertEqual(signals, ["Abnormally low comment-to-like ratio"])
        self.assertEqual(result.score, 75)
        # One zero-comment video out of five is recorded but stays under the flag threshold
        self.assertEqual(result.signals["zeroCommentHighEngagement"], {"count": 1, "percentOfVideos": 20})

    def test_high_comment_to_like_ratio(self):
        videos = make_videos(NATURAL_VIEWS, NATURAL_LIKES, [10, 30, 15, 60, 8])
        result = compute_authenticity(videos, ChannelStats())

        self.assertEqual([f.signal for f in result.flags], ["Unusually high comment-to-like ratio"])
        self.assertEqual(result.score, 85)

    def test_low_views_per_subscriber(self):
        videos = make_videos(NATURAL_VIEWS, NATURAL_LIKES, NATURAL_COMMENTS)
        result = compute_authenticity(videos, ChannelStats(subscriber_count=100_000, view_count=200_000))

        self.assertEqual(result.score, 75)
        self.assertIn("views per subscriber", result.flags[0].signal)
        self.assertEqual(result.signals["lifetimeViewsPerSubscriber"], {"value": 2.0, "minimum": 5})

    def test_zero_comment_videos(self):
        videos = make_videos(NATURAL_VIEWS, NATURAL_LIKES, [10, 0, 10, 0, 10])
        result = compute_authenticity(videos, ChannelStats())

        self.assertEqual(result.score, 85)
        self.assertEqual(result.flags[0].signal, "Many videos have likes but zero comments")
        self.assertEqual(result.signals["zeroCommentHighEngagement"]["percentOfVideos"], 40)

    def test_zero_comment_check_ignores_disabled_comments(self):
        videos = make_videos(NATURAL_VIEWS, NATURAL_LIKES, [10, 0, 10, 0, 10], comments_disabled={1, 3})
        result = compute_authenticity(videos, ChannelStats())

        self.assertEqual(result.score, 100)
        self.assertNotIn("zeroCommentHighEngagement", result.signals)

    def test_flat_view_counts(self):
        videos = make_videos([1000, 1010, 990, 1005, 995], [30, 60, 45, 80, 20], [3, 5, 4, 8, 2])
        result = compute_authenticity(videos, ChannelStats())

        self.assertEqual([f.signal for f in result.flags], ["Unnaturally consistent view counts"])
        self.assertEqual(result.score, 85)

    def test_score_never_negative(self):
        videos = make_videos([1000] * 5, [100] * 5, [0] * 5)
        result = compute_authenticity(videos, ChannelStats(subscriber_count=1_000_000, view_count=10))

        self.assertGreaterEqual(result.score, 0)
        self.assertEqual(result.label, label_authenticity_score(result.score))

    def test_idempotent(self):
        videos = make_videos(NATURAL_VIEWS, NATURAL_LIKES, NATURAL_COMMENTS)
        stats = ChannelStats(subscriber_count=2000, view_count=50_000)
        self.assertEqual(compute_authenticity(videos, stats), compute_authenticity(videos, stats))


class TestAuthenticityLabels(unittest.TestCase):

    def test_label_thresholds(self):
        self.assertTrue(label_authenticity_score(85).startswith("High"))
        self.assertTrue(label_authenticity_score(84).startswith("Moderate"))
        self.assertTrue(label_authenticity_score(65).startswith("Moderate"))
        self.assertTrue(label_authenticity_score(40).startswith("Low"))
        self.assertTrue(label_authenticity_score(39).startswith("Very low"))


if __name__ == '__main__':
    unittest.main()
