"""Channel analysis orchestrator - drives the data source and evaluation pipeline per channel."""

from typing import Iterable, List, Optional, Tuple, Union

import bittensor as bt

from .exceptions import (
    ChannelNotFoundError,
    EvaluationError,
    NoPublicVideosError,
    NoValidVideosError,
    YouTubeApiError,
)
from .interfaces import ChannelDataSource
from .models import BatchSummary, ChannelEvaluation, FailedChannelResult
from .pipeline import AnalysisOptions, evaluate_channel
from .youtube.evaluation import normalize_videos

ChannelResult = Union[ChannelEvaluation, FailedChannelResult]


class ChannelAnalysisOrchestrator:
    """Coordinates resolving, fetching, filtering and evaluating channels."""

    def __init__(self, data_source: ChannelDataSource, options: AnalysisOptions = None):
        self.data_source = data_source
        self.options = options or AnalysisOptions()

    def analyze_channel(self, channel_input: str) -> Optional[ChannelEvaluation]:
        """
        Analyze a single channel.

        Returns:
            ChannelEvaluation, or None when the channel is filtered out by the
            subscriber or engagement minimums

        Raises:
            ChannelNotFoundError: input can't be resolved or the channel is private
            NoPublicVideosError: no uploads playlist, or it is empty
            NoValidVideosError: every fetched video failed normalization
            YouTubeApiError: the data source failed
        """
        options = self.options

        bt.logging.info(f"Resolving channel: {channel_input}")
        channel_id = self.data_source.resolve(channel_input)
        if not channel_id:
            raise ChannelNotFoundError(channel_input, "Check the URL, @handle, or channel ID.")

        profile = self.data_source.fetch_channel(channel_id)
        if profile is None:
            raise ChannelNotFoundError(channel_input, f"Channel {channel_id} not found or is private.")

        stats = profile.stats
        if options.min_subscribers > 0 and (
            stats.hidden_subscriber_count or stats.subscriber_count < options.min_subscribers
        ):
            found = "hidden subscriber count" if stats.hidden_subscriber_count else f"{stats.subscriber_count} subscribers"
            bt.logging.info(f"Skipping {profile.title} - {found} (min: {options.min_subscribers})")
            return None

        if not profile.uploads_playlist_id:
            raise NoPublicVideosError(
                profile.title, "Could not find uploads playlist. Channel may have no public videos."
            )

        raw_videos = self.data_source.fetch_recent_videos(profile, options.videos_per_channel)
        if not raw_videos:
            raise NoPublicVideosError(profile.title)

        videos = normalize_videos(raw_videos)
        if not videos:
            raise NoValidVideosError(profile.title)

        evaluation = evaluate_channel(
            profile, videos, options, quota_snapshot=self.data_source.quota_snapshot()
        )

        engagement = evaluation.analytics.engagement_rate
        if options.min_engagement_rate > 0 and engagement < options.min_engagement_rate:
            bt.logging.info(
                f"Skipping {profile.title} - engagement {engagement}% (min: {options.min_engagement_rate}%)"
            )
            return None

        return evaluation

    def analyze_channels(self, channel_inputs: Iterable[str]) -> Tuple[List[ChannelResult], BatchSummary]:
        """
        Analyze channels one by one; a failing channel never stops the batch.

        Returns:
            (results, summary) where results holds a ChannelEvaluation or a
            FailedChannelResult for every channel that was not skipped
        """
        channel_inputs = list(channel_inputs)
        options = self.options
        bt.logging.info(
            f"Starting analysis of {len(channel_inputs)} channels "
            f"({options.videos_per_channel} videos each; sponsorship={options.enable_sponsorship_detection}, "
            f"authenticity={options.enable_authenticity_check}, rate_card={options.enable_rate_card})"
        )

        results: List[ChannelResult] = []
        processed = skipped = failed = 0

        for channel_input in channel_inputs:
            try:
                evaluation = self.analyze_channel(channel_input)
            except (EvaluationError, YouTubeApiError) as e:
                failed += 1
                bt.logging.warning(f"Failed to process \"{channel_input}\": {e}")
                results.append(FailedChannelResult(channel_input=channel_input, error=str(e)))
                continue
            except Exception as e:
                failed += 1
                bt.logging.error(f"Unexpected error processing \"{channel_input}\": {e}")
                results.append(FailedChannelResult(channel_input=channel_input, error=str(e)))
                continue

            if evaluation is None:
                skipped += 1
                continue

            processed += 1
            results.append(evaluation)
            score = evaluation.composite_score
            bt.logging.info(
                f"{evaluation.channel_name} - score {score.score} ({score.grade}), "
                f"tier {score.tier.value}, engagement {evaluation.analytics.engagement_rate}%"
            )

        summary = BatchSummary(
            processed=processed,
            skipped=skipped,
            failed=failed,
            total=len(channel_inputs),
            quota=self.data_source.quota_snapshot(),
        )
        quota_used = summary.quota.quota_used if summary.quota is not None else "n/a"
        bt.logging.info(
            f"Analysis complete: {processed} processed, {skipped} skipped, {failed} failed "
            f"of {len(channel_inputs)} (quota used: {quota_used})"
        )
        return results, summary
