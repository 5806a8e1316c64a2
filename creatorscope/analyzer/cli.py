import argparse
import json
import sys

import bittensor as bt

from .exceptions import MissingApiKeyError
from .orchestrator import ChannelAnalysisOrchestrator
from .pipeline import AnalysisOptions
from .utils.config import (
    CACHE_DIRS,
    CHANNEL_ID_CACHE_EXPIRY,
    ENABLE_AUTHENTICITY_CHECK,
    ENABLE_RATE_CARD,
    ENABLE_SPONSORSHIP_DETECTION,
    YOUTUBE_API_KEY,
    YT_DEFAULT_VIDEOS_PER_CHANNEL,
)
from .youtube.api import YouTubeDataSource
from .youtube.cache import ChannelIdCache

EXIT_MISSING_API_KEY = 2


def build_parser():
    p = argparse.ArgumentParser(
        prog="creatorscope",
        description="Evaluate YouTube channels for brand-partnership suitability",
    )
    p.add_argument("channels", nargs="+", help="Channel URLs, @handles or channel IDs")
    p.add_argument("--api-key", default=YOUTUBE_API_KEY, help="YouTube Data API v3 key (default: $YOUTUBE_API_KEY)")
    p.add_argument("--videos", type=int, default=YT_DEFAULT_VIDEOS_PER_CHANNEL,
                   help="Recent videos to analyze per channel (5-200)")
    p.add_argument("--min-subscribers", type=int, default=0)
    p.add_argument("--min-engagement-rate", type=float, default=0.0)
    p.add_argument("--no-sponsorship", action="store_true", help="Skip sponsorship detection")
    p.add_argument("--no-authenticity", action="store_true", help="Skip the authenticity check")
    p.add_argument("--no-rate-card", action="store_true", help="Skip rate card generation")
    p.add_argument("--cache-dir", nargs="?", const=CACHE_DIRS["channel_ids"], default=None,
                   help="Persist handle lookups in this directory (default location if no value given)")
    p.add_argument("--debug", action="store_true")
    return p


def options_from_args(args) -> AnalysisOptions:
    return AnalysisOptions(
        videos_per_channel=args.videos,
        enable_sponsorship_detection=ENABLE_SPONSORSHIP_DETECTION and not args.no_sponsorship,
        enable_authenticity_check=ENABLE_AUTHENTICITY_CHECK and not args.no_authenticity,
        enable_rate_card=ENABLE_RATE_CARD and not args.no_rate_card,
        min_subscribers=args.min_subscribers,
        min_engagement_rate=args.min_engagement_rate,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.debug:
        bt.logging.set_debug(True)

    if not args.api_key:
        bt.logging.error(str(MissingApiKeyError()))
        return EXIT_MISSING_API_KEY

    cache = None
    if args.cache_dir:
        cache = ChannelIdCache(directory=args.cache_dir, expire=CHANNEL_ID_CACHE_EXPIRY)

    try:
        with YouTubeDataSource(api_key=args.api_key, cache=cache) as source:
            orchestrator = ChannelAnalysisOrchestrator(source, options_from_args(args))
            results, summary = orchestrator.analyze_channels(args.channels)
    finally:
        if cache is not None:
            cache.close()

    for result in results:
        sys.stdout.write(json.dumps(result.to_dict()) + "\n")
    bt.logging.info(f"Summary: {json.dumps(summary.to_dict())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
