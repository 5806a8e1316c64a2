import os
from dotenv import load_dotenv
from pathlib import Path
import bittensor as bt

env_path = Path(__file__).parents[1] / '.env'
load_dotenv(dotenv_path=env_path)

# Cache Configuration
CACHE_ROOT = Path(os.getenv('CREATORSCOPE_CACHE_ROOT', Path(__file__).resolve().parents[3] / "cache"))
CACHE_DIRS = {
    "channel_ids": os.path.join(CACHE_ROOT, "channel_ids"),
}

# Cache expiry times (in seconds)
CHANNEL_ID_CACHE_EXPIRY = 7 * 24 * 60 * 60  # 7 days

# required
YOUTUBE_API_KEY = os.getenv('YOUTUBE_API_KEY', '')

# optional feature flags
ENABLE_SPONSORSHIP_DETECTION = os.getenv('ENABLE_SPONSORSHIP_DETECTION', 'True').lower() == 'true'
ENABLE_AUTHENTICITY_CHECK = os.getenv('ENABLE_AUTHENTICITY_CHECK', 'True').lower() == 'true'
ENABLE_RATE_CARD = os.getenv('ENABLE_RATE_CARD', 'True').lower() == 'true'

# youtube data api
YT_DAILY_QUOTA = 10_000
YT_UNITS_PER_CHANNEL = 4
YT_API_PAGE_SIZE = 50
YT_API_MAX_ATTEMPTS = 3
YT_API_RETRY_WAIT = 0.5  # seconds

# videos fetched per channel
YT_DEFAULT_VIDEOS_PER_CHANNEL = 30
YT_MIN_VIDEOS_PER_CHANNEL = 5
YT_MAX_VIDEOS_PER_CHANNEL = 200

# channel input limits
YT_MAX_CHANNEL_INPUT_LENGTH = 300
YT_MAX_HANDLE_LENGTH = 100

# result shaping
CHANNEL_DESCRIPTION_MAX_LENGTH = 500

# Log out all non-sensitive config variables
bt.logging.info(f"YOUTUBE_API_KEY set: {bool(YOUTUBE_API_KEY)}")
bt.logging.info(f"ENABLE_SPONSORSHIP_DETECTION: {ENABLE_SPONSORSHIP_DETECTION}")
bt.logging.info(f"ENABLE_AUTHENTICITY_CHECK: {ENABLE_AUTHENTICITY_CHECK}")
bt.logging.info(f"ENABLE_RATE_CARD: {ENABLE_RATE_CARD}")
bt.logging.info(f"YT_DAILY_QUOTA: {YT_DAILY_QUOTA}")
bt.logging.info(f"YT_DEFAULT_VIDEOS_PER_CHANNEL: {YT_DEFAULT_VIDEOS_PER_CHANNEL}")
bt.logging.info(f"CACHE_ROOT: {CACHE_ROOT}")
