import httplib2
from googleapiclient.errors import HttpError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from creatorscope.analyzer.exceptions import TransientYouTubeError
from creatorscope.analyzer.utils.config import YT_API_MAX_ATTEMPTS, YT_API_RETRY_WAIT

from ..utils.error_handlers import handle_youtube_api_error

# Retry configuration for YouTube API calls; only transient failures are retried
YT_API_RETRY_CONFIG = {
    'stop': stop_after_attempt(YT_API_MAX_ATTEMPTS),
    'wait': wait_fixed(YT_API_RETRY_WAIT),
    'retry': retry_if_exception_type(TransientYouTubeError),
    'reraise': True,
}


@retry(**YT_API_RETRY_CONFIG)
def execute_request(request, quota, operation, cost=1):
    """Execute a prepared API request, recording quota on success.

    Args:
        request: googleapiclient HttpRequest
        quota: QuotaTracker charged for the call
        operation: Endpoint name used in logs and error messages
        cost: Quota units the call consumes

    Returns:
        dict: Parsed response body
    """
    try:
        response = request.execute()
    except (HttpError, httplib2.HttpLib2Error, OSError) as e:
        handle_youtube_api_error(e, operation)
    quota.record(cost)
    return response
