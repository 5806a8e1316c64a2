"""
Error translation for YouTube Data API calls.

Every HttpError raised by googleapiclient passes through
``handle_youtube_api_error`` so that callers only ever see the typed
exceptions from ``creatorscope.analyzer.exceptions``.
"""

import json
from typing import Optional, Tuple

import bittensor as bt
from googleapiclient.errors import HttpError

from creatorscope.analyzer.exceptions import (
    ApiAccessDeniedError,
    ApiNotEnabledError,
    BadRequestError,
    EndpointNotFoundError,
    InvalidApiKeyError,
    QuotaExceededError,
    TransientYouTubeError,
)

from .helpers import _format_error

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}
NOT_ENABLED_REASONS = {"forbidden", "accessNotConfigured"}


def extract_error_details(error: HttpError) -> Tuple[Optional[str], str]:
    """
    Pull the first ``reason`` and the top-level message out of an error body.

    Returns:
        (reason, message); reason is None and message empty when the body is
        not the usual JSON error document
    """
    try:
        body = json.loads(error.content.decode("utf-8"))
    except (AttributeError, UnicodeDecodeError, ValueError):
        return None, ""
    if not isinstance(body, dict):
        return None, ""

    payload = body.get("error") or {}
    if not isinstance(payload, dict):
        return None, ""
    errors = payload.get("errors") or []
    reason = errors[0].get("reason") if errors and isinstance(errors[0], dict) else None
    return reason, payload.get("message") or ""


def handle_youtube_api_error(error: Exception, operation: str) -> None:
    """
    Translate a failed API call into a typed exception and raise it.

    Args:
        error: The exception raised by the API call
        operation: Endpoint or operation name, used in logs and messages

    Raises:
        TransientYouTubeError: rate limiting, server errors and connection failures
        QuotaExceededError, ApiNotEnabledError, ApiAccessDeniedError: 403 responses
        InvalidApiKeyError, BadRequestError: 400 responses
        EndpointNotFoundError: 404 responses
    """
    if not isinstance(error, HttpError):
        bt.logging.warning(f"YouTube API {operation} connection error: {_format_error(error)}")
        raise TransientYouTubeError(f"YouTube API request failed: {_format_error(error)}") from error

    status = error.resp.status
    reason, message = extract_error_details(error)

    if status == 403:
        bt.logging.warning(f"YouTube API 403 for {operation} ({reason or 'no reason'})")
        if reason == "quotaExceeded":
            raise QuotaExceededError() from error
        if reason in NOT_ENABLED_REASONS:
            raise ApiNotEnabledError(reason) from error
        raise ApiAccessDeniedError(reason or message) from error

    if status == 400:
        bt.logging.error(f"YouTube API 400 for {operation} ({reason or 'no reason'})")
        if reason == "keyInvalid":
            raise InvalidApiKeyError() from error
        raise BadRequestError(message) from error

    if status == 404:
        bt.logging.warning(f"YouTube API 404 for {operation} - resource not found")
        raise EndpointNotFoundError(operation) from error

    if status in RETRYABLE_STATUS_CODES:
        bt.logging.warning(f"YouTube API {status} for {operation}, will retry")
    else:
        bt.logging.error(f"YouTube API error {status} for {operation}")
    raise TransientYouTubeError(
        f"YouTube API request failed: {status} - {message or _format_error(error)}",
        status_code=status,
        reason=reason or "",
    ) from error
