# slackbot/utils.py

"""
Security Utilities for the Slack App.

The key component is a view decorator that verifies incoming requests really
come from Slack, using Slack's request signing protocol. Only requests that
pass the check reach the interactivity dispatcher.
"""

# Standard library imports
import hashlib
import hmac
import logging
import time
from functools import wraps

# Django imports
from django.http import HttpRequest, HttpResponseForbidden

# Local application imports
from .environment import env

logger = logging.getLogger(__name__)

# Requests older than this many seconds are rejected as possible replays.
MAX_REQUEST_AGE = 60 * 5


def compute_signature(signing_secret: str, timestamp: str, body: bytes) -> str:
    """Returns the `v0=` signature Slack sends in the X-Slack-Signature header."""
    sig_basestring = b"v0:" + timestamp.encode("utf-8") + b":" + body
    return "v0=" + hmac.new(
        key=signing_secret.encode("utf-8"),
        msg=sig_basestring,
        digestmod=hashlib.sha256,
    ).hexdigest()


def slack_verification_required(view_func):
    """
    A Django view decorator to verify that an incoming request is from Slack.

    1.  **Timestamp Check:** `X-Slack-Request-Timestamp` must be within five
        minutes of the current time.
    2.  **HMAC Comparison:** an HMAC-SHA256 of ``v0:{timestamp}:{raw body}``
        keyed with `SLACK_SIGNING_SECRET` must match `X-Slack-Signature`,
        compared in constant time.

    Any failure returns an `HttpResponseForbidden` (403) without calling the view.
    """
    @wraps(view_func)
    def wrapper(request: HttpRequest, *args, **kwargs):
        try:
            slack_signature = request.headers.get("X-Slack-Signature")
            timestamp = request.headers.get("X-Slack-Request-Timestamp")

            if not slack_signature or not timestamp:
                logger.warning("Missing Slack signature or timestamp headers.")
                return HttpResponseForbidden("Missing required Slack headers.")

            if abs(time.time() - int(timestamp)) > MAX_REQUEST_AGE:
                logger.warning("Slack request timestamp is too old.")
                return HttpResponseForbidden("Request timestamp is too old.")

            signing_secret = env("SLACK_SIGNING_SECRET")
            if not signing_secret:
                logger.error("SLACK_SIGNING_SECRET is not configured.")
                return HttpResponseForbidden("Server configuration error.")

            my_signature = compute_signature(signing_secret, timestamp, request.body)
            if not hmac.compare_digest(my_signature, slack_signature):
                logger.warning("Slack signature verification failed. Mismatch.")
                return HttpResponseForbidden("Slack signature verification failed.")

        except (ValueError, TypeError) as e:
            logger.error(f"Error during Slack verification: {e}")
            return HttpResponseForbidden("Invalid request format.")

        return view_func(request, *args, **kwargs)

    return wrapper
