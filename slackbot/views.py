# slackbot/views.py

"""
HTTP entry points for the Slack bot.

Slack's Interactivity Request URL points at the site root. A POST there carries
an interactivity callback (message shortcuts, button clicks) and a GET is used
as a liveness probe. Both answer with the same small JSON acknowledgment.

REMINDER: the Request URL configured in the Interactivity section of the Slack
app settings must match the deployed host, otherwise Slack keeps posting to the
old one.
"""

# Standard library imports
import json
import logging

# Django imports
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

# Third-party imports
from slack_sdk.errors import SlackApiError

# Local application imports
from .slack import Slack, UnhandledCallbackError
from .utils import slack_verification_required

LOGGER = logging.getLogger(__name__)

ACKNOWLEDGMENT = {"status": "OK"}


def _ok() -> JsonResponse:
    return JsonResponse(ACKNOWLEDGMENT, status=200)


@csrf_exempt
@require_http_methods(["GET", "HEAD", "POST"])
def webhook(request: HttpRequest) -> HttpResponse:
    """Routes the root URL by HTTP method; GET and HEAD are health checks."""
    if request.method == "POST":
        return do_post(request)
    return do_get(request)


@slack_verification_required
def do_post(request: HttpRequest) -> HttpResponse:
    """
    Receives a Slack interactivity callback and dispatches it by callback_id.

    Slack is always acknowledged with a 200 once the payload has been parsed,
    whatever the handler does; failures are logged instead. Only a missing or
    malformed payload is answered with a 400.
    """
    try:
        payload = json.loads(request.POST["payload"])
        callback_id = payload.get("callback_id")
    except (KeyError, ValueError, AttributeError) as e:
        LOGGER.warning(f"Rejected interactivity request with an invalid payload: {e}")
        return JsonResponse({"status": "error", "error": "invalid_payload"}, status=400)

    slack = Slack()
    try:
        slack.handle_interactivity(request.POST, callback_id)
    except UnhandledCallbackError as e:
        LOGGER.warning(f"Unhandled interaction: {e}")
    except SlackApiError as e:
        LOGGER.error(f"Slack API error while handling '{callback_id}': {e.response.get('error')}")
    except Exception as e:
        LOGGER.exception(f"Unexpected error while handling '{callback_id}': {e}")

    return _ok()


def do_get(request: HttpRequest) -> HttpResponse:
    """Liveness probe."""
    return _ok()
