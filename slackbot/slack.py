# slackbot/slack.py

"""
Slack Web API client and interactivity dispatcher.

`Slack` wraps a `slack_sdk.WebClient` bound to the bot token and exposes the
handful of Web API calls the bot needs. It also owns the callback registry:
feature modules register a handler for a `callback_id` with the `callback`
decorator, and `Slack.handle_interactivity` routes incoming interactivity
payloads to it.
"""

# Standard library imports
import json
import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

# Third-party imports
from slack_sdk import WebClient
from slack_sdk.web import SlackResponse

# Local application imports
from .environment import env
from .slack_blocks import Block, plain_text

LOGGER = logging.getLogger(__name__)

TOKEN_PROPERTY = "SGRC_SLACK_BOT_TOKEN"

# callback_id -> handler(payload). Populated by the `callback` decorator.
CALLBACK_HANDLERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {}


class UnhandledCallbackError(KeyError):
    """Raised when an interactivity payload names a callback_id with no handler."""

    def __init__(self, callback_id: Optional[str]):
        super().__init__(callback_id)
        self.callback_id = callback_id

    def __str__(self) -> str:
        return f"No handler registered for callback_id '{self.callback_id}'"


def callback(callback_id: str):
    """
    Decorator registering a function as the handler for `callback_id`.

    Usage:
        @callback("count_emoji")
        def receive_message(payload):
            ...
    """
    def decorator(func):
        CALLBACK_HANDLERS[callback_id] = func
        return func
    return decorator


class Slack:
    """A thin client for the Slack Web API, authenticated with the bot token."""

    def __init__(self, token: Optional[str] = None):
        if token is None:
            token = env(TOKEN_PROPERTY) or ""
        if not token:
            LOGGER.warning(f"{TOKEN_PROPERTY} is not configured; Slack API calls will fail.")
        self.token = token
        self.client = WebClient(token=token)

    def _send_request(self, api_method: str, params: Optional[Dict[str, str]] = None,
                      method: str = "POST", body: Optional[Dict[str, Any]] = None) -> SlackResponse:
        """
        Generic function to send a request to the Slack API.

        Args:
            api_method: The Web API method name, e.g. "reactions.get".
            params: Query string parameters.
            method: The HTTP verb to use.
            body: Optional JSON body.

        Returns:
            The `SlackResponse` from the request.

        Raises:
            SlackApiError: If Slack answers with `"ok": false`.
        """
        LOGGER.debug(f"Calling Slack API method '{api_method}' ({method.upper()})")
        return self.client.api_call(
            api_method,
            http_verb=method.upper(),
            params=params,
            json=body,
        )

    def handle_interactivity(self, event: Mapping[str, str], callback_id: Optional[str]) -> Any:
        """
        Routes an interactivity payload to the handler registered for its callback_id.

        Args:
            event: The form data of the interactivity request; its "payload"
                   field holds the JSON document Slack sent.
            callback_id: The callback_id the payload was tagged with.

        Returns:
            Whatever the handler returns.

        Raises:
            UnhandledCallbackError: If no handler is registered for `callback_id`.
        """
        payload = json.loads(event["payload"])
        LOGGER.info(f"Received interactivity payload of type '{payload.get('type')}'")

        handler = CALLBACK_HANDLERS.get(callback_id)
        if handler is None:
            raise UnhandledCallbackError(callback_id)

        LOGGER.info(f"Dispatching callback_id '{callback_id}'")
        return handler(payload)

    def send_message(self, message: Union[str, Block, Iterable[Block]], target_id: str) -> SlackResponse:
        """
        Posts a message to a channel or user.

        Args:
            message: Either plain text, which is wrapped in a single section
                     block, a single Block Kit block, or a sequence of blocks
                     sent as given.
            target_id: A channel ID, or a user ID to send a direct message.
        """
        if isinstance(message, str):
            blocks = [plain_text(message)]
        elif isinstance(message, Mapping):
            # A lone block rather than a sequence of them.
            blocks = [dict(message)]
        else:
            blocks = list(message)

        return self._send_request(
            "chat.postMessage",
            method="POST",
            body={"channel": target_id, "blocks": blocks},
        )

    def get_reactions(self, message: Mapping[str, Any]) -> SlackResponse:
        """
        Retrieves the reactions on a message.

        Args:
            message: An interactivity payload (or any mapping) carrying the
                     message's channel under `channel.id` and its timestamp
                     under `message_ts`.
        """
        return self._send_request(
            "reactions.get",
            params={
                "channel": message["channel"]["id"],
                "timestamp": message["message_ts"],
            },
            method="POST",
        )

    def get_user_by_id(self, user_id: str) -> SlackResponse:
        """Retrieves a user's profile."""
        return self._send_request("users.profile.get", params={"user": user_id}, method="GET")
