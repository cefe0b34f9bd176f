# slackbot/countmoji.py

"""
CountMoji: tallies the emoji reactions on a message.

Users trigger it from the "Count emoji" message shortcut, which Slack delivers
as an interactivity payload tagged with the `count_emoji` callback_id. The bot
reads the reactions on the selected message and sends the requester a direct
message with the totals, most popular first.
"""

# Standard library imports
import logging
from typing import Any, Dict, Iterable, List, Tuple

# Local application imports
from . import slack_blocks
from .slack import Slack, callback

LOGGER = logging.getLogger(__name__)


def count_reactions(reactions: Iterable[Dict[str, Any]]) -> List[Tuple[str, int]]:
    """
    Turns a `reactions.get` reaction list into (emoji name, count) pairs.

    The result is ordered by count, highest first, with ties broken
    alphabetically so the summary is stable between runs.
    """
    tallies = [(reaction["name"], int(reaction.get("count", 0))) for reaction in reactions]
    return sorted(tallies, key=lambda tally: (-tally[1], tally[0]))


def build_summary_blocks(tallies: List[Tuple[str, int]], requester_name: str) -> List[Dict[str, Any]]:
    """Builds the Block Kit message summarising the reaction counts."""
    blocks = [slack_blocks.header("Emoji count")]

    if not tallies:
        blocks.append(slack_blocks.plain_text("There are no reactions on this message yet."))
        return blocks

    total = sum(count for _, count in tallies)
    lines = "\n".join(f":{name}: *{count}*" for name, count in tallies)
    blocks.extend([
        slack_blocks.markdown(lines),
        slack_blocks.divider(),
        slack_blocks.context(f"{total} reactions in total", f"Requested by {requester_name}"),
    ])
    return blocks


def _display_name(slack: Slack, user_id: str) -> str:
    profile = slack.get_user_by_id(user_id).get("profile") or {}
    return profile.get("display_name") or profile.get("real_name") or user_id


@callback("count_emoji")
def receive_message(payload: Dict[str, Any]):
    """Handles the `count_emoji` message shortcut."""
    slack = Slack()
    user_id = payload["user"]["id"]

    response = slack.get_reactions(payload)
    reactions = (response.get("message") or {}).get("reactions", [])
    tallies = count_reactions(reactions)
    LOGGER.info(f"Counted {len(tallies)} distinct reactions on message {payload['message_ts']} for {user_id}")

    blocks = build_summary_blocks(tallies, _display_name(slack, user_id))
    return slack.send_message(blocks, user_id)
