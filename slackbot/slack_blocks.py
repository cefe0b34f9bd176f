# slackbot/slack_blocks.py

"""
Slack Block Kit Construction Utilities

This module provides small builder functions that return the JSON structures
for Slack's Block Kit message format. Feature modules compose these into the
`blocks` array passed to `Slack.send_message`.

Every builder returns a fresh dictionary on each call and never mutates its
arguments. Optional fields that are not supplied are left out of the payload
entirely rather than being sent as null, which Slack rejects for most fields.
"""

# Standard library imports
from typing import Any, Dict, Iterable, List, Optional

Block = Dict[str, Any]


def _plain_text_object(text: str, emoji: bool = True) -> Dict[str, Any]:
    return {"type": "plain_text", "text": text, "emoji": emoji}


def plain_text(text: str) -> Block:
    """Returns a section block containing unformatted text."""
    return {"type": "section", "text": {"type": "plain_text", "text": text}}


def markdown(text: str, accessory: Optional[Dict[str, Any]] = None) -> Block:
    """
    Returns a section block containing `mrkdwn` formatted text.

    Args:
        text: The text, using Slack's mrkdwn syntax (*bold*, _italic_, <@U123>).
        accessory: Optional element (button, overflow, image) shown to the
                   right of the text.
    """
    block = {"type": "section", "text": {"type": "mrkdwn", "text": text}}
    if accessory is not None:
        block["accessory"] = accessory
    return block


def header(text: str) -> Block:
    """Returns a header block. Slack renders these in a larger, bold font."""
    return {"type": "header", "text": _plain_text_object(text)}


def divider() -> Block:
    return {"type": "divider"}


def button(text: str, action_id: str, value: Optional[str] = None,
           url: Optional[str] = None, style: Optional[str] = None) -> Dict[str, Any]:
    """
    Returns a single button element, for use in `buttons` or as an accessory.

    Args:
        text: The button label.
        action_id: Identifies the button in the `block_actions` payload Slack
                   sends when it is clicked.
        value: Optional value echoed back in the interaction payload.
        url: Optional link opened in the user's browser on click.
        style: Optional "primary" (green) or "danger" (red).
    """
    element = {
        "type": "button",
        "text": _plain_text_object(text),
        "action_id": action_id,
    }
    if value is not None:
        element["value"] = value
    if url is not None:
        element["url"] = url
    if style is not None:
        element["style"] = style
    return element


def buttons(button_specs: Iterable[Dict[str, Any]], block_id: Optional[str] = None) -> Block:
    """
    Returns an actions block holding a row of buttons.

    Each spec is a dictionary of keyword arguments for `button`, e.g.
    ``{"text": "Approve", "action_id": "approve", "style": "primary"}``.
    """
    block = {
        "type": "actions",
        "elements": [button(**spec) for spec in button_specs],
    }
    if block_id is not None:
        block["block_id"] = block_id
    return block


def overflow(text: str, options: Iterable[Dict[str, str]], action_id: str) -> Block:
    """
    Returns a section block with an overflow ("...") menu as its accessory.

    Args:
        text: The mrkdwn text shown next to the menu.
        options: Dictionaries with a "text" and a "value" key, and optionally
                 a "url" key to open a link when the option is chosen.
        action_id: Identifies the menu in the interaction payload.
    """
    menu_options: List[Dict[str, Any]] = []
    for option in options:
        menu_option = {
            "text": _plain_text_object(option["text"]),
            "value": option["value"],
        }
        if option.get("url") is not None:
            menu_option["url"] = option["url"]
        menu_options.append(menu_option)

    return markdown(text, accessory={
        "type": "overflow",
        "action_id": action_id,
        "options": menu_options,
    })


def context(*texts: str) -> Block:
    """Returns a context block: a line of small, grey mrkdwn text elements."""
    return {
        "type": "context",
        "elements": [{"type": "mrkdwn", "text": text} for text in texts],
    }
