# slackbot/environment.py

"""
Convenience accessor for configuration values.

Values are looked up on the Django settings first (which `sgrcbot.settings`
populates from the environment and the .env file) and then on the raw process
environment, so keys that were never declared in settings are still reachable.
"""

import os
from typing import Optional

from django.conf import settings


def env(name: str) -> Optional[str]:
    """
    Retrieves a configuration value by name.

    Args:
        name: The key of the property being retrieved.

    Returns:
        The value associated with that key, or None if the key isn't set.
    """
    value = getattr(settings, name, None)
    # Only string settings count; DEBUG, INSTALLED_APPS and the like are not properties.
    if isinstance(value, str):
        return value
    return os.getenv(name)
