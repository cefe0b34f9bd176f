# slackbot/apps.py

"""
Application configuration for the Slack bot app.

Feature modules register their interactivity handlers with a decorator when
they are imported, so `ready()` imports them once the app registry is loaded.
"""

from django.apps import AppConfig


class SlackbotConfig(AppConfig):
    name = 'slackbot'
    verbose_name = 'SGRC Slack Bot'

    def ready(self):
        # Registers the "count_emoji" callback.
        from . import countmoji  # noqa: F401
