# slackbot/urls.py

"""
URL Configuration for the Slack App Integration.

Slack posts interactivity callbacks to the root URL, and health checks hit the
same URL with GET, so a single route covers both.
"""

from django.urls import path
from . import views

app_name = 'slackbot'

urlpatterns = [
    path("", views.webhook, name="webhook"),
]
