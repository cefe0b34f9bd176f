# sgrcbot/urls.py

"""
Root URL Configuration for the sgrcbot Project.

Slack is configured with the bare site URL as its Interactivity Request URL,
so the whole `slackbot` URL configuration is mounted at the root.
"""

from django.urls import include, path

urlpatterns = [
    path('', include('slackbot.urls')),
]
