# sgrcbot/settings.py
"""
Django settings for the sgrcbot project.

This file contains the core configuration for the Django host that serves the
Slack bot: application definitions, middleware, logging and the Slack
credentials. Sensitive values are loaded from a .env file or the process
environment so nothing secret lives in the repository.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

# ==============================================================================
# CORE SETTINGS
# ==============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-sgrcbot-development-key')
# The DEBUG flag is loaded as a boolean from an environment variable.
DEBUG = os.getenv('DJANGO_DEBUG', 'True') == 'True'

# The production domain (e.g. the public URL Slack posts to) comes from the environment.
ALLOWED_HOSTS = [
    host for host in (
        "127.0.0.1",
        "localhost",
        os.getenv('PRODUCTION_HOST'),
    ) if host
]


# ==============================================================================
# APPLICATION-SPECIFIC SETTINGS (Loaded from Environment Variables)
# ==============================================================================

SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET")
SGRC_SLACK_BOT_TOKEN = os.getenv("SGRC_SLACK_BOT_TOKEN")


# ==============================================================================
# DJANGO-SPECIFIC CONFIGURATION
# ==============================================================================

# The bot keeps no state between requests, so only the app itself is installed
# and no database is configured.
INSTALLED_APPS = [
    'slackbot.apps.SlackbotConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'sgrcbot.urls'

WSGI_APPLICATION = 'sgrcbot.wsgi.application'

DATABASES = {}


# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Logging Configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': os.getenv('SGRC_LOG_FILE', 'sgrcbot.log'),
            'formatter': 'verbose',
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'slackbot': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': True,
        },
    },
}
