"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import TEMPLATES
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="w3RZk0T1vN8sHq5yLbE2uJx7cGm4AaP9dFo6iKz0rXt3eWl8nYs1hBv5gQj2pMc7",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"

# DATABASES
# ------------------------------------------------------------------------------
# Override with DATABASE_URL to run the suite against Postgres.
DATABASES = {
    "default": env.db("DATABASE_URL", default="sqlite:///:memory:"),
}

# PASSWORDS
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#password-hashers
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# CACHES
# ------------------------------------------------------------------------------
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "",
    },
}

# EMAIL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#email-backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# DEBUGGING FOR TEMPLATES
# ------------------------------------------------------------------------------
TEMPLATES[0]["OPTIONS"]["debug"] = True  # type: ignore[index]

# MEDIA
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#media-url
MEDIA_URL = "http://media.testserver/"

# Your stuff...
# ------------------------------------------------------------------------------
# The LLM is never called from the test suite unless a test opts in.
RECIPE_SEARCH_LLM_ENABLED = False
GEMINI_API_KEY = None
REALTIME_SWEEP_INTERVAL = 30.0
REALTIME_ENFORCE_PARTICIPANTS = False
JWT_AUTH_COOKIE_SECURE = False
