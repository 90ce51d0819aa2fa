"""
WSGI entrypoint for Cookiepedia.

Only the REST API is reachable through WSGI. The realtime relay needs the
ASGI application in ``config.asgi``; deployments that want websockets run
that one under uvicorn instead.
"""

import os

from django.core.wsgi import get_wsgi_application

# Default to production settings unless BUILD_ENV says otherwise.
if "DJANGO_SETTINGS_MODULE" not in os.environ:
    build_env = os.environ.get("BUILD_ENV", "production").lower()
    default_settings = (
        "config.settings.local"
        if build_env == "local"
        else "config.settings.production"
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)

application = get_wsgi_application()
