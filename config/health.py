from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

import redis
from django.apps import apps
from django.conf import settings
from django.db import connection
from django.http import JsonResponse

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Callable


def _ping_db() -> None:
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1;")
        cursor.fetchone()


def _ping_redis() -> None:
    url = getattr(settings, "REDIS_URL", None)
    if not url:
        msg = "REDIS_URL not configured"
        raise RuntimeError(msg)
    redis.Redis.from_url(url, socket_timeout=0.5, socket_connect_timeout=0.5).ping()


# Backing services Cookiepedia cannot serve requests without.
REQUIRED_COMPONENTS: tuple[tuple[str, Callable[[], None]], ...] = (
    ("db", _ping_db),
    ("redis", _ping_redis),
)


def run_check(check: Callable[[], None]) -> dict[str, Any]:
    try:
        check()
    except Exception as exc:  # noqa: BLE001 - report the failure in the payload
        return {"ok": False, "error": str(exc)}
    return {"ok": True}


def describe_realtime() -> dict[str, Any]:
    # An idle hub under WSGI is reported, never counted as a failure.
    hub = apps.get_app_config("realtime").hub
    return {
        "sweeper_running": hub.running,
        "connections": len(hub.registry),
    }


def overall_status(components: dict[str, dict[str, Any]]) -> str:
    healthy = [c["ok"] for c in components.values()]
    if all(healthy):
        return "ok"
    return "degraded" if any(healthy) else "down"


def health(request):
    components = {name: run_check(check) for name, check in REQUIRED_COMPONENTS}
    status = overall_status(components)
    return JsonResponse(
        {
            "status": status,
            "components": components,
            "realtime": describe_realtime(),
            "recipe_llm_enabled": bool(
                getattr(settings, "RECIPE_SEARCH_LLM_ENABLED", False),
            ),
        },
        status=200 if status == "ok" else 503,
    )
