"""Bearer-token handshake for the realtime websocket."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qs

from channels.db import database_sync_to_async
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import TokenError

logger = logging.getLogger(__name__)

# RFC 6455 policy violation, used for every rejected handshake.
AUTH_FAILED_CLOSE_CODE = 1008


def extract_token(scope: dict[str, Any]) -> str | None:
    """Read the JWT from ``?token=`` or, failing that, an Authorization header."""

    query_string = scope.get("query_string", b"")
    if isinstance(query_string, (bytes, bytearray)):
        query_string = query_string.decode(errors="ignore")

    token = parse_qs(str(query_string)).get("token", [None])[0]
    if isinstance(token, str) and token:
        return token

    for name, value in scope.get("headers", []):
        if name.lower() != b"authorization":
            continue
        scheme, _, credentials = value.decode(errors="ignore").partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()

    return None


@database_sync_to_async
def _get_user_from_access_token(token: str):
    jwt_auth = JWTAuthentication()
    validated = jwt_auth.get_validated_token(token)
    return jwt_auth.get_user(validated)


async def authenticate(scope: dict[str, Any]):
    """Return the active user behind the handshake's token, or None."""

    token = extract_token(scope)
    if not token:
        logger.info("Realtime handshake without token")
        return None

    try:
        user = await _get_user_from_access_token(token)
    except TokenError as exc:
        logger.info("Realtime handshake with invalid token: %s", exc)
        return None
    except AuthenticationFailed as exc:  # user not found / inactive, etc.
        logger.info("Realtime handshake rejected: %s", exc)
        return None

    if not getattr(user, "is_active", False):
        return None
    return user
