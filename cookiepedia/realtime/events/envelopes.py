from __future__ import annotations

from typing import Any

from django.db import models
from django.utils import timezone


class EventKind(models.TextChoices):
    MESSAGE = "MESSAGE"
    MESSAGE_READ = "MESSAGE_READ"
    TYPING = "TYPING"
    NOTIFICATION = "NOTIFICATION"
    USER_STATUS = "USER_STATUS"


class UserStatus(models.TextChoices):
    ONLINE = "online"
    OFFLINE = "offline"


def envelope(kind: EventKind, **payload: Any) -> dict[str, Any]:
    """Build an outbound event: ``{kind, ...payload, timestamp}``."""

    return {
        "kind": str(kind),
        **payload,
        "timestamp": timezone.now().isoformat(),
    }


def status_event(identity: int, status: UserStatus) -> dict[str, Any]:
    return envelope(EventKind.USER_STATUS, userId=identity, status=str(status))
