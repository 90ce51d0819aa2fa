from django.core.exceptions import ValidationError
from django.db import transaction

from .models import Channel


@transaction.atomic
def create_channel(owner, *, name: str = "", description: str = "") -> Channel:
    """Open the owner's channel. Existing followers become its subscribers."""

    if Channel.objects.filter(owner=owner).exists():
        msg = "User already has a channel"
        raise ValidationError(msg, code="channel_exists")

    channel = Channel.objects.create(
        owner=owner,
        name=name or f"{owner.username}'s Channel",
        description=description,
        avatar=owner.profile_picture,
    )
    channel.subscribers.set(owner.followers.all())
    return channel
