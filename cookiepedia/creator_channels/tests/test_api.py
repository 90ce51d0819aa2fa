import pytest
from rest_framework import status

from cookiepedia.creator_channels.models import Channel
from cookiepedia.creator_channels.services import create_channel

pytestmark = pytest.mark.django_db


def test_create_channel_defaults(api_client, user, other_user):
    other_user.following.add(user)

    r = api_client.post("/api/v1/channels/", {}, format="json")
    assert r.status_code == status.HTTP_201_CREATED, r.content
    channel = Channel.objects.get(owner=user)
    assert channel.name == "baker's Channel"
    assert channel.avatar == user.profile_picture
    # Existing followers become subscribers.
    assert list(channel.subscribers.all()) == [other_user]
    assert channel.subscription_count == 1


def test_one_channel_per_owner(api_client, user):
    create_channel(user, name="Crumbs")
    r = api_client.post("/api/v1/channels/", {"name": "Second"}, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.data["detail"] == ["User already has a channel"]


def test_mine_without_channel(api_client):
    r = api_client.get("/api/v1/channels/mine/")
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_update_mine(api_client, user):
    create_channel(user, name="Crumbs")
    r = api_client.patch(
        "/api/v1/channels/mine/",
        {"description": "Weekly bakes"},
        format="json",
    )
    assert r.status_code == status.HTTP_200_OK, r.content
    assert Channel.objects.get(owner=user).description == "Weekly bakes"


def test_filter_by_owner(api_client, user, other_user):
    create_channel(user, name="Crumbs")
    mine = Channel.objects.get(owner=user)
    create_channel(other_user, name="Sprinkles")

    r = api_client.get("/api/v1/channels/", {"owner": user.pk})
    assert r.status_code == status.HTTP_200_OK
    assert [c["id"] for c in r.data["results"]] == [mine.pk]
