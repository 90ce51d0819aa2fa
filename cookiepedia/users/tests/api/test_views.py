import pytest
from rest_framework import status
from rest_framework.test import APIClient

from cookiepedia.creator_channels.services import create_channel
from cookiepedia.notifications.models import Notification
from cookiepedia.users.models import User

pytestmark = pytest.mark.django_db


class TestMe:
    def test_requires_authentication(self):
        r = APIClient().get("/api/v1/users/me/")
        assert r.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_includes_email(self, api_client, user):
        r = api_client.get("/api/v1/users/me/")
        assert r.status_code == status.HTTP_200_OK
        assert r.data["email"] == user.email
        assert r.data["channel"] is None

    def test_update_profile(self, api_client, user):
        r = api_client.patch(
            "/api/v1/users/me/",
            {
                "bio": "Butter first",
                "social_links": {"instagram": "https://instagram.com/baker"},
                "notification_settings": {"email": False},
            },
            format="json",
        )
        assert r.status_code == status.HTTP_200_OK, r.content
        user.refresh_from_db()
        assert user.bio == "Butter first"
        assert user.notification_settings["email"] is False
        # Other flags survive a partial update.
        assert user.notification_settings["push"] is True

    @pytest.mark.parametrize("field", ["username", "email"])
    def test_username_and_email_are_immutable(self, api_client, field):
        r = api_client.patch(
            "/api/v1/users/me/",
            {field: "changed@example.com"},
            format="json",
        )
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert field in r.data

    def test_unknown_social_platform(self, api_client):
        r = api_client.patch(
            "/api/v1/users/me/",
            {"social_links": {"myspace": "https://myspace.com/baker"}},
            format="json",
        )
        assert r.status_code == status.HTTP_400_BAD_REQUEST


class TestProfile:
    def test_email_hidden_from_others(self, api_client, other_user):
        r = api_client.get(f"/api/v1/users/{other_user.username}/")
        assert r.status_code == status.HTTP_200_OK
        assert "email" not in r.data
        assert r.data["is_following"] is False

    def test_private_profile_is_forbidden(self, api_client, make_user):
        hidden = make_user("hidden", profile_viewable=User.ProfileVisibility.PRIVATE)
        r = api_client.get(f"/api/v1/users/{hidden.username}/")
        assert r.status_code == status.HTTP_403_FORBIDDEN

    def test_followers_only_profile(self, api_client, user, make_user):
        owner = make_user("owner", profile_viewable=User.ProfileVisibility.FOLLOWERS)
        assert api_client.get("/api/v1/users/owner/").status_code == 403

        user.following.add(owner)
        r = api_client.get("/api/v1/users/owner/")
        assert r.status_code == status.HTTP_200_OK
        assert r.data["is_following"] is True


class TestSearch:
    def test_search_matches_username_and_name(self, api_client, make_user):
        make_user("gingerbread")
        make_user("oatmeal", name="Ginger Snap")
        make_user("unrelated")

        r = api_client.get("/api/v1/users/search/", {"query": "ginger"})
        assert r.status_code == status.HTTP_200_OK
        assert [u["username"] for u in r.data] == ["gingerbread", "oatmeal"]

    def test_search_excludes_requester(self, api_client, user):
        r = api_client.get("/api/v1/users/search/", {"query": user.username})
        assert r.data == []

    def test_empty_query(self, api_client):
        r = api_client.get("/api/v1/users/search/")
        assert r.status_code == status.HTTP_200_OK
        assert r.data == []


class TestFollow:
    def test_follow_and_unfollow(self, api_client, user, other_user):
        r = api_client.post(f"/api/v1/users/{other_user.username}/follow/")
        assert r.status_code == status.HTTP_204_NO_CONTENT
        assert user.is_following(other_user)

        notification = Notification.objects.get(recipient=other_user)
        assert notification.notification_type == Notification.Type.FOLLOW
        assert notification.sender == user

        r = api_client.post(f"/api/v1/users/{other_user.username}/unfollow/")
        assert r.status_code == status.HTTP_204_NO_CONTENT
        assert not user.is_following(other_user)

    def test_cannot_follow_self(self, api_client, user):
        r = api_client.post(f"/api/v1/users/{user.username}/follow/")
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data["detail"] == ["You cannot follow yourself"]

    def test_cannot_follow_twice(self, api_client, user, other_user):
        user.following.add(other_user)
        r = api_client.post(f"/api/v1/users/{other_user.username}/follow/")
        assert r.status_code == status.HTTP_400_BAD_REQUEST

    def test_unfollow_without_following(self, api_client, other_user):
        r = api_client.post(f"/api/v1/users/{other_user.username}/unfollow/")
        assert r.status_code == status.HTTP_400_BAD_REQUEST

    def test_follow_subscribes_to_channel(self, api_client, user, other_user):
        channel = create_channel(other_user)
        api_client.post(f"/api/v1/users/{other_user.username}/follow/")
        assert channel.subscribers.filter(pk=user.pk).exists()

        api_client.post(f"/api/v1/users/{other_user.username}/unfollow/")
        assert not channel.subscribers.filter(pk=user.pk).exists()

    def test_followers_and_following_lists(self, api_client, user, other_user):
        user.following.add(other_user)

        r = api_client.get(f"/api/v1/users/{other_user.username}/followers/")
        assert r.status_code == status.HTTP_200_OK
        assert [u["username"] for u in r.data["results"]] == [user.username]

        r = api_client.get(f"/api/v1/users/{user.username}/following/")
        assert [u["username"] for u in r.data["results"]] == [other_user.username]
