import pytest
from rest_framework.test import APIClient

from cookiepedia.users.models import User

PASSWORD = "CookieDough!123"  # noqa: S105


@pytest.fixture
def make_user(db):
    def _make_user(username: str, **extra) -> User:
        return User.objects.create_user(
            username=username,
            email=f"{username}@example.com",
            password=PASSWORD,
            **extra,
        )

    return _make_user


@pytest.fixture
def user(make_user) -> User:
    return make_user("baker")


@pytest.fixture
def other_user(make_user) -> User:
    return make_user("taster")


@pytest.fixture
def api_client(user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user)
    return client
