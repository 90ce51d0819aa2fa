import pytest
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db
User = get_user_model()


def test_signup_returns_tokens_and_sets_cookies():
    client = APIClient()
    r = client.post(
        "/api/v1/auth/signup/",
        {
            "username": "newbaker",
            "email": "NewBaker@Example.com",
            "name": "New Baker",
            "password": "Sh0rtbread!Dough",
        },
        format="json",
    )
    assert r.status_code == status.HTTP_201_CREATED, r.content
    assert r.data["access"]
    assert r.data["refresh"]
    assert r.data["user"]["username"] == "newbaker"
    assert "access_token" in r.cookies
    assert r.cookies["access_token"]["httponly"]
    assert User.objects.get(username="newbaker").email == "newbaker@example.com"


def test_signup_rejects_duplicate_email(user):
    client = APIClient()
    r = client.post(
        "/api/v1/auth/signup/",
        {
            "username": "someoneelse",
            "email": user.email.upper(),
            "password": "Sh0rtbread!Dough",
        },
        format="json",
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "email" in r.data


def test_signup_rejects_invalid_username():
    client = APIClient()
    r = client.post(
        "/api/v1/auth/signup/",
        {
            "username": "no spaces!",
            "email": "spaces@example.com",
            "password": "Sh0rtbread!Dough",
        },
        format="json",
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "username" in r.data


def test_login_with_email_sets_cookies(user):
    client = APIClient()
    r = client.post(
        "/api/v1/auth/login/",
        {"username": user.email, "password": "CookieDough!123"},
        format="json",
    )
    assert r.status_code == status.HTTP_200_OK, r.content
    assert "access_token" in r.cookies
    assert "refresh_token" in r.cookies


def test_login_with_wrong_password(user):
    client = APIClient()
    r = client.post(
        "/api/v1/auth/login/",
        {"username": user.username, "password": "nope"},
        format="json",
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST
