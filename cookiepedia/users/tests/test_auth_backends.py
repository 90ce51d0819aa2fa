import pytest
from django.contrib.auth import get_user_model

from cookiepedia.users.auth_backends import EmailOrUsernameBackend

pytestmark = pytest.mark.django_db
User = get_user_model()


class TestEmailOrUsernameBackend:
    def setup_method(self):
        self.backend = EmailOrUsernameBackend()
        self.password = "Sahm1232"  # noqa: S105
        self.user = User.objects.create_user(
            username="cookiemonster",
            email="monster@example.com",
            password=self.password,
        )

    def test_authenticate_with_username(self):
        user = self.backend.authenticate(
            None,
            username="cookiemonster",
            password=self.password,
        )
        assert user == self.user

    def test_username_lookup_is_case_insensitive(self):
        user = self.backend.authenticate(
            None,
            username="CookieMonster",
            password=self.password,
        )
        assert user == self.user

    def test_authenticate_with_email(self):
        user = self.backend.authenticate(
            None,
            username="Monster@Example.com",
            password=self.password,
        )
        assert user == self.user

    def test_authenticate_with_email_keyword(self):
        user = self.backend.authenticate(
            None,
            email="monster@example.com",
            password=self.password,
        )
        assert user == self.user

    def test_unknown_identifier(self):
        assert (
            self.backend.authenticate(None, username="nobody", password=self.password)
            is None
        )
        assert (
            self.backend.authenticate(
                None,
                username="nobody@example.com",
                password=self.password,
            )
            is None
        )

    def test_wrong_password(self):
        user = self.backend.authenticate(
            None,
            username="cookiemonster",
            password="wrongpass",  # noqa: S106
        )
        assert user is None

    def test_inactive_user_is_rejected(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])
        user = self.backend.authenticate(
            None,
            username="cookiemonster",
            password=self.password,
        )
        assert user is None
