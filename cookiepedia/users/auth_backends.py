from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend


class EmailOrUsernameBackend(ModelBackend):
    """Log in with either the email address or the username."""

    def authenticate(self, request, username=None, password=None, **kwargs):
        usermodel = get_user_model()
        if username is None:
            username = kwargs.get(usermodel.USERNAME_FIELD) or kwargs.get("email")
        if not username or password is None:
            return None

        lookup = "email__iexact" if "@" in username else "username__iexact"
        try:
            user = usermodel.objects.get(**{lookup: username})
        except usermodel.DoesNotExist:
            # Run the hasher once to keep timing similar for unknown users.
            usermodel().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user

        return None
