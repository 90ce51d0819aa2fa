from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from datetime import timedelta

from dj_rest_auth.views import LoginView
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from .serializers import RegisterSerializer
from .serializers import UserSerializer


def _set_cookie(
    response: Response,
    name: str,
    value: str,
    max_age: int | None,
) -> None:
    if not value:
        return
    cookie_kwargs = {
        "httponly": True,
        "secure": getattr(settings, "JWT_AUTH_COOKIE_SECURE", not settings.DEBUG),
        "samesite": getattr(settings, "JWT_AUTH_COOKIE_SAMESITE", "Lax"),
        "path": "/",
    }
    if max_age is not None:
        cookie_kwargs["max_age"] = max_age
    response.set_cookie(name, value, **cookie_kwargs)


def set_jwt_cookies(
    response: Response, access: str | None, refresh: str | None
) -> None:
    access_lifetime: timedelta = settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]
    refresh_lifetime: timedelta = settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"]

    access_cookie = getattr(settings, "JWT_AUTH_COOKIE", "access_token")
    refresh_cookie = getattr(settings, "JWT_AUTH_REFRESH_COOKIE", "refresh_token")

    if access:
        _set_cookie(
            response, access_cookie, access, int(access_lifetime.total_seconds())
        )
    if refresh:
        _set_cookie(
            response, refresh_cookie, refresh, int(refresh_lifetime.total_seconds())
        )


class CookieLoginView(LoginView):
    """Login that returns the JWT pair and user, and mirrors the tokens in cookies.

    Browser clients rely on the cookies; the websocket client needs the access
    token itself for the ``?token=`` handshake.
    """

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        response: Response = super().post(request, *args, **kwargs)
        if isinstance(response.data, dict):
            set_jwt_cookies(
                response,
                response.data.get("access"),
                response.data.get("refresh"),
            )
        return response


@extend_schema(tags=["Authentication"], responses={201: UserSerializer})
class SignupView(GenericAPIView):
    serializer_class = RegisterSerializer
    permission_classes = [AllowAny]
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        refresh = RefreshToken.for_user(user)
        access = str(refresh.access_token)
        response = Response(
            {
                "access": access,
                "refresh": str(refresh),
                "user": UserSerializer(user, context={"request": request}).data,
            },
            status=status.HTTP_201_CREATED,
        )
        set_jwt_cookies(response, access, str(refresh))
        return response
