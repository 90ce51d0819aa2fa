from dj_rest_auth.views import LogoutView
from dj_rest_auth.views import PasswordChangeView
from django.urls import path

from .auth_views import CookieLoginView
from .auth_views import SignupView

# Login is overridden to also set HttpOnly JWT cookies next to the JSON tokens.
urlpatterns = [
    path("signup/", SignupView.as_view(), name="signup"),
    path("login/", CookieLoginView.as_view(), name="dj-rest-auth_login"),
    path("logout/", LogoutView.as_view(), name="dj-rest-auth_logout"),
    path("password/change/", PasswordChangeView.as_view(), name="rest_password_change"),
]
