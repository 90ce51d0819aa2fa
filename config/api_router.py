from django.conf import settings
from django.urls import include
from django.urls import path
from rest_framework.routers import DefaultRouter
from rest_framework.routers import SimpleRouter

from cookiepedia.creator_channels.api.views import ChannelViewSet
from cookiepedia.messaging.api.views import ConversationViewSet
from cookiepedia.notifications.api.views import NotificationViewSet
from cookiepedia.reels.api.views import ReelViewSet
from cookiepedia.search.api.views import ChatView
from cookiepedia.users.api.views import UserViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("users", UserViewSet)
router.register("channels", ChannelViewSet)
router.register("conversations", ConversationViewSet, basename="conversations")
router.register("notifications", NotificationViewSet, basename="notifications")
router.register("reels", ReelViewSet, basename="reels")


app_name = "api"
urlpatterns = [
    path("search/", include("cookiepedia.search.api.urls")),
    path("chat/", ChatView.as_view(), name="chat"),
    *router.urls,
]
