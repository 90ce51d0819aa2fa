from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.exceptions import ValidationError
from rest_framework.mixins import RetrieveModelMixin
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from cookiepedia.users import services
from cookiepedia.users.models import User

from .serializers import UserSerializer
from .serializers import UserSummarySerializer
from .serializers import UserUpdateSerializer

SEARCH_LIMIT = 20


@extend_schema_view(
    retrieve=extend_schema(tags=["Users"]),
)
class UserViewSet(RetrieveModelMixin, GenericViewSet):
    serializer_class = UserSerializer
    queryset = User.objects.filter(is_active=True)
    lookup_field = "username"

    def retrieve(self, request, *args, **kwargs):
        user = self.get_object()
        if not user.can_view_profile(request.user):
            msg = "This profile is private."
            raise PermissionDenied(msg)
        serializer = self.get_serializer(user)
        return Response(serializer.data)

    @action(detail=False, methods=["get", "patch"])
    def me(self, request):
        if request.method == "PATCH":
            serializer = UserUpdateSerializer(
                request.user,
                data=request.data,
                partial=True,
            )
            serializer.is_valid(raise_exception=True)
            serializer.save()
        serializer = UserSerializer(request.user, context={"request": request})
        return Response(status=status.HTTP_200_OK, data=serializer.data)

    @extend_schema(
        parameters=[OpenApiParameter("query", str, description="Username or name")],
        responses=UserSummarySerializer(many=True),
    )
    @action(detail=False)
    def search(self, request):
        query = request.query_params.get("query", "").strip()
        if not query:
            return Response([])
        users = (
            self.get_queryset()
            .filter(Q(username__icontains=query) | Q(name__icontains=query))
            .exclude(pk=request.user.pk)
            .order_by("username")[:SEARCH_LIMIT]
        )
        return Response(UserSummarySerializer(users, many=True).data)

    @extend_schema(request=None, responses={204: None})
    @action(detail=True, methods=["post"])
    def follow(self, request, username=None):
        target = self.get_object()
        try:
            services.follow_user(request.user, target)
        except DjangoValidationError as exc:
            raise ValidationError({"detail": exc.messages}) from exc
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={204: None})
    @action(detail=True, methods=["post"])
    def unfollow(self, request, username=None):
        target = self.get_object()
        try:
            services.unfollow_user(request.user, target)
        except DjangoValidationError as exc:
            raise ValidationError({"detail": exc.messages}) from exc
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses=UserSummarySerializer(many=True))
    @action(detail=True)
    def followers(self, request, username=None):
        user = self.get_object()
        return self._paginated_summaries(user.followers.order_by("username"))

    @extend_schema(responses=UserSummarySerializer(many=True))
    @action(detail=True)
    def following(self, request, username=None):
        user = self.get_object()
        return self._paginated_summaries(user.following.order_by("username"))

    def _paginated_summaries(self, queryset):
        page = self.paginate_queryset(queryset)
        serializer = UserSummarySerializer(page, many=True)
        return self.get_paginated_response(serializer.data)
