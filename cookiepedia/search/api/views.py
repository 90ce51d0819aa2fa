from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cookiepedia.integrations.llm.client import ChatTurn
from cookiepedia.integrations.llm.client import LLMNotConfiguredError
from cookiepedia.search import catalogue
from cookiepedia.search import services

from .serializers import ChatRequestSerializer
from .serializers import SuggestionQuerySerializer


class SuggestionsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter("q", str, description="Search text, two characters or more"),
            OpenApiParameter("limit", int, description="Maximum suggestions (1-20)"),
        ],
    )
    def get(self, request):
        serializer = SuggestionQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        query = serializer.validated_data["q"]
        if serializer.validated_data["too_short"]:
            return Response(
                {"query": query, "suggestions": [], "total": 0, "message": "Query too short"},
            )

        suggestions, source = services.recipe_suggestions(
            query,
            serializer.validated_data["limit"],
        )
        return Response(
            {
                "query": query,
                "suggestions": suggestions,
                "total": len(suggestions),
                "source": source,
                "timestamp": timezone.now().isoformat(),
            },
        )


class PopularSearchesView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        popular, source = services.popular_searches()
        return Response(
            {
                "popular": popular,
                "source": source,
                "timestamp": timezone.now().isoformat(),
            },
        )


class CategoriesView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({"categories": list(catalogue.CATEGORIES)})


class ChatView(APIView):
    """Relay a chat history to the recipe assistant."""

    @extend_schema(request=ChatRequestSerializer)
    def post(self, request):
        serializer = ChatRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        turns = [ChatTurn(**message) for message in serializer.validated_data["messages"]]

        try:
            reply = services.chat_reply(turns)
        except LLMNotConfiguredError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        if reply is None:
            return Response(
                {"detail": "Failed to process chat message"},
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response({"reply": reply})
