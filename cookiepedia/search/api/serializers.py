from rest_framework import serializers

from cookiepedia.search.fuzzy import MIN_QUERY_LENGTH


class SuggestionQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")
    limit = serializers.IntegerField(min_value=1, max_value=20, default=8)

    def validate(self, attrs):
        attrs["q"] = attrs["q"].strip()
        attrs["too_short"] = len(attrs["q"]) < MIN_QUERY_LENGTH
        return attrs


class ChatMessageSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=["user", "assistant"])
    content = serializers.CharField(max_length=4000)


class ChatRequestSerializer(serializers.Serializer):
    messages = ChatMessageSerializer(many=True, allow_empty=False)
