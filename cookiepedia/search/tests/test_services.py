from unittest import mock

import pytest
from django.core.cache import cache

from cookiepedia.integrations.llm.client import ChatTurn
from cookiepedia.integrations.llm.client import LLMNotConfiguredError
from cookiepedia.search import services

CLIENT_FACTORY = "cookiepedia.search.services.get_llm_client_from_settings"


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


def test_suggestions_without_llm_use_local_search():
    suggestions, source = services.recipe_suggestions("lemon", 5)
    assert source == services.SOURCE_LOCAL
    assert suggestions
    assert len(suggestions) <= 5
    assert {s["name"] for s in suggestions[:2]} == {
        "Lemon & Lavender Shortbread",
        "Lemon Bars",
    }


def test_suggestions_from_llm_are_cleaned():
    client = mock.Mock()
    client.generate_json.return_value = [
        {"name": "Pumpkin Cookies", "ingredients": "pumpkin"},
        "not an object",
        {"name": "Maple Bars", "rating": 4.9, "tags": ["fall"]},
    ]
    with mock.patch(CLIENT_FACTORY, return_value=client):
        suggestions, source = services.recipe_suggestions("  autumn  ", 8)

    assert source == services.SOURCE_GEMINI
    assert [s["name"] for s in suggestions] == ["Pumpkin Cookies", "Maple Bars"]
    assert suggestions[0]["ingredients"] == []
    assert suggestions[0]["difficulty"] == "medium"
    assert suggestions[1]["rating"] == 4.9
    assert "autumn" in client.generate_json.call_args.args[0]


def test_suggestions_fall_back_when_llm_fails():
    client = mock.Mock()
    client.generate_json.return_value = None
    with mock.patch(CLIENT_FACTORY, return_value=client):
        suggestions, source = services.recipe_suggestions("brownies", 8)
    assert source == services.SOURCE_FALLBACK
    assert suggestions[0]["name"] == "Double Chocolate Brownies"


def test_popular_searches_local_is_cached():
    popular, source = services.popular_searches()
    assert source == services.SOURCE_LOCAL
    assert len(popular) == services.POPULAR_LIMIT
    assert cache.get(services.POPULAR_CACHE_KEY) == {
        "popular": popular,
        "source": source,
    }


def test_popular_searches_from_llm_are_cached():
    client = mock.Mock()
    client.generate_json.return_value = ["brownies", 3, "macarons"]
    with mock.patch(CLIENT_FACTORY, return_value=client):
        assert services.popular_searches() == (
            ["brownies", "macarons"],
            services.SOURCE_GEMINI,
        )
        services.popular_searches()
    client.generate_json.assert_called_once()


def test_popular_searches_fallback_is_not_cached():
    client = mock.Mock()
    client.generate_json.return_value = {"unexpected": "shape"}
    with mock.patch(CLIENT_FACTORY, return_value=client):
        popular, source = services.popular_searches()
        services.popular_searches()
    assert source == services.SOURCE_FALLBACK
    assert popular
    assert client.generate_json.call_count == 2
    assert cache.get(services.POPULAR_CACHE_KEY) is None


def test_chat_reply_requires_configured_llm():
    with pytest.raises(LLMNotConfiguredError):
        services.chat_reply([ChatTurn(role="user", content="hi")])


def test_chat_reply_passes_history():
    client = mock.Mock()
    client.chat.return_value = "Chill the dough."
    turns = [ChatTurn(role="user", content="Why do my cookies spread?")]
    with mock.patch(CLIENT_FACTORY, return_value=client):
        assert services.chat_reply(turns) == "Chill the dough."
    assert client.chat.call_args.args[0] == turns
    assert client.chat.call_args.kwargs["system"]
