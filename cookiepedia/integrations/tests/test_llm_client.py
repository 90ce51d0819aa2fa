import io
import json
from unittest import mock

from django.test import override_settings

from cookiepedia.integrations.llm.client import ChatTurn
from cookiepedia.integrations.llm.client import GeminiClient
from cookiepedia.integrations.llm.client import LLMConfig
from cookiepedia.integrations.llm.client import get_llm_client_from_settings


def _response(text: str):
    body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    resp = mock.MagicMock()
    resp.__enter__.return_value = io.BytesIO(json.dumps(body).encode())
    return resp


def test_factory_disabled_by_default():
    assert get_llm_client_from_settings() is None


@override_settings(RECIPE_SEARCH_LLM_ENABLED=True, GEMINI_API_KEY=None)
def test_factory_without_key():
    assert get_llm_client_from_settings() is None


@override_settings(RECIPE_SEARCH_LLM_ENABLED=True, GEMINI_API_KEY="k", LLM_PROVIDER="other")
def test_factory_unknown_provider():
    assert get_llm_client_from_settings() is None


@override_settings(RECIPE_SEARCH_LLM_ENABLED=True, GEMINI_API_KEY="k")
def test_factory_builds_gemini_client():
    client = get_llm_client_from_settings()
    assert isinstance(client, GeminiClient)
    assert client.cfg.api_key == "k"


def test_generate_json_strips_code_fence():
    client = GeminiClient(LLMConfig(api_key="k"))
    with mock.patch(
        "urllib.request.urlopen",
        return_value=_response('```json\n["a", "b"]\n```'),
    ) as urlopen:
        assert client.generate_json("prompt") == ["a", "b"]
    request = urlopen.call_args.args[0]
    payload = json.loads(request.data)
    assert payload["generationConfig"]["responseMimeType"] == "application/json"


def test_generate_json_invalid_payload():
    client = GeminiClient(LLMConfig(api_key="k"))
    with mock.patch("urllib.request.urlopen", return_value=_response("not json")):
        assert client.generate_json("prompt") is None


def test_network_error_returns_none():
    client = GeminiClient(LLMConfig(api_key="k"))
    with mock.patch("urllib.request.urlopen", side_effect=OSError("unreachable")):
        assert client.chat([ChatTurn(role="user", content="hi")]) is None


def test_chat_maps_roles():
    client = GeminiClient(LLMConfig(api_key="k"))
    turns = [
        ChatTurn(role="user", content="hi"),
        ChatTurn(role="assistant", content="hello"),
    ]
    with mock.patch("urllib.request.urlopen", return_value=_response("Bake at 180C")) as urlopen:
        assert client.chat(turns, system="be brief") == "Bake at 180C"
    contents = json.loads(urlopen.call_args.args[0].data)["contents"]
    assert [c["role"] for c in contents] == ["user", "user", "model"]
