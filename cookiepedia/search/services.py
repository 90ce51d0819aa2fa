"""Recipe search: the LLM when configured, the local catalogue otherwise.

Every answer carries its source: ``gemini`` when the model answered,
``fallback`` when it was configured but failed, ``local`` when no model is
configured.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.cache import cache

from cookiepedia.integrations.llm.client import ChatTurn
from cookiepedia.integrations.llm.client import LLMNotConfiguredError
from cookiepedia.integrations.llm.client import get_llm_client_from_settings
from cookiepedia.integrations.llm.prompts import CHAT_SYSTEM_PROMPT
from cookiepedia.integrations.llm.prompts import build_popular_prompt
from cookiepedia.integrations.llm.prompts import build_suggestions_prompt

from . import catalogue
from . import fuzzy

logger = logging.getLogger(__name__)

SOURCE_GEMINI = "gemini"
SOURCE_FALLBACK = "fallback"
SOURCE_LOCAL = "local"

POPULAR_CACHE_KEY = "search:popular"
POPULAR_LIMIT = 10


def local_suggestions(query: str, limit: int) -> list[dict[str, Any]]:
    return [match.as_dict() for match in fuzzy.search(query, limit=limit)]


def _clean_suggestion(item: Any, index: int) -> dict[str, Any] | None:
    if not isinstance(item, dict):
        return None
    ingredients = item.get("ingredients")
    tags = item.get("tags")
    return {
        "id": item.get("id") or index + 1,
        "name": item.get("name") or "Unnamed Recipe",
        "type": item.get("type") or "cookie",
        "difficulty": item.get("difficulty") or "medium",
        "cookTime": item.get("cookTime") or "30 minutes",
        "rating": item.get("rating") or 4.5,
        "image": item.get("image") or f"/images/Recipe{index % 8 + 1}.avif",
        "ingredients": ingredients if isinstance(ingredients, list) else [],
        "tags": tags if isinstance(tags, list) else [],
        "description": item.get("description") or "Delicious homemade recipe",
    }


def recipe_suggestions(query: str, limit: int = 8) -> tuple[list[dict[str, Any]], str]:
    query = query.strip()
    client = get_llm_client_from_settings()
    if client is None:
        return local_suggestions(query, limit), SOURCE_LOCAL

    data = client.generate_json(build_suggestions_prompt(query, limit))
    suggestions = []
    if isinstance(data, list):
        suggestions = [
            cleaned
            for index, item in enumerate(data)
            if (cleaned := _clean_suggestion(item, index)) is not None
        ]
    if not suggestions:
        logger.warning("LLM suggestions failed for %r, using local search", query)
        return local_suggestions(query, limit), SOURCE_FALLBACK
    return suggestions[:limit], SOURCE_GEMINI


def popular_searches() -> tuple[list[str], str]:
    """Popular search terms. Model answers and local lists are cached."""

    cached = cache.get(POPULAR_CACHE_KEY)
    if cached is not None:
        return cached["popular"], cached["source"]

    local = [recipe.name for recipe in catalogue.popular(POPULAR_LIMIT)]
    client = get_llm_client_from_settings()
    if client is None:
        popular, source = local, SOURCE_LOCAL
    else:
        data = client.generate_json(build_popular_prompt(POPULAR_LIMIT))
        terms = [t for t in data if isinstance(t, str)] if isinstance(data, list) else []
        if not terms:
            logger.warning("LLM popular searches failed, using local ranking")
            # Not cached, so the model is retried on the next request.
            return local, SOURCE_FALLBACK
        popular, source = terms, SOURCE_GEMINI

    cache.set(
        POPULAR_CACHE_KEY,
        {"popular": popular, "source": source},
        settings.SEARCH_POPULAR_CACHE_SECONDS,
    )
    return popular, source


def chat_reply(turns: list[ChatTurn]) -> str | None:
    """Ask the assistant. None when the model failed to answer."""

    client = get_llm_client_from_settings()
    if client is None:
        msg = "Recipe assistant is not configured"
        raise LLMNotConfiguredError(msg)
    return client.chat(turns, system=CHAT_SYSTEM_PROMPT)
