from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

from django.conf import settings

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key={key}"


class LLMNotConfiguredError(Exception):
    """Raised when an LLM client is enabled but missing configuration."""


@dataclass
class LLMConfig:
    provider: str = "gemini"
    model: str = "gemini-1.5-flash"
    api_key: str | None = None
    timeout: float = 15.0


@dataclass(frozen=True)
class ChatTurn:
    role: str  # "user" or "assistant"
    content: str


class LLMClient:
    """Provider-agnostic interface for text generation.

    Every method returns None on provider or parsing failure; callers decide
    how to fall back.
    """

    def generate_json(self, prompt: str, system: str | None = None) -> Any | None:
        raise NotImplementedError

    def chat(self, turns: list[ChatTurn], system: str | None = None) -> str | None:
        raise NotImplementedError


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        text = text.removesuffix("```").strip()
    return text


class GeminiClient(LLMClient):
    """Minimal Gemini HTTP client using REST; no external deps."""

    def __init__(self, cfg: LLMConfig):
        if not cfg.api_key:
            msg = "GEMINI_API_KEY missing"
            raise LLMNotConfiguredError(msg)
        self.cfg = cfg

    def _generate(
        self,
        contents: list[dict[str, Any]],
        generation_config: dict[str, Any],
    ) -> str | None:
        url = GEMINI_URL.format(model=self.cfg.model, key=self.cfg.api_key)
        payload = {"contents": contents, "generationConfig": generation_config}
        req = urllib.request.Request(  # noqa: S310 - external URL by config
            url,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self.cfg.timeout) as resp:  # noqa: S310 - external URL by config
                obj = json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as e:  # pragma: no cover - network
            logger.warning("Gemini HTTPError: %s", e.read().decode("utf-8", "ignore"))
            return None
        except Exception as e:  # noqa: BLE001 - catch-all for network/JSON
            logger.warning("Gemini request failed: %s", e)
            return None

        # Parse candidates -> content -> parts -> text
        candidates = (obj.get("candidates") or []) if isinstance(obj, dict) else []
        if not candidates:
            return None
        parts = ((candidates[0] or {}).get("content") or {}).get("parts") or []
        if not parts:
            return None
        return parts[0].get("text") or None

    @staticmethod
    def _contents(prompt: str, system: str | None) -> list[dict[str, Any]]:
        contents: list[dict[str, Any]] = []
        if system:
            contents.append({"role": "user", "parts": [{"text": system}]})
        contents.append({"role": "user", "parts": [{"text": prompt}]})
        return contents

    def generate_json(self, prompt: str, system: str | None = None) -> Any | None:
        text = self._generate(
            self._contents(prompt, system),
            {"temperature": 0.2, "responseMimeType": "application/json"},
        )
        if text is None:
            return None
        try:
            return json.loads(_strip_code_fence(text))
        except ValueError as e:
            logger.debug("Failed to parse Gemini JSON: %s", e)
            return None

    def chat(self, turns: list[ChatTurn], system: str | None = None) -> str | None:
        contents: list[dict[str, Any]] = []
        if system:
            contents.append({"role": "user", "parts": [{"text": system}]})
        contents.extend(
            {
                "role": "model" if turn.role == "assistant" else "user",
                "parts": [{"text": turn.content}],
            }
            for turn in turns
        )
        return self._generate(contents, {"temperature": 0.7})


def get_llm_client_from_settings() -> LLMClient | None:
    """Factory reading settings to return a configured LLM client.

    Returns None when disabled or misconfigured.
    """
    if not getattr(settings, "RECIPE_SEARCH_LLM_ENABLED", False):
        return None

    cfg = LLMConfig(
        provider=getattr(settings, "LLM_PROVIDER", "gemini"),
        model=getattr(settings, "LLM_MODEL", "gemini-1.5-flash"),
        api_key=getattr(settings, "GEMINI_API_KEY", None),
        timeout=float(getattr(settings, "LLM_TIMEOUT", 15.0)),
    )
    if cfg.provider == "gemini":
        try:
            return GeminiClient(cfg)
        except LLMNotConfiguredError:
            logger.info("LLM enabled but GEMINI_API_KEY missing; skipping LLM")
            return None
    logger.info("LLM provider '%s' not supported; skipping LLM", cfg.provider)
    return None
