from __future__ import annotations

import json
import time
from typing import Any

from .base import LLMClient
from ..errors import ProviderError
from ..models import LLMResponse


class OpenAIClient(LLMClient):
    """Chat-completions client whose answers are reshaped into the generateContent envelope."""

    def __init__(
        self,
        model: str,
        api_key: str | None,
        base_url: str | None = None,
        timeout_seconds: float = 120.0,
        max_retries: int = 3,
        retry_backoff_seconds: float = 1.0,
    ) -> None:
        if not api_key:
            raise ProviderError("api_key is required for provider='openai'.")

        try:
            import openai
        except ImportError as exc:  # pragma: no cover - depends on optional package.
            raise ProviderError(
                "openai package is not installed. Install with: pip install openai"
            ) from exc

        self._openai = openai
        self._client = openai.OpenAI(api_key=api_key, base_url=base_url, timeout=timeout_seconds)
        self.model = model
        self.max_retries = max_retries
        self.retry_backoff_seconds = retry_backoff_seconds

    def generate(self, prompt: str, temperature: float = 0.0) -> LLMResponse:
        for attempt in range(self.max_retries):
            try:
                response = self._client.chat.completions.create(
                    model=self.model,
                    temperature=temperature,
                    messages=[{"role": "user", "content": prompt}],
                )
            except self._openai.APIStatusError as exc:  # pragma: no cover - provider specific.
                if exc.status_code == 429 and attempt < self.max_retries - 1:
                    time.sleep(self.retry_backoff_seconds * (2**attempt))
                    continue
                return LLMResponse(
                    status_code=exc.status_code,
                    body=json.dumps({"error": {"message": exc.message}}),
                )
            except Exception as exc:  # pragma: no cover - provider specific.
                should_retry = self._is_retryable(exc)
                is_last_attempt = attempt >= self.max_retries - 1
                if not should_retry or is_last_attempt:
                    raise ProviderError(f"OpenAI request failed: {exc}") from exc
                time.sleep(self.retry_backoff_seconds * (2**attempt))
                continue

            return LLMResponse(status_code=200, body=json.dumps(self._to_envelope(response)))

        raise ProviderError("OpenAI request failed after retries.")

    @staticmethod
    def _is_retryable(exc: Exception) -> bool:
        message = str(exc).lower()
        retry_markers = ["rate limit", "429", "timeout", "temporarily unavailable"]
        return any(marker in message for marker in retry_markers)

    @staticmethod
    def _to_envelope(response: Any) -> dict[str, Any]:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError):
            content = None

        if content is None:
            return {"candidates": []}
        return {"candidates": [{"content": {"parts": [{"text": str(content)}]}}]}
