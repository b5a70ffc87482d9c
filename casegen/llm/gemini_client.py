from __future__ import annotations

import logging
import time

import requests

from .base import LLMClient
from ..errors import ProviderError
from ..models import LLMResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiClient(LLMClient):
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
            raise ProviderError("api_key is required for provider='gemini'.")

        self.model = model
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.retry_backoff_seconds = retry_backoff_seconds

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str, temperature: float = 0.0) -> LLMResponse:
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": temperature},
        }

        for attempt in range(self.max_retries):
            is_last_attempt = attempt >= self.max_retries - 1
            try:
                response = requests.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=body,
                    timeout=self.timeout_seconds,
                )
            except requests.Timeout as exc:
                if is_last_attempt:
                    raise ProviderError(f"Gemini request timed out: {exc}") from exc
                self._sleep_before_retry(attempt, reason="timeout")
                continue
            except requests.RequestException as exc:
                raise ProviderError(f"Gemini request failed: {exc}") from exc

            if response.status_code == 429 and not is_last_attempt:
                self._sleep_before_retry(attempt, reason="rate limit")
                continue

            logger.debug("Gemini answered HTTP %d (%d bytes)", response.status_code, len(response.text))
            return LLMResponse(status_code=response.status_code, body=response.text)

        raise ProviderError("Gemini request failed after retries.")

    def _sleep_before_retry(self, attempt: int, reason: str) -> None:
        delay = self.retry_backoff_seconds * (2**attempt)
        logger.info(
            "Gemini %s, retrying in %.1fs (attempt %d/%d)", reason, delay, attempt + 1, self.max_retries
        )
        time.sleep(delay)
