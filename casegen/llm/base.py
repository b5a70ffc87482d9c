from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import LLMResponse


class LLMClient(ABC):
    @abstractmethod
    def generate(self, prompt: str, temperature: float = 0.0) -> LLMResponse:
        """Send a prompt and return the status code and raw body of the answer.

        Error statuses are returned, not raised. Transport failures raise ProviderError.
        """
