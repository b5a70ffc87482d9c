from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class GenerationConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: str = "gemini"
    model: str = "gemini-1.5-flash"
    api_key: str | None = None
    base_url: str | None = None

    temperature: float = 0.2
    max_retries: int = 3
    retry_backoff_seconds: float = 1.0
    request_timeout_seconds: float = 120.0

    max_repeat_count: int = 1000

    llm_client: Any | None = None

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        return normalized or None

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("temperature must be between 0.0 and 1.0")
        return value

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_retries must be >= 1")
        return value

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout_seconds must be > 0")
        return value

    @field_validator("max_repeat_count")
    @classmethod
    def validate_max_repeat_count(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_repeat_count must be >= 0")
        return value
