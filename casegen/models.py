from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TestCase(BaseModel):
    __test__ = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    test_case_id: str | None = Field(default=None, alias="testCaseId")
    description: str | None = None
    test_data: Any = Field(default=None, alias="testData")
    expected_result: str | None = Field(default=None, alias="expectedResult")
    actual_result: str = Field(default="", alias="actualResult")
    severity: str = ""
    priority: str = ""
    test_scenario: str = Field(default="", alias="testScenario")

    @field_validator("test_case_id", "description", "expected_result", mode="before")
    @classmethod
    def coerce_optional_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return _as_text(value)

    @field_validator("actual_result", "severity", "priority", "test_scenario", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return _as_text(value)

    @classmethod
    def from_record(cls, record: dict[str, Any], scenario: str) -> TestCase:
        return cls.model_validate({**record, "testScenario": scenario})


class SkippedScenario(BaseModel):
    ordinal: int
    scenario: str
    reason: str


class ScenarioOutcome(BaseModel):
    test_cases: list[TestCase] = Field(default_factory=list)
    skip_reason: str | None = None

    @classmethod
    def skipped(cls, reason: str) -> ScenarioOutcome:
        return cls(skip_reason=reason)


class BatchResult(BaseModel):
    test_cases: list[TestCase] = Field(default_factory=list)
    skipped: list[SkippedScenario] = Field(default_factory=list)
    scenario_count: int = 0

    @property
    def nothing_generated(self) -> bool:
        return not self.test_cases


class LLMResponse(BaseModel):
    """Raw answer of the generation API: HTTP status plus body text."""

    status_code: int
    body: str = ""

    def payload(self) -> Any:
        try:
            return json.loads(self.body)
        except (TypeError, ValueError):
            return None

    def candidate_text(self) -> str | None:
        """Return ``candidates[0].content.parts[0].text`` or None for any other shape."""
        payload = self.payload()
        try:
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None

    def error_message(self) -> str:
        payload = self.payload()
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return self.body


class RunReport(BaseModel):
    status: Literal["written", "empty", "error"]
    message: str
    written_count: int = 0


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
