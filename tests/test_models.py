from __future__ import annotations

import json

import pytest
from casegen.config import GenerationConfig
from casegen.models import LLMResponse, TestCase
from pydantic import ValidationError


def test_candidate_text_reads_first_part() -> None:
    body = {"candidates": [{"content": {"parts": [{"text": "hello"}, {"text": "ignored"}]}}]}

    assert LLMResponse(status_code=200, body=json.dumps(body)).candidate_text() == "hello"


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        json.dumps({}),
        json.dumps({"candidates": []}),
        json.dumps({"candidates": [{"content": {"parts": []}}]}),
        json.dumps({"candidates": [{"content": {"parts": [{"text": 5}]}}]}),
        json.dumps([1, 2]),
    ],
)
def test_candidate_text_is_none_for_unexpected_shapes(body: str) -> None:
    assert LLMResponse(status_code=200, body=body).candidate_text() is None


def test_error_message_prefers_error_envelope() -> None:
    body = json.dumps({"error": {"code": 400, "message": "API key not valid"}})

    assert LLMResponse(status_code=400, body=body).error_message() == "API key not valid"
    assert LLMResponse(status_code=502, body="<html>Bad gateway</html>").error_message() == (
        "<html>Bad gateway</html>"
    )


def test_test_case_coerces_model_values_to_text() -> None:
    case = TestCase.from_record(
        {
            "testCaseId": 7,
            "description": None,
            "expectedResult": {"status": 200},
            "severity": None,
            "unexpected": "ignored",
            "testScenario": "overwritten",
        },
        "Real scenario",
    )

    assert case.test_case_id == "7"
    assert case.description is None
    assert case.expected_result == '{"status": 200}'
    assert case.severity == ""
    assert case.test_scenario == "Real scenario"


def test_config_validates_ranges() -> None:
    with pytest.raises(ValidationError):
        GenerationConfig(temperature=1.5)
    with pytest.raises(ValidationError):
        GenerationConfig(max_repeat_count=-1)
    with pytest.raises(ValidationError):
        GenerationConfig(request_timeout_seconds=0)

    assert GenerationConfig(api_key="  ").api_key is None
