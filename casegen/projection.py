from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from .models import BatchResult, TestCase

logger = logging.getLogger(__name__)

HEADER = [
    "Test Case ID",
    "Test Scenario",
    "Description",
    "Test Data",
    "Expected Result",
    "Actual Result",
    "Severity",
    "Priority",
]

NOT_AVAILABLE = "N/A"
SERIALIZATION_ERROR = "[serialization error]"


def project_table(batch: BatchResult) -> list[list[str]]:
    return [list(HEADER), *project_rows(batch.test_cases)]


def project_rows(test_cases: Sequence[TestCase]) -> list[list[str]]:
    return [_project_row(test_case, position) for position, test_case in enumerate(test_cases, start=1)]


def format_test_data(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, str):
        return value

    try:
        if isinstance(value, (dict, list, bool)):
            return json.dumps(value, ensure_ascii=False)
        return str(value)
    except Exception as exc:
        logger.warning("Could not serialize test data of type %s: %s", type(value).__name__, exc)
        return SERIALIZATION_ERROR


def _project_row(test_case: TestCase, position: int) -> list[str]:
    return [
        test_case.test_case_id or f"TC-{position}",
        test_case.test_scenario or NOT_AVAILABLE,
        test_case.description or NOT_AVAILABLE,
        format_test_data(test_case.test_data),
        test_case.expected_result or NOT_AVAILABLE,
        test_case.actual_result or "",
        test_case.severity or "",
        test_case.priority or "",
    ]
