from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Sequence

from .json_utils import extract_json_array

logger = logging.getLogger(__name__)

_LEADER = r"^\s*(?:[#>*_\-]+\s+)*[#>*_\-]*\s*"
_TRAILER = r"\s*[*_]*\s*:?\s*[*_]*\s*(?P<value>.*)$"

_ID_RE = re.compile(_LEADER + r"test\s*case\s*id\b" + _TRAILER, re.IGNORECASE)
_DESCRIPTION_RE = re.compile(_LEADER + r"test\s*(?:title|description)\b" + _TRAILER, re.IGNORECASE)
_DATA_RE = re.compile(_LEADER + r"test\s*data\b" + _TRAILER, re.IGNORECASE)
_EXPECTED_RE = re.compile(_LEADER + r"expected\s*results?\b" + _TRAILER, re.IGNORECASE)

_RECORD_KEYS = ("testCaseId", "description", "testData", "expectedResult")


class TestCaseParser(ABC):
    """One strategy for turning cleaned model text into raw test-case records."""

    __test__ = False

    name: str = "parser"

    @abstractmethod
    def parse(self, text: str) -> list[Any] | None:
        """Return the parsed records, or None when this strategy cannot read the text."""


class StrictJsonParser(TestCaseParser):
    name = "strict_json"

    def parse(self, text: str) -> list[Any] | None:
        if not text:
            return None

        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            return None

        if not isinstance(payload, list):
            logger.debug("Strict JSON parse produced %s, expected an array", type(payload).__name__)
            return None
        return payload


class EmbeddedJsonArrayParser(TestCaseParser):
    name = "embedded_json_array"

    def parse(self, text: str) -> list[Any] | None:
        candidate = extract_json_array(text)
        if candidate is None:
            return None

        try:
            payload = json.loads(candidate)
        except json.JSONDecodeError:
            return None
        if not isinstance(payload, list) or not _looks_like_test_cases(payload):
            return None
        return payload


class MarkdownFallbackParser(TestCaseParser):
    name = "markdown_fallback"

    def parse(self, text: str) -> list[Any] | None:
        return extract_markdown_test_cases(text) or None


def default_parsers() -> list[TestCaseParser]:
    return [StrictJsonParser(), EmbeddedJsonArrayParser(), MarkdownFallbackParser()]


def parse_with_fallbacks(
    text: str,
    parsers: Sequence[TestCaseParser],
) -> tuple[list[Any] | None, str | None]:
    for parser in parsers:
        try:
            records = parser.parse(text)
        except Exception as exc:
            logger.warning("Parser '%s' raised %s; trying next strategy", parser.name, exc)
            continue
        if records is not None:
            return records, parser.name
        logger.debug("Parser '%s' could not read the response", parser.name)
    return None, None


def extract_markdown_test_cases(text: str) -> list[dict[str, Any]]:
    """Recover test cases from markdown-like text.

    A record starts at every "Test Case ID" line; title/description, test data
    and expected result lines fill in the current record. Anything before the
    first ID line, and any unrecognized line, is ignored.
    """
    records: list[dict[str, Any]] = []
    current: dict[str, Any] | None = None

    for line in (text or "").splitlines():
        if not line.strip():
            continue

        match = _ID_RE.match(line)
        if match:
            if current is not None:
                records.append(current)
            current = _new_record(_label_value(match))
            continue

        if current is None:
            continue

        match = _DESCRIPTION_RE.match(line)
        if match:
            current["description"] = _label_value(match)
            continue

        match = _DATA_RE.match(line)
        if match:
            current["testData"] = _parse_test_data(_label_value(match))
            continue

        match = _EXPECTED_RE.match(line)
        if match:
            current["expectedResult"] = _label_value(match)

    if current is not None:
        records.append(current)
    return records


def _looks_like_test_cases(payload: list[Any]) -> bool:
    return any(
        isinstance(item, dict) and any(key in item for key in _RECORD_KEYS) for item in payload
    )


def _new_record(test_case_id: str) -> dict[str, Any]:
    return {
        "testCaseId": test_case_id,
        "description": "",
        "testData": None,
        "expectedResult": "",
        "actualResult": "",
        "severity": "",
        "priority": "",
    }


def _label_value(match: re.Match[str]) -> str:
    return match.group("value").strip().rstrip("*").strip()


def _parse_test_data(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return {"rawData": value}
