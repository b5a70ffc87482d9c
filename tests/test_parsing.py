from __future__ import annotations

from casegen.parsing import (
    EmbeddedJsonArrayParser,
    MarkdownFallbackParser,
    StrictJsonParser,
    default_parsers,
    extract_markdown_test_cases,
    parse_with_fallbacks,
)

MARKDOWN_RESPONSE = """
Here are the test cases you asked for.

**Test Case ID:** TC-001
**Test Title:** Valid login
**Test Data:** {"username": "alice", "password": "s3cret"}
**Expected Result:** User lands on the dashboard

### Test Case ID: TC-002
- **Test Description**: Password too short
- **Test Data**: password=abc
- **Expected Result**: Validation message is shown

test case id: TC-003
Expected Results: Account is locked
"""


def test_strict_parser_accepts_arrays_only() -> None:
    parser = StrictJsonParser()

    assert parser.parse('[{"testCaseId": "TC-1"}]') == [{"testCaseId": "TC-1"}]
    assert parser.parse("[]") == []
    assert parser.parse('{"testCaseId": "TC-1"}') is None
    assert parser.parse("") is None
    assert parser.parse("[{oops") is None


def test_embedded_parser_finds_array_inside_prose() -> None:
    parser = EmbeddedJsonArrayParser()
    text = 'Sure! Here you go: [{"testCaseId": "TC-1", "description": "a [b]"}] Hope it helps.'

    assert parser.parse(text) == [{"testCaseId": "TC-1", "description": "a [b]"}]


def test_embedded_parser_ignores_arrays_that_are_not_test_cases() -> None:
    parser = EmbeddedJsonArrayParser()

    assert parser.parse("Test Case ID: TC-1\nTest Data: [1, 2, 3]") is None


def test_markdown_extraction_preserves_order_and_ids() -> None:
    records = extract_markdown_test_cases(MARKDOWN_RESPONSE)

    assert [record["testCaseId"] for record in records] == ["TC-001", "TC-002", "TC-003"]
    assert records[0]["description"] == "Valid login"
    assert records[0]["testData"] == {"username": "alice", "password": "s3cret"}
    assert records[0]["expectedResult"] == "User lands on the dashboard"
    assert records[1]["description"] == "Password too short"
    assert records[2]["expectedResult"] == "Account is locked"
    assert records[2]["description"] == ""
    assert records[2]["testData"] is None


def test_markdown_test_data_falls_back_to_raw_text() -> None:
    records = extract_markdown_test_cases(MARKDOWN_RESPONSE)

    assert records[1]["testData"] == {"rawData": "password=abc"}


def test_markdown_records_have_empty_manual_fields() -> None:
    records = extract_markdown_test_cases("Test Case ID: TC-9")

    assert records == [
        {
            "testCaseId": "TC-9",
            "description": "",
            "testData": None,
            "expectedResult": "",
            "actualResult": "",
            "severity": "",
            "priority": "",
        }
    ]


def test_lines_before_first_id_are_ignored() -> None:
    text = "Test Title: orphan\nExpected Result: nobody\nTest Case ID: TC-1\nTest Title: kept"

    records = extract_markdown_test_cases(text)

    assert len(records) == 1
    assert records[0]["description"] == "kept"
    assert records[0]["expectedResult"] == ""


def test_markdown_extraction_never_raises_on_garbage() -> None:
    assert extract_markdown_test_cases("") == []
    assert extract_markdown_test_cases("*** ### ---\n\n```") == []
    assert MarkdownFallbackParser().parse("nothing to see") is None


def test_parse_with_fallbacks_uses_first_successful_strategy() -> None:
    records, name = parse_with_fallbacks('[{"testCaseId": "TC-1"}]', default_parsers())
    assert name == "strict_json"
    assert records == [{"testCaseId": "TC-1"}]

    records, name = parse_with_fallbacks(MARKDOWN_RESPONSE, default_parsers())
    assert name == "markdown_fallback"
    assert len(records) == 3


def test_parse_with_fallbacks_keeps_empty_strict_result() -> None:
    records, name = parse_with_fallbacks("[]", default_parsers())

    assert records == []
    assert name == "strict_json"


def test_parse_with_fallbacks_reports_failure_when_all_strategies_fail() -> None:
    records, name = parse_with_fallbacks("not json", [StrictJsonParser(), EmbeddedJsonArrayParser()])

    assert records is None
    assert name is None


def test_prose_starting_with_label_words_is_not_a_label() -> None:
    text = "\n".join(
        [
            "Test Case IDs below follow the TC-xxx pattern.",
            "Test Case ID: TC-1",
            "Test Data: {\"user\": \"alice\"}",
            "Test database must be seeded first.",
            "Test titles are short.",
            "Expected Resultset is not used here.",
            "Expected Result: Login succeeds",
        ]
    )

    records = extract_markdown_test_cases(text)

    assert [record["testCaseId"] for record in records] == ["TC-1"]
    assert records[0]["testData"] == {"user": "alice"}
    assert records[0]["description"] == ""
    assert records[0]["expectedResult"] == "Login succeeds"
