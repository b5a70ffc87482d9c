from __future__ import annotations

import logging
from typing import Sequence

from .cleaning import MAX_REPEAT_COUNT, clean_response_text
from .errors import ApiStatusError
from .llm.base import LLMClient
from .models import ScenarioOutcome, TestCase
from .parsing import TestCaseParser, default_parsers, parse_with_fallbacks
from .prompts import build_test_case_prompt

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 300


class ScenarioProcessor:
    """Generate the test cases of one scenario: prompt, call, clean, parse, tag.

    Problems confined to the scenario (odd envelope, unreadable text, no
    records) come back as a skipped outcome. An error status from the API
    raises ApiStatusError, since it ends the whole batch.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        temperature: float = 0.2,
        parsers: Sequence[TestCaseParser] | None = None,
        max_repeat_count: int = MAX_REPEAT_COUNT,
    ) -> None:
        self.llm_client = llm_client
        self.temperature = temperature
        self.parsers = list(parsers) if parsers is not None else default_parsers()
        self.max_repeat_count = max_repeat_count

    def process(self, scenario: str, ordinal: int = 1) -> ScenarioOutcome:
        prompt = build_test_case_prompt(scenario)
        response = self.llm_client.generate(prompt, temperature=self.temperature)

        if response.status_code >= 400:
            raise ApiStatusError(response.status_code, response.error_message())

        text = response.candidate_text()
        if text is None:
            logger.warning(
                "Scenario %d (%r): unexpected response shape, skipping. Body: %s",
                ordinal,
                scenario,
                _snippet(response.body),
            )
            return ScenarioOutcome.skipped("unexpected response shape")

        logger.debug("Scenario %d raw response: %s", ordinal, text)
        cleaned = clean_response_text(text, max_repeat_count=self.max_repeat_count)

        records, parser_name = parse_with_fallbacks(cleaned, self.parsers)
        if records is None:
            logger.warning(
                "Scenario %d (%r): response could not be parsed, skipping. Cleaned text: %s",
                ordinal,
                scenario,
                _snippet(cleaned),
            )
            return ScenarioOutcome.skipped("unparsable response")

        if parser_name != self.parsers[0].name:
            logger.info("Scenario %d parsed with fallback strategy '%s'", ordinal, parser_name)

        test_cases: list[TestCase] = []
        for index, record in enumerate(records, start=1):
            if not isinstance(record, dict):
                logger.warning(
                    "Scenario %d (%r): dropping item %d, expected an object but got %s",
                    ordinal,
                    scenario,
                    index,
                    type(record).__name__,
                )
                continue
            test_cases.append(TestCase.from_record(record, scenario))

        if not test_cases:
            logger.warning(
                "Scenario %d (%r): no test cases in response, skipping. Cleaned text: %s",
                ordinal,
                scenario,
                _snippet(cleaned),
            )
            return ScenarioOutcome.skipped("no test cases in response")

        logger.info("Scenario %d produced %d test case(s)", ordinal, len(test_cases))
        return ScenarioOutcome(test_cases=test_cases)


def _snippet(text: str) -> str:
    if len(text) <= SNIPPET_LENGTH:
        return text
    return text[:SNIPPET_LENGTH] + "..."
