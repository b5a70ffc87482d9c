from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, Sequence

from .config import GenerationConfig
from .errors import (
    ApiStatusError,
    BatchAbortedError,
    MissingCredentialError,
    NoScenariosError,
    ProviderError,
)
from .llm import LLMClient, build_llm_client
from .models import BatchResult, SkippedScenario, TestCase
from .parsing import TestCaseParser
from .processor import ScenarioProcessor

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class TestCaseGenerator:
    __test__ = False

    def __init__(
        self,
        config: GenerationConfig,
        parsers: Sequence[TestCaseParser] | None = None,
    ) -> None:
        self.config = config
        self.parsers = parsers
        self._llm_client: LLMClient | None = None

    @property
    def llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = build_llm_client(self.config)
        return self._llm_client

    def run(
        self,
        scenarios: Iterable[str],
        progress: ProgressCallback | None = None,
    ) -> BatchResult:
        normalized = normalize_scenarios(scenarios)

        if not self.config.api_key:
            raise MissingCredentialError("API key is not configured. Set API_KEY and try again.")
        if not normalized:
            raise NoScenariosError("No scenarios provided. Enter at least one scenario.")

        processor = ScenarioProcessor(
            self.llm_client,
            temperature=self.config.temperature,
            parsers=self.parsers,
            max_repeat_count=self.config.max_repeat_count,
        )

        total = len(normalized)
        test_cases: list[TestCase] = []
        skipped: list[SkippedScenario] = []

        for ordinal, scenario in enumerate(normalized, start=1):
            logger.info("Processing scenario %d/%d: %s", ordinal, total, scenario)
            try:
                outcome = processor.process(scenario, ordinal=ordinal)
            except ProviderError as exc:
                status_code = exc.status_code if isinstance(exc, ApiStatusError) else None
                detail = exc.message if isinstance(exc, ApiStatusError) else str(exc)
                logger.error("Aborting batch at scenario %d (%r): %s", ordinal, scenario, exc)
                raise BatchAbortedError(
                    ordinal=ordinal,
                    scenario=scenario,
                    detail=detail,
                    status_code=status_code,
                ) from exc

            test_cases.extend(outcome.test_cases)
            if outcome.skip_reason is not None:
                skipped.append(
                    SkippedScenario(ordinal=ordinal, scenario=scenario, reason=outcome.skip_reason)
                )

            _report_progress(progress, progress_percent(ordinal, total))

        if not test_cases:
            logger.warning("No test cases were generated from %d scenario(s)", total)

        return BatchResult(test_cases=test_cases, skipped=skipped, scenario_count=total)


def normalize_scenarios(scenarios: Iterable[str]) -> list[str]:
    return [scenario.strip() for scenario in scenarios if scenario and scenario.strip()]


def progress_percent(processed: int, total: int) -> int:
    # half-up rounding, so 12.5 reports as 13
    return int(math.floor(processed / total * 100 + 0.5))


def _report_progress(progress: ProgressCallback | None, percent: int) -> None:
    if progress is None:
        return
    try:
        progress(percent)
    except Exception as exc:
        logger.warning("Progress callback failed at %d%%: %s", percent, exc)
