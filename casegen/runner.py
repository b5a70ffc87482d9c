from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .config import GenerationConfig
from .errors import BatchAbortedError, PreconditionError, ProviderError, StorageError
from .generator import ProgressCallback, TestCaseGenerator
from .models import BatchResult, RunReport
from .parsing import TestCaseParser
from .projection import HEADER, project_rows
from .storage import SheetStore

logger = logging.getLogger(__name__)


def generate_and_store(
    scenarios: Iterable[str],
    config: GenerationConfig,
    store: SheetStore,
    progress: ProgressCallback | None = None,
    parsers: Sequence[TestCaseParser] | None = None,
) -> RunReport:
    """Run a whole batch and write it to ``store``, reducing the outcome to one status line."""
    generator = TestCaseGenerator(config, parsers=parsers)
    try:
        batch = generator.run(scenarios, progress=progress)
    except PreconditionError as exc:
        return RunReport(status="error", message=str(exc))
    except BatchAbortedError as exc:
        return RunReport(status="error", message=str(exc))
    except ProviderError as exc:
        return RunReport(status="error", message=f"API client could not be created: {exc}")

    if batch.nothing_generated:
        return RunReport(status="empty", message=_empty_message(batch))

    rows = project_rows(batch.test_cases)
    try:
        store.write_table(HEADER, rows)
    except Exception as exc:
        detail = str(exc) if isinstance(exc, StorageError) else f"{type(exc).__name__}: {exc}"
        logger.error("Writing %d row(s) failed: %s", len(rows), detail)
        return RunReport(
            status="error",
            message=f"Generated {len(rows)} test case(s) but could not write them: {detail}",
        )

    return RunReport(status="written", message=_written_message(batch), written_count=len(rows))


def _written_message(batch: BatchResult) -> str:
    message = (
        f"Wrote {len(batch.test_cases)} test case(s) from {batch.scenario_count} scenario(s)."
    )
    if batch.skipped:
        ordinals = ", ".join(f"#{skipped.ordinal}" for skipped in batch.skipped)
        message += (
            f" Skipped {len(batch.skipped)} scenario(s) without usable test cases: {ordinals}."
        )
    return message


def _empty_message(batch: BatchResult) -> str:
    return (
        f"No test cases were generated from {batch.scenario_count} scenario(s). "
        "Try rephrasing the scenarios."
    )
