from .cleaning import clean_response_text
from .config import GenerationConfig
from .generator import TestCaseGenerator
from .models import BatchResult, LLMResponse, RunReport, SkippedScenario, TestCase
from .parsing import (
    EmbeddedJsonArrayParser,
    MarkdownFallbackParser,
    StrictJsonParser,
    TestCaseParser,
    extract_markdown_test_cases,
)
from .projection import HEADER, project_rows, project_table
from .runner import generate_and_store
from .storage import CsvSheetStore, SheetStore

__all__ = [
    "TestCaseGenerator",
    "GenerationConfig",
    "generate_and_store",
    "clean_response_text",
    "extract_markdown_test_cases",
    "TestCaseParser",
    "StrictJsonParser",
    "EmbeddedJsonArrayParser",
    "MarkdownFallbackParser",
    "TestCase",
    "BatchResult",
    "SkippedScenario",
    "LLMResponse",
    "RunReport",
    "HEADER",
    "project_rows",
    "project_table",
    "SheetStore",
    "CsvSheetStore",
]
