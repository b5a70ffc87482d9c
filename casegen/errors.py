from __future__ import annotations


class CaseGenError(Exception):
    """Base exception for casegen failures."""


class ProviderError(CaseGenError):
    """Raised when provider calls fail."""


class ApiStatusError(ProviderError):
    """Raised when the generation API answers with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class PreconditionError(CaseGenError):
    """Raised before any work is attempted when a run cannot start."""


class MissingCredentialError(PreconditionError):
    """Raised when no API key is configured."""


class NoScenariosError(PreconditionError):
    """Raised when no non-blank scenario was supplied."""


class BatchAbortedError(CaseGenError):
    """Raised when a provider failure stops a batch part way through."""

    def __init__(
        self,
        ordinal: int,
        scenario: str,
        detail: str,
        status_code: int | None = None,
    ) -> None:
        self.ordinal = ordinal
        self.scenario = scenario
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"API request failed on scenario {ordinal}: {detail}")


class StorageError(CaseGenError):
    """Raised when generated rows cannot be written to the sheet store."""

    def __init__(self, message: str, record_count: int = 0) -> None:
        self.record_count = record_count
        super().__init__(message)
