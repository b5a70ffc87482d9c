from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

import pandas as pd

from .errors import StorageError


class SheetStore(ABC):
    @abstractmethod
    def write_table(self, header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        """Replace all rows in the sheet with ``header`` followed by ``rows``.

        Implementations raise StorageError when the write fails.
        """


class CsvSheetStore(SheetStore):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write_table(self, header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        frame = pd.DataFrame([list(row) for row in rows], columns=list(header), dtype=str)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            frame.to_csv(self.path, index=False, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to write {self.path}: {exc}", record_count=len(rows)) from exc
