from abc import ABC, abstractmethod
from typing import Any, List


class SpreadsheetProvider(ABC):
    """Abstract base class for append-only spreadsheet logs."""

    @abstractmethod
    async def upsert_header(self, header: List[str]) -> None:
        """Write the header row, replacing whatever the first row holds."""
        pass

    @abstractmethod
    async def append_row(self, row: List[Any]) -> None:
        """Append a single row after the last populated row."""
        pass

    @abstractmethod
    async def close(self):
        """Close the underlying client and cleanup."""
        pass
