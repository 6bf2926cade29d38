import csv
import io
from pathlib import Path
from typing import Any, Dict, List

import aiofiles
from loguru import logger

from ytframes.providers.base import SpreadsheetProvider
from ytframes.utils.error_handler import convert_exceptions
from ytframes.utils.error_handler import ProviderException


class LocalCsvSpreadsheetProvider(SpreadsheetProvider):
    """CSV file standing in for a remote spreadsheet during local runs."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.path = Path(config.get("local_path") or "./local_storage/selections.csv").resolve()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"LocalCsvSpreadsheetProvider writing to {self.path}")

    async def _read_rows(self) -> List[List[str]]:
        if not self.path.exists():
            return []
        async with aiofiles.open(self.path, "r", encoding="utf-8", newline="") as f:
            content = await f.read()
        return list(csv.reader(io.StringIO(content)))

    @staticmethod
    def _render(rows: List[List[Any]]) -> str:
        buffer = io.StringIO()
        csv.writer(buffer).writerows(rows)
        return buffer.getvalue()

    @convert_exceptions({Exception: ProviderException})
    async def upsert_header(self, header: List[str]) -> None:
        rows = await self._read_rows()
        if rows:
            rows[0] = list(header)
        else:
            rows = [list(header)]
        async with aiofiles.open(self.path, "w", encoding="utf-8", newline="") as f:
            await f.write(self._render(rows))

    @convert_exceptions({Exception: ProviderException})
    async def append_row(self, row: List[Any]) -> None:
        async with aiofiles.open(self.path, "a", encoding="utf-8", newline="") as f:
            await f.write(self._render([row]))
        logger.info(f"Appended row to {self.path}")

    async def close(self):
        logger.debug("LocalCsvSpreadsheetProvider closed (no-op).")
