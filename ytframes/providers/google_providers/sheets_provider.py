import asyncio
from typing import Any, Dict, List, Optional

from googleapiclient.discovery import Resource, build
from loguru import logger

from ytframes.providers.base import SpreadsheetProvider
from ytframes.providers.credentials import GoogleCredentials
from ytframes.utils.error_handler import convert_exceptions, log_exceptions
from ytframes.utils.error_handler import ProviderException, ConfigurationException


def column_letter(index: int) -> str:
    """1-based column index to A1 notation letters (1 -> A, 27 -> AA)."""
    letters = ""
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


class GoogleSheetsProvider(SpreadsheetProvider):
    """Google Sheets API v4 spreadsheet log."""

    def __init__(self, config: Dict[str, Any], service: Optional[Resource] = None):
        """
        Args:
            config: Configuration dictionary with:
                - spreadsheet_id: target spreadsheet
                - credentials_json: service-account JSON document
                - worksheet: tab name rows are written to
            service: pre-built Sheets resource, skips credential loading
        """
        self.config = config
        self.spreadsheet_id = config.get("spreadsheet_id")
        self.worksheet = config.get("worksheet") or "Sheet1"
        self._service = service

    def _connect(self) -> Resource:
        if not self.spreadsheet_id:
            raise ConfigurationException("SHEETS_SPREADSHEET_ID is required for the google provider")
        if self._service is None:
            credentials = GoogleCredentials.from_json_blob(self.config.get("credentials_json"))
            self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
            logger.info("Connected to Google Sheets API")
        return self._service

    def _range(self, width: int, header: bool) -> str:
        last = column_letter(width)
        if header:
            return f"{self.worksheet}!A1:{last}1"
        return f"{self.worksheet}!A:{last}"

    @log_exceptions(log_level="WARNING", custom_message="Sheets header update failed")
    def _update_header(self, header: List[str]) -> Dict[str, Any]:
        values = self._connect().spreadsheets().values()
        return values.update(
            spreadsheetId=self.spreadsheet_id,
            range=self._range(len(header), header=True),
            valueInputOption="RAW",
            body={"values": [header]},
        ).execute()

    @log_exceptions(log_level="WARNING", custom_message="Sheets append failed")
    def _append(self, row: List[Any]) -> Dict[str, Any]:
        values = self._connect().spreadsheets().values()
        return values.append(
            spreadsheetId=self.spreadsheet_id,
            range=self._range(len(row), header=False),
            valueInputOption="USER_ENTERED",
            insertDataOption="INSERT_ROWS",
            body={"values": [row]},
        ).execute()

    @convert_exceptions({Exception: ProviderException})
    async def upsert_header(self, header: List[str]) -> None:
        await asyncio.to_thread(self._update_header, header)
        logger.debug(f"Header written to {self.worksheet}")

    @convert_exceptions({Exception: ProviderException})
    async def append_row(self, row: List[Any]) -> None:
        result = await asyncio.to_thread(self._append, row)
        updated = (result or {}).get("updates", {}).get("updatedRange")
        logger.info(f"Appended spreadsheet row {updated or ''}".rstrip())

    async def close(self):
        if self._service is not None and hasattr(self._service, "close"):
            self._service.close()
        self._service = None
