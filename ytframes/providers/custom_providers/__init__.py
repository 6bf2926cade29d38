from .storage_provider import LocalStorageProvider
from .spreadsheet_provider import LocalCsvSpreadsheetProvider

__all__ = ["LocalStorageProvider", "LocalCsvSpreadsheetProvider"]
