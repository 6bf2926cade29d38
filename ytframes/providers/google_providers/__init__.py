from .sheets_provider import GoogleSheetsProvider

__all__ = ["GoogleSheetsProvider"]
