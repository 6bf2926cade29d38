from .settings import ServiceConfig, ToolsConfig, StorageConfig, SheetsConfig, LoggingConfig

__all__ = ["ServiceConfig", "ToolsConfig", "StorageConfig", "SheetsConfig", "LoggingConfig"]
