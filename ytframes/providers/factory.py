from typing import Dict, Optional, Type
from loguru import logger

from .base import (
    StorageProvider,
    SpreadsheetProvider,
    VideoInfoProvider,
    VideoDownloadProvider,
    FrameExtractionProvider,
)
from .azure_providers import AzureStorageProvider
from .google_providers import GoogleSheetsProvider
from .custom_providers import LocalStorageProvider, LocalCsvSpreadsheetProvider
from .media_providers import (
    YtDlpVideoInfoProvider,
    YtDlpDownloadProvider,
    FfmpegFrameExtractionProvider,
)
from ..utils.error_handler import ConfigurationException
from ..config.settings import ServiceConfig


class ProviderFactory:
    """Factory class for creating provider instances."""

    _storage_providers: Dict[str, Type[StorageProvider]] = {
        'azure': AzureStorageProvider,
        'local': LocalStorageProvider,
    }

    _spreadsheet_providers: Dict[str, Type[SpreadsheetProvider]] = {
        'google': GoogleSheetsProvider,
        'local': LocalCsvSpreadsheetProvider,
    }

    _video_info_providers: Dict[str, Type[VideoInfoProvider]] = {
        'yt_dlp': YtDlpVideoInfoProvider,
    }

    _video_download_providers: Dict[str, Type[VideoDownloadProvider]] = {
        'yt_dlp': YtDlpDownloadProvider,
    }

    _frame_extraction_providers: Dict[str, Type[FrameExtractionProvider]] = {
        'ffmpeg': FfmpegFrameExtractionProvider,
    }

    @staticmethod
    def _resolve(registry: Dict[str, type], provider_name: str, kind: str) -> type:
        if provider_name not in registry:
            raise ConfigurationException(
                f"Unknown {kind} provider: {provider_name}. "
                f"Supported providers: {list(registry.keys())}"
            )
        logger.info(f"Creating {kind} provider: {provider_name}")
        return registry[provider_name]

    @classmethod
    def create_storage_provider(cls, provider_name: Optional[str] = None,
                                config: Optional[ServiceConfig] = None) -> StorageProvider:
        """
        Create media store provider instance.

        Args:
            provider_name: Name of the provider (optional, defaults to config)
            config: Service configuration (optional, read from the environment)

        Raises:
            ConfigurationException: If provider is not supported
        """
        config = config or ServiceConfig()
        provider_name = provider_name or config.storage.provider
        provider_class = cls._resolve(cls._storage_providers, provider_name, "storage")
        return provider_class(config.storage.model_dump())

    @classmethod
    def create_spreadsheet_provider(cls, provider_name: Optional[str] = None,
                                    config: Optional[ServiceConfig] = None) -> SpreadsheetProvider:
        config = config or ServiceConfig()
        provider_name = provider_name or config.sheets.provider
        provider_class = cls._resolve(cls._spreadsheet_providers, provider_name, "spreadsheet")
        return provider_class(config.sheets.model_dump())

    @classmethod
    def create_video_info_provider(cls, provider_name: str = "yt_dlp",
                                   config: Optional[ServiceConfig] = None) -> VideoInfoProvider:
        config = config or ServiceConfig()
        provider_class = cls._resolve(cls._video_info_providers, provider_name, "video info")
        return provider_class(config.tools.model_dump())

    @classmethod
    def create_video_download_provider(cls, provider_name: str = "yt_dlp",
                                       config: Optional[ServiceConfig] = None) -> VideoDownloadProvider:
        config = config or ServiceConfig()
        provider_class = cls._resolve(cls._video_download_providers, provider_name, "video download")
        return provider_class(config.tools.model_dump())

    @classmethod
    def create_frame_extraction_provider(cls, provider_name: str = "ffmpeg",
                                         config: Optional[ServiceConfig] = None) -> FrameExtractionProvider:
        config = config or ServiceConfig()
        provider_class = cls._resolve(cls._frame_extraction_providers, provider_name, "frame extraction")
        return provider_class(config.tools.model_dump())

    @classmethod
    def get_supported_providers(cls) -> Dict[str, list]:
        return {
            "storage": list(cls._storage_providers.keys()),
            "spreadsheet": list(cls._spreadsheet_providers.keys()),
            "video_info": list(cls._video_info_providers.keys()),
            "video_download": list(cls._video_download_providers.keys()),
            "frame_extraction": list(cls._frame_extraction_providers.keys()),
        }
