"""Provider system for the frame extraction service."""

from .base import (
    StorageProvider,
    SpreadsheetProvider,
    VideoInfoProvider,
    VideoDownloadProvider,
    FrameExtractionProvider,
)
from .factory import ProviderFactory

__all__ = [
    # Base classes
    'StorageProvider',
    'SpreadsheetProvider',
    'VideoInfoProvider',
    'VideoDownloadProvider',
    'FrameExtractionProvider',
    # Factory
    'ProviderFactory',
]
