from .storage_provider import StorageProvider
from .spreadsheet_provider import SpreadsheetProvider
from .video_info_provider import VideoInfoProvider
from .video_download_provider import VideoDownloadProvider
from .frame_extraction_provider import FrameExtractionProvider

__all__ = [
    'StorageProvider',
    'SpreadsheetProvider',
    'VideoInfoProvider',
    'VideoDownloadProvider',
    'FrameExtractionProvider',
]
