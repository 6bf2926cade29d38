from .yt_dlp_provider import YtDlpVideoInfoProvider, YtDlpDownloadProvider
from .ffmpeg_provider import FfmpegFrameExtractionProvider

__all__ = ["YtDlpVideoInfoProvider", "YtDlpDownloadProvider", "FfmpegFrameExtractionProvider"]
