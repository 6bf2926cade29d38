import asyncio
import json
import os
from typing import Any, Dict, Optional

import yt_dlp
from yt_dlp.utils import download_range_func
from loguru import logger

from ytframes.frame_pipeline.models import Segment, VideoMetadata
from ytframes.providers.base import VideoDownloadProvider, VideoInfoProvider
from ytframes.exceptions import ToolExecutionException
from ytframes.utils.error_handler import convert_exceptions


class YtDlpVideoInfoProvider(VideoInfoProvider):
    """Video metadata lookups through yt-dlp."""

    def __init__(self, config: Dict[str, Any]):
        """
        Args:
            config: Tools configuration dictionary with:
                - default_duration: seconds reported when the lookup fails
                - max_output_mb: ceiling on the serialized metadata size
        """
        self.config = config
        self.default_duration = float(config.get("default_duration", 300))
        self.max_output_bytes = int(config.get("max_output_mb", 10)) * 1024 * 1024

    def _extract_info(self, video_url: str) -> Dict[str, Any]:
        ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
        }
        with yt_dlp.YoutubeDL(ydl_opts) as ydl:
            info = ydl.extract_info(video_url, download=False)
        if not isinstance(info, dict):
            raise ToolExecutionException("yt-dlp returned invalid metadata")
        info = ydl.sanitize_info(info)
        if len(json.dumps(info, default=str)) > self.max_output_bytes:
            raise ToolExecutionException(
                f"yt-dlp metadata exceeded {self.max_output_bytes} bytes"
            )
        return info

    def _fallback(self, title: Optional[str] = None) -> VideoMetadata:
        return VideoMetadata(duration=self.default_duration, title=title, duration_is_fallback=True)

    async def get_metadata(self, video_url: str) -> VideoMetadata:
        try:
            info = await asyncio.to_thread(self._extract_info, video_url)
        except Exception as e:
            logger.warning(f"Error getting video info, using default duration {self.default_duration}s: {e}")
            return self._fallback()

        title = info.get("title")
        duration = info.get("duration")
        if not duration:
            logger.warning(f"No duration reported for {video_url}, using default {self.default_duration}s")
            return self._fallback(title)
        return VideoMetadata(duration=float(duration), title=title)


class YtDlpDownloadProvider(VideoDownloadProvider):
    """Source video downloads through yt-dlp, merged into a single container."""

    def __init__(self, config: Dict[str, Any]):
        """
        Args:
            config: Tools configuration dictionary with:
                - video_format: yt-dlp format selector
                - merge_output_format: container for merged video+audio
                - ffmpeg_binary: ffmpeg used for merging and range downloads
        """
        self.config = config
        self.video_format = config.get("video_format", "bestvideo[height<=1080]+bestaudio/best[height<=1080]")
        self.merge_output_format = config.get("merge_output_format", "mp4")
        self.ffmpeg_binary = config.get("ffmpeg_binary", "ffmpeg")

    def _build_options(self, output_path: str, segment: Optional[Segment]) -> Dict[str, Any]:
        ydl_opts = {
            "format": self.video_format,
            "merge_output_format": self.merge_output_format,
            "outtmpl": output_path,
            "overwrites": True,
            "quiet": True,
            "no_warnings": True,
            "noprogress": True,
        }
        if self.ffmpeg_binary != "ffmpeg":
            ydl_opts["ffmpeg_location"] = self.ffmpeg_binary
        if segment is not None:
            ydl_opts["download_ranges"] = download_range_func(None, [(segment.start, segment.end)])
            ydl_opts["force_keyframes_at_cuts"] = True
        return ydl_opts

    def _download(self, video_url: str, output_path: str, segment: Optional[Segment]) -> str:
        with yt_dlp.YoutubeDL(self._build_options(output_path, segment)) as ydl:
            info = ydl.extract_info(video_url, download=True)

        downloads = (info or {}).get("requested_downloads") or [{}]
        path = downloads[0].get("filepath") or output_path
        if not os.path.exists(path):
            raise ToolExecutionException(f"yt-dlp finished but {path} was not written")
        return path

    @convert_exceptions({Exception: ToolExecutionException})
    async def download(self, video_url: str, output_path: str, segment: Optional[Segment] = None) -> str:
        if segment is not None:
            logger.info(f"Downloading video segment {segment.start}s-{segment.end}s")
        else:
            logger.info("Downloading full video")
        path = await asyncio.to_thread(self._download, video_url, output_path, segment)
        logger.info(f"Downloaded video to {path}")
        return path
