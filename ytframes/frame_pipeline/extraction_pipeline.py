"""
Frame extraction pipeline.

One instance serves many requests; every call parses the URL, looks up the
duration, plans offsets, downloads the source into a request-scoped scratch
space, extracts and crops frames, and removes the scratch space again.
"""

import asyncio
import math
from typing import Optional, Tuple, Union

from loguru import logger

from ytframes.config.settings import ToolsConfig
from ytframes.exceptions import ValidationException
from ytframes.providers.base import (
    FrameExtractionProvider,
    VideoDownloadProvider,
    VideoInfoProvider,
)
from .encoding import to_data_uri
from .image_cropper import crop_to_bytes, crop_to_file
from .models import (
    BothOrientationsResult,
    ExtractedFrameFile,
    FrameResult,
    MultiFrameResult,
    Segment,
    SizeMode,
    VideoMetadata,
)
from .scratch import ScratchSpace
from .timestamp_planner import SINGLE_FRAME_PERCENT, compute_offset, plan_grid, plan_multi_frame
from .url_parser import parse_video_id

# Position of the target frame inside a downloaded segment
SEGMENT_FRAME_OFFSET = 1.0


def require_video_id(video_url: Optional[str]) -> str:
    if not video_url:
        raise ValidationException("videoUrl is required")
    video_id = parse_video_id(video_url)
    if not video_id:
        raise ValidationException("Invalid YouTube URL")
    return video_id


def resolve_timestamp(timestamp: Union[str, int, float, None], duration: float) -> Tuple[int, Optional[float]]:
    """
    Turn the request's ``timestamp`` into whole seconds and a percentage.

    ``"auto"`` (or nothing) means 65 % of the duration; anything else must be a
    number of seconds and is truncated like an integer parse.
    """
    if timestamp is None or (isinstance(timestamp, str) and timestamp.strip().lower() == "auto"):
        return compute_offset(duration, SINGLE_FRAME_PERCENT), float(SINGLE_FRAME_PERCENT)

    if isinstance(timestamp, bool):
        raise ValidationException(f"Invalid timestamp: {timestamp}")
    try:
        seconds = float(timestamp)
    except (TypeError, ValueError):
        raise ValidationException(f"Invalid timestamp: {timestamp}")
    if not math.isfinite(seconds):
        raise ValidationException(f"Invalid timestamp: {timestamp}")

    extract_time = int(seconds)
    percent = round(extract_time / duration * 100, 1) if duration else None
    return extract_time, percent


class FrameExtractionPipeline:
    """Sequential download, extract and crop over pluggable providers."""

    def __init__(
        self,
        video_info: VideoInfoProvider,
        downloader: VideoDownloadProvider,
        frame_extractor: FrameExtractionProvider,
        tools_config: Optional[ToolsConfig] = None,
    ):
        self.video_info = video_info
        self.downloader = downloader
        self.frame_extractor = frame_extractor
        self.tools_config = tools_config or ToolsConfig()

    def _scratch(self, video_id: str) -> ScratchSpace:
        return ScratchSpace(self.tools_config.scratch_dir, video_id)

    async def _metadata(self, video_url: str) -> VideoMetadata:
        logger.info("Getting video info...")
        metadata = await self.video_info.get_metadata(video_url)
        if metadata.duration_is_fallback:
            logger.warning(f"Duration unavailable, using fallback of {metadata.duration}s")
        else:
            logger.info(f"Duration: {metadata.duration}s")
        return metadata

    async def _fetch_single_source(self, video_url: str, extract_time: int, scratch: ScratchSpace) -> Tuple[str, float]:
        """Download what the single-frame path needs and return (media path, offset in it)."""
        if self.tools_config.single_frame_download_mode == "full":
            media = await self.downloader.download(video_url, scratch.path("video.mp4"))
            return media, extract_time

        segment_seconds = self.tools_config.segment_seconds
        segment = Segment(start=extract_time, duration=segment_seconds)
        media = await self.downloader.download(video_url, scratch.path("segment.mp4"), segment=segment)
        return media, min(SEGMENT_FRAME_OFFSET, segment_seconds / 2)

    async def extract_frame(
        self,
        video_url: Optional[str],
        timestamp: Union[str, int, float, None] = "auto",
        size_mode: SizeMode = SizeMode.PORTRAIT,
    ) -> Tuple[ExtractedFrameFile, ScratchSpace]:
        """
        Extract and crop one frame.

        The cropped file stays on disk; the caller owns the returned scratch
        space and must call ``cleanup`` once the file has been sent.
        """
        logger.info(f"Processing: {video_url}")
        video_id = require_video_id(video_url)
        size_mode = SizeMode(size_mode)
        logger.info(f"Video ID: {video_id}")

        metadata = await self._metadata(video_url)
        extract_time, percent = resolve_timestamp(timestamp, metadata.duration)
        percent_label = f"{percent:.1f}%" if percent is not None else "n/a"
        logger.info(f"Extracting frame at {extract_time}s ({percent_label})")

        scratch = self._scratch(video_id)
        try:
            media, offset = await self._fetch_single_source(video_url, extract_time, scratch)
            raw = await self.frame_extractor.extract_frame(media, offset, scratch.path("raw.jpg"))

            logger.info(f"Cropping to {size_mode.value} {size_mode.dimensions}...")
            cropped = await asyncio.to_thread(crop_to_file, raw, scratch.path("cropped.jpg"), size_mode)
            scratch.remove(media, raw)
        except Exception:
            scratch.cleanup()
            raise

        frame = ExtractedFrameFile(
            video_id=video_id,
            metadata=metadata,
            timestamp=extract_time,
            percent=percent,
            path=cropped,
        )
        return frame, scratch

    async def _extract_encoded(self, media: str, offset: int, raw_path: str, scratch: ScratchSpace,
                               *size_modes: SizeMode) -> list:
        raw = await self.frame_extractor.extract_frame(media, offset, raw_path)
        try:
            return [await asyncio.to_thread(crop_to_bytes, raw, mode) for mode in size_modes]
        finally:
            scratch.remove(raw)

    async def extract_multiple(self, video_url: Optional[str],
                               size_mode: SizeMode = SizeMode.PORTRAIT) -> MultiFrameResult:
        """Frames at 50, 65 and 75 percent, from a single full download."""
        logger.info(f"Processing multiple frames: {video_url}")
        video_id = require_video_id(video_url)
        size_mode = SizeMode(size_mode)

        metadata = await self._metadata(video_url)
        plan = plan_multi_frame(metadata.duration)

        frames = []
        with self._scratch(video_id) as scratch:
            media = await self.downloader.download(video_url, scratch.path("video.mp4"))
            for point in plan:
                logger.info(f"Extracting {point.label} frame at {point.timestamp}s ({point.percent}%)")
                (image,) = await self._extract_encoded(
                    media, point.timestamp, scratch.path(f"{point.label}_raw.jpg"), scratch, size_mode
                )
                frames.append(FrameResult(
                    label=point.label,
                    percent=point.percent,
                    timestamp=point.timestamp,
                    image=to_data_uri(image),
                ))

        logger.info(f"Extracted {len(frames)} frames for {video_id}")
        return MultiFrameResult(video_id=video_id, metadata=metadata, frames=frames)

    async def extract_both(self, video_url: Optional[str]) -> BothOrientationsResult:
        """24 evenly spaced frames, each cropped to 4:5 portrait and landscape."""
        logger.info(f"Processing portrait and landscape grid: {video_url}")
        video_id = require_video_id(video_url)

        metadata = await self._metadata(video_url)
        plan = plan_grid(metadata.duration)

        portrait, landscape = [], []
        with self._scratch(video_id) as scratch:
            media = await self.downloader.download(video_url, scratch.path("video.mp4"))
            for point in plan:
                logger.debug(f"Extracting frame at {point.timestamp}s ({point.percent}%)")
                portrait_bytes, landscape_bytes = await self._extract_encoded(
                    media,
                    point.timestamp,
                    scratch.path(f"{point.percent}_raw.jpg"),
                    scratch,
                    SizeMode.PORTRAIT_4X5,
                    SizeMode.LANDSCAPE,
                )
                portrait.append(FrameResult(percent=point.percent, timestamp=point.timestamp,
                                            image=to_data_uri(portrait_bytes)))
                landscape.append(FrameResult(percent=point.percent, timestamp=point.timestamp,
                                             image=to_data_uri(landscape_bytes)))

        logger.info(f"Extracted {len(portrait)} portrait and {len(landscape)} landscape frames for {video_id}")
        return BothOrientationsResult(video_id=video_id, metadata=metadata, portrait=portrait, landscape=landscape)
