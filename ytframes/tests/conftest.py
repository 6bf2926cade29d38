"""
Shared fixtures: fake providers standing in for yt-dlp and ffmpeg so the
pipeline and the API can be exercised without either installed.
"""

import os
import shutil
from typing import Optional

import pytest
from PIL import Image

from ytframes.config.settings import ToolsConfig
from ytframes.exceptions import ToolExecutionException
from ytframes.frame_pipeline.extraction_pipeline import FrameExtractionPipeline
from ytframes.frame_pipeline.models import Segment, VideoMetadata
from ytframes.providers.base import FrameExtractionProvider, VideoDownloadProvider, VideoInfoProvider

VIDEO_ID = "dQw4w9WgXcQ"
VIDEO_URL = f"https://youtu.be/{VIDEO_ID}"


class FakeVideoInfo(VideoInfoProvider):
    def __init__(self, duration: float = 100.0, title: Optional[str] = "Test video", fallback: bool = False):
        self.metadata = VideoMetadata(duration=duration, title=title, duration_is_fallback=fallback)
        self.calls = []

    async def get_metadata(self, video_url: str) -> VideoMetadata:
        self.calls.append(video_url)
        return self.metadata


class FakeDownloader(VideoDownloadProvider):
    """Copies a fixed media file to wherever the pipeline asks."""

    def __init__(self, media_path: str):
        self.media_path = media_path
        self.calls = []

    async def download(self, video_url: str, output_path: str, segment: Optional[Segment] = None) -> str:
        self.calls.append((video_url, output_path, segment))
        shutil.copyfile(self.media_path, output_path)
        return output_path


class FailingDownloader(VideoDownloadProvider):
    def __init__(self):
        self.calls = []

    async def download(self, video_url: str, output_path: str, segment: Optional[Segment] = None) -> str:
        self.calls.append((video_url, output_path, segment))
        raise ToolExecutionException("ERROR: [youtube] Video unavailable")


class FakeFrameExtractor(FrameExtractionProvider):
    """Copies a fixed still image; negative offsets fail like the real transcoder."""

    def __init__(self, still_path: str):
        self.still_path = still_path
        self.calls = []

    async def extract_frame(self, media_path: str, offset: float, output_path: str) -> str:
        self.calls.append((media_path, offset, output_path))
        if not os.path.exists(media_path):
            raise ToolExecutionException(f"{media_path}: No such file or directory")
        if offset < 0:
            raise ToolExecutionException(f"ffmpeg produced no frame at offset {offset}s")
        shutil.copyfile(self.still_path, output_path)
        return output_path


def make_still(path, size=(1920, 1080), color=(30, 90, 160)) -> str:
    Image.new("RGB", size, color).save(path, format="JPEG")
    return str(path)


@pytest.fixture
def still_path(tmp_path):
    return make_still(tmp_path / "still.jpg")


@pytest.fixture
def media_path(tmp_path):
    path = tmp_path / "source.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42 not really a video")
    return str(path)


@pytest.fixture
def scratch_root(tmp_path):
    return str(tmp_path / "scratch")


@pytest.fixture
def tools_config(scratch_root):
    return ToolsConfig(scratch_dir=scratch_root)


@pytest.fixture
def video_info():
    return FakeVideoInfo(duration=100.0)


@pytest.fixture
def downloader(media_path):
    return FakeDownloader(media_path)


@pytest.fixture
def frame_extractor(still_path):
    return FakeFrameExtractor(still_path)


@pytest.fixture
def pipeline(video_info, downloader, frame_extractor, tools_config):
    return FrameExtractionPipeline(
        video_info=video_info,
        downloader=downloader,
        frame_extractor=frame_extractor,
        tools_config=tools_config,
    )


def artifacts_for(scratch_root: str, video_id: str = VIDEO_ID):
    """Every path under the scratch root whose name mentions the video."""
    if not os.path.exists(scratch_root):
        return []
    found = []
    for dirpath, dirnames, filenames in os.walk(scratch_root):
        for name in dirnames + filenames:
            if video_id in name:
                found.append(os.path.join(dirpath, name))
    return found
