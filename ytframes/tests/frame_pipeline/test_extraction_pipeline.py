import asyncio
import os
from io import BytesIO

import pytest
from PIL import Image

from ytframes.exceptions import ToolExecutionException, ValidationException
from ytframes.frame_pipeline.encoding import decode_data_uri
from ytframes.frame_pipeline.extraction_pipeline import FrameExtractionPipeline, resolve_timestamp
from ytframes.frame_pipeline.models import Segment, SizeMode

from conftest import VIDEO_ID, VIDEO_URL, FailingDownloader, FakeVideoInfo, artifacts_for


def image_size(data_uri: str):
    _, data = decode_data_uri(data_uri)
    with Image.open(BytesIO(data)) as image:
        return image.size


def test_resolve_auto_timestamp():
    assert resolve_timestamp("auto", 300) == (195, 65.0)
    assert resolve_timestamp(None, 300) == (195, 65.0)
    assert resolve_timestamp(" AUTO ", 100) == (65, 65.0)


def test_resolve_literal_timestamp_truncates():
    assert resolve_timestamp("42.9", 100) == (42, 42.0)
    assert resolve_timestamp(10, 300) == (10, 3.3)


@pytest.mark.parametrize("value", ["soon", "", True, float("nan"), float("inf")])
def test_resolve_rejects_non_numeric(value):
    with pytest.raises(ValidationException):
        resolve_timestamp(value, 100)


async def test_single_frame_from_segment(pipeline, downloader, frame_extractor, scratch_root):
    frame, scratch = await pipeline.extract_frame(VIDEO_URL)
    try:
        assert frame.video_id == VIDEO_ID
        assert frame.timestamp == 65
        assert frame.percent == 65.0
        assert frame.metadata.duration == 100.0

        (url, _, segment), = downloader.calls
        assert url == VIDEO_URL
        assert segment == Segment(start=65, duration=2.0)
        (_, offset, _), = frame_extractor.calls
        assert offset == 1.0

        with Image.open(frame.path) as image:
            assert image.size == (1080, 1920)
        # Only the cropped output survives until the caller cleans up
        assert os.listdir(scratch.directory) == [os.path.basename(frame.path)]
    finally:
        scratch.cleanup()
    assert artifacts_for(scratch_root) == []


async def test_single_frame_from_full_download(pipeline, downloader, frame_extractor):
    pipeline.tools_config.single_frame_download_mode = "full"

    frame, scratch = await pipeline.extract_frame(VIDEO_URL, size_mode=SizeMode.LANDSCAPE)
    scratch.cleanup()

    (_, _, segment), = downloader.calls
    assert segment is None
    (_, offset, _), = frame_extractor.calls
    assert offset == 65
    assert frame.timestamp == 65


async def test_literal_timestamp(pipeline, downloader):
    frame, scratch = await pipeline.extract_frame(VIDEO_URL, timestamp="42.9")
    scratch.cleanup()

    assert frame.timestamp == 42
    assert frame.percent == 42.0
    assert downloader.calls[0][2].start == 42


async def test_invalid_url_touches_nothing(pipeline, video_info, downloader, scratch_root):
    with pytest.raises(ValidationException, match="Invalid YouTube URL"):
        await pipeline.extract_frame("not a url")

    assert video_info.calls == []
    assert downloader.calls == []
    assert artifacts_for(scratch_root) == []


async def test_missing_url(pipeline):
    with pytest.raises(ValidationException, match="videoUrl is required"):
        await pipeline.extract_frame(None)


async def test_invalid_timestamp_downloads_nothing(pipeline, downloader, scratch_root):
    with pytest.raises(ValidationException):
        await pipeline.extract_frame(VIDEO_URL, timestamp="later")

    assert downloader.calls == []
    assert artifacts_for(scratch_root) == []


async def test_download_failure_cleans_up(video_info, frame_extractor, tools_config, scratch_root):
    downloader = FailingDownloader()
    pipeline = FrameExtractionPipeline(video_info, downloader, frame_extractor, tools_config)

    with pytest.raises(ToolExecutionException, match="Video unavailable"):
        await pipeline.extract_frame(VIDEO_URL)

    assert len(downloader.calls) == 1
    assert frame_extractor.calls == []
    assert artifacts_for(scratch_root) == []


async def test_fallback_duration_is_reported(downloader, frame_extractor, tools_config):
    video_info = FakeVideoInfo(duration=300.0, title=None, fallback=True)
    pipeline = FrameExtractionPipeline(video_info, downloader, frame_extractor, tools_config)

    frame, scratch = await pipeline.extract_frame(VIDEO_URL)
    scratch.cleanup()

    assert frame.timestamp == 195
    assert frame.metadata.duration_is_fallback is True


async def test_negative_duration_fails_at_extraction(downloader, frame_extractor, tools_config, scratch_root):
    tools_config.single_frame_download_mode = "full"
    pipeline = FrameExtractionPipeline(FakeVideoInfo(duration=-10.0), downloader, frame_extractor, tools_config)

    with pytest.raises(ToolExecutionException):
        await pipeline.extract_frame(VIDEO_URL)

    assert frame_extractor.calls[0][1] == -7
    assert artifacts_for(scratch_root) == []


async def test_concurrent_requests_for_same_video_are_isolated(pipeline, scratch_root):
    (first, first_scratch), (second, second_scratch) = await asyncio.gather(
        pipeline.extract_frame(VIDEO_URL),
        pipeline.extract_frame(VIDEO_URL, timestamp=10),
    )

    assert first_scratch.directory != second_scratch.directory
    assert first.path != second.path

    first_scratch.cleanup()
    assert os.path.exists(second.path)
    second_scratch.cleanup()
    assert artifacts_for(scratch_root) == []


async def test_multiple_frames(pipeline, downloader, frame_extractor, scratch_root):
    result = await pipeline.extract_multiple(VIDEO_URL)

    assert len(downloader.calls) == 1
    assert downloader.calls[0][2] is None
    assert [(f.label, f.percent, f.timestamp) for f in result.frames] == [
        ("middle", 50, 50),
        ("climax", 65, 65),
        ("late", 75, 75),
    ]
    assert [call[1] for call in frame_extractor.calls] == [50, 65, 75]
    assert all(f.image.startswith("data:image/jpeg;base64,") for f in result.frames)
    assert image_size(result.frames[0].image) == (1080, 1920)
    assert artifacts_for(scratch_root) == []


async def test_multiple_frames_honours_size(pipeline):
    result = await pipeline.extract_multiple(VIDEO_URL, size_mode="landscape")
    assert {image_size(f.image) for f in result.frames} == {(1200, 628)}


async def test_multiple_frames_failure_cleans_up(video_info, frame_extractor, tools_config, scratch_root):
    pipeline = FrameExtractionPipeline(video_info, FailingDownloader(), frame_extractor, tools_config)

    with pytest.raises(ToolExecutionException):
        await pipeline.extract_multiple(VIDEO_URL)

    assert artifacts_for(scratch_root) == []


async def test_both_orientations(pipeline, downloader, frame_extractor, scratch_root):
    result = await pipeline.extract_both(VIDEO_URL)

    assert len(downloader.calls) == 1
    assert len(frame_extractor.calls) == 24
    assert len(result.portrait) == len(result.landscape) == 24
    assert [f.percent for f in result.portrait] == list(range(4, 97, 4))
    assert [f.timestamp for f in result.landscape] == list(range(4, 97, 4))
    assert all(f.label is None for f in result.portrait)
    assert image_size(result.portrait[0].image) == (1080, 1350)
    assert image_size(result.landscape[-1].image) == (1200, 628)
    assert result.metadata.title == "Test video"
    assert artifacts_for(scratch_root) == []
