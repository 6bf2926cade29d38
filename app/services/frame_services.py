import base64

import aiofiles
from fastapi.responses import JSONResponse
from loguru import logger

from ytframes.exceptions import ValidationException
from ytframes.frame_pipeline.encoding import DATA_URI_PREFIX
from ytframes.frame_pipeline.extraction_pipeline import FrameExtractionPipeline
from ytframes.frame_pipeline.selection_saver import SelectionSaver
from app.schemas.frames import (
    ExtractBothRequest,
    ExtractFrameRequest,
    ExtractMultipleRequest,
    SaveSelectionRequest,
)
from app.utilities import ExecutionTimer, ScratchFileResponse

EXTRACTION_FAILURE_DETAILS = "Failed to extract frame. Check if video URL is valid and accessible."
SAVE_FAILURE_DETAILS = "Failed to save selection. Check media store and spreadsheet configuration."


def error_response(e: Exception, details: str) -> JSONResponse:
    if isinstance(e, ValidationException):
        logger.warning(f"Rejected request: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
    logger.exception(f"Error: {e}")
    return JSONResponse(status_code=500, content={"error": str(e), "details": details})


async def extract_frame(body: ExtractFrameRequest, pipeline: FrameExtractionPipeline):
    try:
        with ExecutionTimer() as timer:
            frame, scratch = await pipeline.extract_frame(body.videoUrl, body.timestamp, body.size)
    except Exception as e:
        return error_response(e, EXTRACTION_FAILURE_DETAILS)
    logger.info(f"Frame ready in {timer.get_execution_time():.2f}s")

    if body.responseFormat == "json":
        try:
            async with aiofiles.open(frame.path, "rb") as f:
                data = await f.read()
        except Exception as e:
            return error_response(e, EXTRACTION_FAILURE_DETAILS)
        finally:
            scratch.cleanup()
        return {
            "videoId": frame.video_id,
            "duration": frame.metadata.duration,
            "durationFallback": frame.metadata.duration_is_fallback,
            "timestamp": frame.timestamp,
            "percent": frame.percent,
            "image": DATA_URI_PREFIX + base64.b64encode(data).decode("ascii"),
        }

    logger.info("Success! Sending file...")
    return ScratchFileResponse(
        frame.path,
        scratch,
        media_type="image/jpeg",
        filename=f"{frame.video_id}_{frame.timestamp}.jpg",
        headers={
            "X-Video-Id": frame.video_id,
            "X-Frame-Timestamp": str(frame.timestamp),
            "X-Duration-Fallback": str(frame.metadata.duration_is_fallback).lower(),
        },
    )


async def extract_frames_multiple(body: ExtractMultipleRequest, pipeline: FrameExtractionPipeline):
    try:
        with ExecutionTimer() as timer:
            result = await pipeline.extract_multiple(body.videoUrl, body.size)
    except Exception as e:
        return error_response(e, EXTRACTION_FAILURE_DETAILS)
    logger.info(f"Extracted {len(result.frames)} frames in {timer.get_execution_time():.2f}s")

    return {
        "videoId": result.video_id,
        "duration": result.metadata.duration,
        "durationFallback": result.metadata.duration_is_fallback,
        "frames": [frame.to_response() for frame in result.frames],
    }


async def extract_frames_both(body: ExtractBothRequest, pipeline: FrameExtractionPipeline):
    try:
        with ExecutionTimer() as timer:
            result = await pipeline.extract_both(body.videoUrl)
    except Exception as e:
        return error_response(e, EXTRACTION_FAILURE_DETAILS)
    logger.info(f"Extracted frame grid in {timer.get_execution_time():.2f}s")

    return {
        "videoId": result.video_id,
        "videoTitle": result.metadata.title,
        "duration": result.metadata.duration,
        "durationFallback": result.metadata.duration_is_fallback,
        "portrait": [frame.to_response() for frame in result.portrait],
        "landscape": [frame.to_response() for frame in result.landscape],
    }


async def save_selection(body: SaveSelectionRequest, saver: SelectionSaver):
    try:
        result = await saver.save(
            body.videoUrl,
            body.videoTitle,
            body.portraitFrame,
            body.landscapeFrame,
        )
    except Exception as e:
        return error_response(e, SAVE_FAILURE_DETAILS)

    return {
        "success": True,
        "portraitUrl": result.portrait_url,
        "landscapeUrl": result.landscape_url,
    }
