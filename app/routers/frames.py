from fastapi import APIRouter, Depends
from app.dependencies import get_pipeline
from app.schemas.frames import ExtractBothRequest, ExtractFrameRequest, ExtractMultipleRequest
from app.services import frame_services
from ytframes.frame_pipeline.extraction_pipeline import FrameExtractionPipeline

router = APIRouter(tags=["frames"])


@router.post(
    "/extract-frame",
    summary="Extract a single cropped frame",
    description='Returns the JPEG itself, or base64 JSON when responseFormat is "json".',
)
async def extract_frame(body: ExtractFrameRequest, pipeline: FrameExtractionPipeline = Depends(get_pipeline)):
    return await frame_services.extract_frame(body, pipeline)


@router.post("/extract-frames-multiple", summary="Frames at 50%, 65% and 75% of the video")
async def extract_frames_multiple(body: ExtractMultipleRequest,
                                  pipeline: FrameExtractionPipeline = Depends(get_pipeline)):
    return await frame_services.extract_frames_multiple(body, pipeline)


@router.post("/extract-frames-both", summary="24 frames cropped to portrait 4:5 and landscape")
async def extract_frames_both(body: ExtractBothRequest, pipeline: FrameExtractionPipeline = Depends(get_pipeline)):
    return await frame_services.extract_frames_both(body, pipeline)
