from .models import (
    SizeMode,
    VideoMetadata,
    TimestampPoint,
    Segment,
    FrameResult,
    ExtractedFrameFile,
    MultiFrameResult,
    BothOrientationsResult,
    SelectionResult,
)
from .url_parser import parse_video_id
from .timestamp_planner import (
    SINGLE_FRAME_PERCENT,
    MULTI_FRAME_POINTS,
    GRID_PERCENTAGES,
    compute_offset,
    plan_timestamps,
    plan_multi_frame,
    plan_grid,
)

__all__ = [
    "SizeMode",
    "VideoMetadata",
    "TimestampPoint",
    "Segment",
    "FrameResult",
    "ExtractedFrameFile",
    "MultiFrameResult",
    "BothOrientationsResult",
    "SelectionResult",
    "parse_video_id",
    "SINGLE_FRAME_PERCENT",
    "MULTI_FRAME_POINTS",
    "GRID_PERCENTAGES",
    "compute_offset",
    "plan_timestamps",
    "plan_multi_frame",
    "plan_grid",
]
