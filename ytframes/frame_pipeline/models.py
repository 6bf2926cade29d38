from enum import Enum
from typing import List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class SizeMode(str, Enum):
    """Fixed output formats the cropper can produce."""

    PORTRAIT = "portrait"
    PORTRAIT_4X5 = "portrait_4x5"
    LANDSCAPE = "landscape"

    @property
    def dimensions(self) -> Tuple[int, int]:
        return SIZE_DIMENSIONS[self]

    def __str__(self):
        return self.value


SIZE_DIMENSIONS = {
    SizeMode.PORTRAIT: (1080, 1920),
    SizeMode.PORTRAIT_4X5: (1080, 1350),
    SizeMode.LANDSCAPE: (1200, 628),
}


class VideoMetadata(BaseModel):
    """Duration and title of a source video.

    ``duration_is_fallback`` is set when the lookup failed and ``duration``
    holds the configured default instead of the real length.
    """
    model_config = ConfigDict(frozen=True)

    duration: float = Field(..., description="Video length in seconds")
    title: Optional[str] = Field(default=None)
    duration_is_fallback: bool = Field(default=False)


class TimestampPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: Optional[str] = None
    percent: int
    timestamp: int


class Segment(BaseModel):
    """A window of the source video, in seconds from the start."""
    model_config = ConfigDict(frozen=True)

    start: float
    duration: float

    @property
    def end(self) -> float:
        return self.start + self.duration


class FrameResult(BaseModel):
    label: Optional[str] = None
    percent: Optional[Union[int, float]] = None
    timestamp: int
    image: str = Field(..., description="data:image/jpeg;base64 encoded crop")

    def to_response(self) -> dict:
        payload = {"percent": self.percent, "timestamp": self.timestamp, "image": self.image}
        if self.label is not None:
            payload = {"label": self.label, **payload}
        return payload


class ExtractedFrameFile(BaseModel):
    """A cropped frame still on disk, owned by a scratch space."""

    video_id: str
    metadata: VideoMetadata
    timestamp: int
    percent: Optional[float] = None
    path: str


class MultiFrameResult(BaseModel):
    video_id: str
    metadata: VideoMetadata
    frames: List[FrameResult]


class BothOrientationsResult(BaseModel):
    video_id: str
    metadata: VideoMetadata
    portrait: List[FrameResult]
    landscape: List[FrameResult]


class SelectionResult(BaseModel):
    portrait_url: str
    landscape_url: str


class SelectedFrame(BaseModel):
    """A frame previously returned by an extraction endpoint."""

    percent: float
    image: str = Field(..., description="base64 JPEG, with or without the data: prefix")
