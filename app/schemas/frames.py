from typing import Literal, Optional, Union
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr
from ytframes.frame_pipeline import SizeMode
from ytframes.frame_pipeline.models import SelectedFrame


class ExtractFrameRequest(BaseModel):
    videoUrl: Optional[str] = Field(default=None, examples=["https://youtu.be/dQw4w9WgXcQ"])
    timestamp: Optional[Union[StrictStr, StrictInt, StrictFloat]] = Field(
        default="auto",
        description='"auto" for 65% of the duration, or seconds from the start',
    )
    size: SizeMode = Field(default=SizeMode.PORTRAIT)
    responseFormat: Literal["image", "json"] = Field(default="image")


class ExtractMultipleRequest(BaseModel):
    videoUrl: Optional[str] = Field(default=None, examples=["https://www.youtube.com/watch?v=dQw4w9WgXcQ"])
    size: SizeMode = Field(default=SizeMode.PORTRAIT)


class ExtractBothRequest(BaseModel):
    videoUrl: Optional[str] = Field(default=None, examples=["https://www.youtube.com/watch?v=dQw4w9WgXcQ"])


class SaveSelectionRequest(BaseModel):
    videoUrl: Optional[str] = None
    videoTitle: Optional[str] = None
    portraitFrame: Optional[SelectedFrame] = None
    landscapeFrame: Optional[SelectedFrame] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "videoUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                    "videoTitle": "Example video",
                    "portraitFrame": {"percent": 48, "image": "data:image/jpeg;base64,..."},
                    "landscapeFrame": {"percent": 52, "image": "data:image/jpeg;base64,..."},
                }
            ]
        }
    }
