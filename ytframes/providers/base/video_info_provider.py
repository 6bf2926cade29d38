from abc import ABC, abstractmethod

from ...frame_pipeline.models import VideoMetadata


class VideoInfoProvider(ABC):
    """Abstract base class for video metadata lookups."""

    @abstractmethod
    async def get_metadata(self, video_url: str) -> VideoMetadata:
        """
        Look up duration and title for a video.

        Implementations never raise: on failure they return metadata carrying
        the configured default duration with ``duration_is_fallback`` set.
        """
        pass
