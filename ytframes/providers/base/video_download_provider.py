from abc import ABC, abstractmethod
from typing import Optional

from ...frame_pipeline.models import Segment


class VideoDownloadProvider(ABC):
    """Abstract base class for source video downloaders."""

    @abstractmethod
    async def download(self, video_url: str, output_path: str, segment: Optional[Segment] = None) -> str:
        """
        Materialize the video (or only ``segment`` of it) at ``output_path``.

        Returns:
            Path of the written media file.

        Raises:
            ToolExecutionException: If the download fails.
        """
        pass
