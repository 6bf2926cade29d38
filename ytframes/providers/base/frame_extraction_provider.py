from abc import ABC, abstractmethod


class FrameExtractionProvider(ABC):
    """Abstract base class for single-frame extraction."""

    @abstractmethod
    async def extract_frame(self, media_path: str, offset: float, output_path: str) -> str:
        """
        Decode the frame at ``offset`` seconds into ``output_path``.

        Raises:
            ToolExecutionException: If the transcoder fails or writes nothing.
        """
        pass
