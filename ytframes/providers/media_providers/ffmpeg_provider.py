import asyncio
import os
from typing import Any, Dict

import ffmpeg
from loguru import logger

from ytframes.providers.base import FrameExtractionProvider
from ytframes.exceptions import ToolExecutionException


class FfmpegFrameExtractionProvider(FrameExtractionProvider):
    """Single-frame extraction with the ffmpeg binary."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.ffmpeg_binary = config.get("ffmpeg_binary", "ffmpeg")
        self.max_output_bytes = int(config.get("max_output_mb", 10)) * 1024 * 1024

    def build_command(self, media_path: str, offset: float, output_path: str) -> list:
        stream = (
            ffmpeg
            .input(media_path, ss=offset)
            .output(output_path, vframes=1, **{"q:v": 2})
        )
        return ffmpeg.compile(stream, cmd=self.ffmpeg_binary, overwrite_output=True)

    async def extract_frame(self, media_path: str, offset: float, output_path: str) -> str:
        command = self.build_command(media_path, offset, output_path)
        logger.info(f"Extracting frame at {offset}s from {os.path.basename(media_path)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except FileNotFoundError as e:
            raise ToolExecutionException(f"ffmpeg binary not found: {self.ffmpeg_binary}") from e

        out, err = await process.communicate()
        if len(out) + len(err) > self.max_output_bytes:
            raise ToolExecutionException(f"ffmpeg output exceeded {self.max_output_bytes} bytes")

        stderr = err.decode(errors="ignore").strip()
        logger.debug(f"--- ffmpeg stderr ---\n{stderr}")
        if process.returncode != 0:
            raise ToolExecutionException(
                f"Command failed: {' '.join(command)}\n{stderr}",
                details={"returncode": process.returncode},
            )
        if not os.path.exists(output_path) or os.path.getsize(output_path) == 0:
            # ffmpeg exits 0 without writing when the offset is past the end
            raise ToolExecutionException(f"ffmpeg produced no frame at offset {offset}s")
        return output_path
