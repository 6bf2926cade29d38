from datetime import datetime, timezone
from typing import Optional, Union

from loguru import logger

from ytframes.exceptions import ValidationException
from ytframes.providers.base import SpreadsheetProvider, StorageProvider
from .encoding import decode_data_uri
from .extraction_pipeline import require_video_id
from .models import SelectedFrame, SelectionResult, SizeMode

SPREADSHEET_HEADER = [
    "Saved At",
    "Video ID",
    "Video Title",
    "Video URL",
    "Portrait Percent",
    "Portrait Size",
    "Portrait URL",
    "Landscape Percent",
    "Landscape Size",
    "Landscape URL",
    "Status",
]


def format_percent(percent: Union[int, float]) -> str:
    if isinstance(percent, float) and percent.is_integer():
        percent = int(percent)
    return str(percent)


def frame_key(video_id: str, percent: Union[int, float], size: Union[SizeMode, str]) -> str:
    """Deterministic media store key; re-saving a frame overwrites it."""
    size = SizeMode(size).value if isinstance(size, SizeMode) else size
    return f"{video_id}-{format_percent(percent)}-{size}"


class SelectionSaver:
    """Uploads a chosen portrait/landscape pair and logs it to the spreadsheet."""

    def __init__(self, storage: StorageProvider, spreadsheet: SpreadsheetProvider,
                 folder_name: Optional[str] = None):
        self.storage = storage
        self.spreadsheet = spreadsheet
        self.folder_name = folder_name

    async def _upload(self, video_id: str, frame: SelectedFrame, size: str) -> str:
        payload, data = decode_data_uri(frame.image)
        key = frame_key(video_id, frame.percent, size)
        logger.info(f"Uploading {size} frame {key} ({len(data)} bytes)")
        return await self.storage.save_base64(
            key, payload, folder_name=self.folder_name, content_type="image/jpeg"
        )

    async def save(
        self,
        video_url: Optional[str],
        video_title: Optional[str],
        portrait_frame: Optional[SelectedFrame],
        landscape_frame: Optional[SelectedFrame],
    ) -> SelectionResult:
        video_id = require_video_id(video_url)
        if portrait_frame is None or landscape_frame is None:
            raise ValidationException("portraitFrame and landscapeFrame are required")

        # Decode both before uploading either so bad input never half-saves
        decode_data_uri(portrait_frame.image)
        decode_data_uri(landscape_frame.image)

        portrait_url = await self._upload(video_id, portrait_frame, "portrait")
        landscape_url = await self._upload(video_id, landscape_frame, "landscape")

        row = [
            datetime.now(timezone.utc).isoformat(),
            video_id,
            video_title or "",
            video_url,
            format_percent(portrait_frame.percent),
            "x".join(str(v) for v in SizeMode.PORTRAIT_4X5.dimensions),
            portrait_url,
            format_percent(landscape_frame.percent),
            "x".join(str(v) for v in SizeMode.LANDSCAPE.dimensions),
            landscape_url,
            "saved",
        ]
        await self.spreadsheet.upsert_header(SPREADSHEET_HEADER)
        await self.spreadsheet.append_row(row)
        logger.info(f"Saved selection for {video_id}")

        return SelectionResult(portrait_url=portrait_url, landscape_url=landscape_url)
