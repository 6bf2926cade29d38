import os
import base64
import aiofiles
from pathlib import Path
from loguru import logger
from typing import Dict, Any
from ytframes.providers.base import StorageProvider
from ytframes.utils.error_handler import convert_exceptions
from ytframes.utils.error_handler import ProviderException


class LocalStorageProvider(StorageProvider):
    """Local filesystem-based media store."""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize Local Storage Provider.

        Args:
            config: {
                        "base_path": str -> Root directory for local storage (default: ./local_storage)
                        "container_name": str -> Sub-directory frames are written to
                    }
        """
        self.config = config
        self.base_path = Path(config.get("base_path") or "./local_storage").resolve()
        self.container_name = config.get("container_name") or "frames"
        self.base_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"LocalStorageProvider initialized at {self.base_path}")

    def _get_file_path(self, folder: str, file_name: str) -> Path:
        """Return full path to file, creating parent directories if needed."""
        file_path = self.base_path / folder / file_name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return file_path

    async def get_file_url(self, file_name: str, **kwargs) -> str:
        """
        Generate file:// URL for a local file.
        Ensures consistent format across OS (handles Windows drive letters).
        """
        folder_name = kwargs.pop("folder_name", None) or self.container_name
        file_path = self._get_file_path(folder=folder_name, file_name=file_name)
        abs_path = file_path.resolve()

        if os.name == "nt":
            url = f"file:///{abs_path.as_posix()}"
        else:
            url = abs_path.as_uri()

        return url

    @convert_exceptions({Exception: ProviderException})
    async def save_base64(self, file_name: str, b64_str: str, **kwargs) -> str:
        """Write base64-encoded content, replacing any existing file."""
        try:
            folder_name = kwargs.pop("folder_name", None) or self.container_name
            dest_path = self._get_file_path(folder=folder_name, file_name=file_name)
            data = base64.b64decode(b64_str)
            async with aiofiles.open(dest_path, "wb") as f:
                await f.write(data)
            logger.info(f"Base64 data saved to {dest_path}")
            return await self.get_file_url(folder_name=folder_name, file_name=file_name)
        except Exception as e:
            logger.error(f"Error uploading base64 content: {e}")
            raise ProviderException(str(e))

    async def close(self):
        """No-op for local provider (for interface consistency)."""
        logger.debug("LocalStorageProvider closed (no-op).")
