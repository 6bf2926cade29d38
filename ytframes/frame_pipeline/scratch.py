import os
import shutil
import tempfile

from loguru import logger


class ScratchSpace:
    """
    Request-scoped directory for temporary artifacts.

    Each request gets its own directory under ``root`` so concurrent requests
    for the same video never share paths. ``cleanup`` logs failures instead of
    raising.
    """

    def __init__(self, root: str, video_id: str):
        os.makedirs(root, exist_ok=True)
        self.video_id = video_id
        self.directory = tempfile.mkdtemp(prefix=f"{video_id}-", dir=root)
        logger.debug(f"Created scratch space {self.directory}")

    def path(self, name: str) -> str:
        return os.path.join(self.directory, f"{self.video_id}_{name}")

    def remove(self, *paths: str) -> None:
        for path in paths:
            try:
                if os.path.exists(path):
                    os.remove(path)
            except OSError as e:
                logger.error(f"Cleanup error for {path}: {e}")

    def cleanup(self) -> None:
        try:
            shutil.rmtree(self.directory)
            logger.debug(f"Removed scratch space {self.directory}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Cleanup error for {self.directory}: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.cleanup()
