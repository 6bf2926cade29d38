import sys
from typing import Optional
from loguru import logger


class LoggerManager:
    def __init__(self):
        self.console_sink_id = None
        self.file_sink_id = None
        self.level = "INFO"

        # Always remove the default handler
        logger.remove()

    def configure(self, level: str = "INFO", log_file: Optional[str] = None,
                  max_file_size: str = "10 MB", retention_days: int = 7):
        """Reset sinks to the given level, optionally adding a rotating file sink."""
        self.level = level.upper()
        self.disable_console()
        self.enable_console()

        if self.file_sink_id is not None:
            logger.remove(self.file_sink_id)
            self.file_sink_id = None
        if log_file:
            self.file_sink_id = logger.add(
                log_file,
                level=self.level,
                rotation=max_file_size,
                retention=f"{retention_days} days",
                enqueue=True,
            )

    def enable_console(self):
        if self.console_sink_id is None:
            self.console_sink_id = logger.add(sys.stdout, level=self.level, colorize=True)

    def disable_console(self):
        if self.console_sink_id is not None:
            logger.remove(self.console_sink_id)
            self.console_sink_id = None


log_manager = LoggerManager()
