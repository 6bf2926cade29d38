from typing import Dict, Optional


class YTFramesException(Exception):
    """Base exception for the frame extraction service."""

    def __init__(self, message: str, error_code: str = None, details: Optional[Dict] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ProviderException(YTFramesException):
    """Raised when an external provider fails."""
    pass


class ToolExecutionException(ProviderException):
    """Raised when an external tool (yt-dlp, ffmpeg) fails or misbehaves."""
    pass


class ConfigurationException(YTFramesException):
    """Raised when configuration is invalid."""
    pass


class ValidationException(YTFramesException):
    """Raised when request input validation fails."""
    pass
