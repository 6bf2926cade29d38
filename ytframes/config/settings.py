import os
import tempfile
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv


class ToolsConfig(BaseSettings):
    """External tool configuration (yt-dlp, ffmpeg) and scratch storage."""

    ffmpeg_binary: str = Field(default="ffmpeg")
    video_format: str = Field(default="bestvideo[height<=1080]+bestaudio/best[height<=1080]")
    merge_output_format: str = Field(default="mp4")
    scratch_dir: str = Field(default=os.path.join(tempfile.gettempdir(), "frames"))
    max_output_mb: int = Field(default=10, ge=1)
    default_duration: float = Field(default=300.0)
    segment_seconds: float = Field(default=2.0, gt=0)
    # "segment" downloads a short window around the offset, "full" the whole video
    single_frame_download_mode: str = Field(default="segment", pattern="^(segment|full)$")

    model_config = SettingsConfigDict(
        env_prefix="TOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    @property
    def max_output_bytes(self) -> int:
        return self.max_output_mb * 1024 * 1024


class StorageConfig(BaseSettings):
    """Media store configuration."""

    provider: str = Field(default="azure")
    account_name: Optional[str] = Field(default=None)
    account_key: Optional[str] = Field(default=None)
    account_url: Optional[str] = Field(default=None)
    container_name: str = Field(default="frames")
    use_managed_identity: bool = Field(default=False)
    base_path: str = Field(default="./local_storage")

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )


class SheetsConfig(BaseSettings):
    """Spreadsheet logging configuration."""

    provider: str = Field(default="google")
    spreadsheet_id: Optional[str] = Field(default=None)
    # Raw service-account JSON document
    credentials_json: Optional[str] = Field(default=None)
    worksheet: str = Field(default="Sheet1")
    local_path: str = Field(default="./local_storage/selections.csv")

    model_config = SettingsConfigDict(
        env_prefix="SHEETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)
    enable_file: bool = Field(default=False)
    max_file_size: str = Field(default="10 MB")
    retention_days: int = Field(default=7)

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )


class ServiceConfig(BaseSettings):
    """Main configuration class."""

    app_name: str = Field(default="YouTube Frame Extraction API")
    app_version: str = Field(default="1.0.0")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    def __init__(self, **kwargs):
        # Force load environment variables before initializing
        load_dotenv(find_dotenv())

        super().__init__(**kwargs)
        self._tools = None
        self._storage = None
        self._sheets = None
        self._logging = None

    @property
    def tools(self) -> ToolsConfig:
        if self._tools is None:
            self._tools = ToolsConfig()
        return self._tools

    @property
    def storage(self) -> StorageConfig:
        if self._storage is None:
            self._storage = StorageConfig()
        return self._storage

    @property
    def sheets(self) -> SheetsConfig:
        if self._sheets is None:
            self._sheets = SheetsConfig()
        return self._sheets

    @property
    def logging(self) -> LoggingConfig:
        if self._logging is None:
            self._logging = LoggingConfig()
        return self._logging
