"""
Shared service objects for the routers.

Tests replace these through ``app.dependency_overrides``.
"""

from functools import lru_cache

from loguru import logger

from ytframes.config.settings import ServiceConfig
from ytframes.frame_pipeline.extraction_pipeline import FrameExtractionPipeline
from ytframes.frame_pipeline.selection_saver import SelectionSaver
from ytframes.providers.factory import ProviderFactory

_selection_saver = None


@lru_cache
def get_config() -> ServiceConfig:
    return ServiceConfig()


@lru_cache
def get_pipeline() -> FrameExtractionPipeline:
    config = get_config()
    return FrameExtractionPipeline(
        video_info=ProviderFactory.create_video_info_provider(config=config),
        downloader=ProviderFactory.create_video_download_provider(config=config),
        frame_extractor=ProviderFactory.create_frame_extraction_provider(config=config),
        tools_config=config.tools,
    )


def get_selection_saver() -> SelectionSaver:
    global _selection_saver
    if _selection_saver is None:
        config = get_config()
        _selection_saver = SelectionSaver(
            storage=ProviderFactory.create_storage_provider(config=config),
            spreadsheet=ProviderFactory.create_spreadsheet_provider(config=config),
            folder_name=config.storage.container_name,
        )
    return _selection_saver


async def close_providers():
    global _selection_saver
    if _selection_saver is not None:
        logger.info("Closing media store and spreadsheet providers")
        await _selection_saver.storage.close()
        await _selection_saver.spreadsheet.close()
        _selection_saver = None
