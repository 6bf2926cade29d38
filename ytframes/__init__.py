"""Frame extraction from YouTube videos: download, extract, crop, save."""

__version__ = "1.0.0"
