from abc import ABC, abstractmethod


class StorageProvider(ABC):
    """Abstract base class for media store providers."""

    @abstractmethod
    async def get_file_url(self, file_name: str, **kwargs) -> str:
        """Generate a URL for a file."""
        pass

    @abstractmethod
    async def save_base64(self, file_name: str, b64_str: str, **kwargs) -> str:
        """Save base64-encoded data to storage, overwriting any existing object."""
        pass

    @abstractmethod
    async def close(self):
        """Close the underlying client and cleanup."""
        pass
