import base64
from typing import Dict, Any

from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient
from loguru import logger

from ytframes.providers.base import StorageProvider
from ytframes.providers.credentials import AzureCredentials
from ytframes.utils.error_handler import convert_exceptions
from ytframes.utils.error_handler import ProviderException, ConfigurationException


class AzureStorageProvider(StorageProvider):
    """Azure Blob Storage provider implementation."""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize Azure Storage Provider.

        Args:
            config: Configuration dictionary with:
                - account_name / account_key: shared key auth
                - account_url: optional, derived from account_name when absent
                - container_name: container frames are uploaded to
                - use_managed_identity: use azure-identity instead of the key
        """
        self.config = config
        self.container_name = config.get("container_name") or "frames"
        self.credential = None
        self.service_client = None

    def _account_url(self) -> str:
        account_url = self.config.get("account_url")
        if account_url:
            return account_url.rstrip("/")
        account_name = self.config.get("account_name")
        if not account_name:
            raise ConfigurationException("Azure Storage account_url or account_name is required")
        return f"https://{account_name}.blob.core.windows.net"

    def _initialize(self):
        """Initialize credential and service client."""
        if self.service_client is None:
            try:
                self.credential = AzureCredentials.get_storage_credential(self.config)
                self.service_client = BlobServiceClient(
                    account_url=self._account_url(),
                    credential=self.credential,
                )
                logger.info("Successfully initialized Azure Blob Storage client")
            except ConfigurationException:
                raise
            except Exception as e:
                logger.exception(f"Failed to initialize Azure Blob Storage client: {e}")
                raise ProviderException(f"Failed to initialize Azure Blob Storage client: {e}")

    def _ensure_initialized(self):
        """Ensure the client is initialized before operations."""
        if self.service_client is None:
            self._initialize()

    async def get_file_url(self, file_name: str, **kwargs) -> str:
        """Public URL of a blob, whether or not it exists yet."""
        folder_name = kwargs.pop("folder_name", None) or self.container_name
        url = f"{self._account_url()}/{folder_name}/{file_name}"
        logger.info(f"Generated file URL: {url}")
        return url

    @convert_exceptions({Exception: ProviderException})
    async def save_base64(self, file_name: str, b64_str: str, **kwargs) -> str:
        """Upload base64-encoded data to blob storage."""
        self._ensure_initialized()

        client = None
        try:
            folder_name = kwargs.pop("folder_name", None) or self.container_name
            content_type = kwargs.pop("content_type", "image/jpeg")
            logger.info(f"Uploading base64 data to Container: {folder_name}, File: {file_name}")
            client = self.service_client.get_blob_client(container=folder_name, blob=file_name)
            data = base64.b64decode(b64_str)
            await client.upload_blob(
                data,
                overwrite=True,
                content_settings=ContentSettings(content_type=content_type),
            )

            url = f"{self.service_client.url.rstrip('/')}/{folder_name}/{file_name}"
            return url
        except Exception as e:
            logger.exception(f"Error uploading base64 data: {e}")
            raise ProviderException(f"Error uploading base64 data: {e}")
        finally:
            if client:
                await client.close()

    async def close(self):
        """Close the underlying service client and cleanup."""
        if self.service_client:
            logger.info("Closing Azure Blob Storage client")
            await self.service_client.close()
            self.service_client = None
        if self.credential is not None and hasattr(self.credential, "close"):
            await self.credential.close()
            self.credential = None
