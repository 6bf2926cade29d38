"""
Centralized credential management for the media store and spreadsheet providers.
"""

import json
from typing import Any, Dict, Optional, Union

from azure.identity.aio import (
    DefaultAzureCredential as AsyncDefaultAzureCredential,
    AzureCliCredential as AsyncAzureCliCredential,
    ChainedTokenCredential as AsyncChainedTokenCredential
)
from google.oauth2 import service_account

from ytframes.exceptions import ConfigurationException

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class AzureCredentials:
    """Credential selection for Azure Blob Storage."""

    @staticmethod
    def get_async_credentials():
        """
        Managed identity credentials (async version).
        Tries the Azure CLI first, then DefaultAzureCredential.
        """
        return AsyncChainedTokenCredential(
            AsyncAzureCliCredential(),
            AsyncDefaultAzureCredential()
        )

    @staticmethod
    def get_storage_credential(config: Dict[str, Any]):
        """
        Credential for a storage account: managed identity when enabled,
        otherwise the shared account key.
        """
        if config.get("use_managed_identity"):
            return AzureCredentials.get_async_credentials()
        account_name = config.get("account_name")
        account_key = config.get("account_key")
        if not account_name or not account_key:
            raise ConfigurationException(
                "STORAGE_ACCOUNT_NAME and STORAGE_ACCOUNT_KEY are required without managed identity"
            )
        return {"account_name": account_name, "account_key": account_key}


class GoogleCredentials:
    """Service-account credentials for Google APIs."""

    @staticmethod
    def from_json_blob(credentials_json: Optional[Union[str, Dict[str, Any]]], scopes=None):
        if not credentials_json:
            raise ConfigurationException("SHEETS_CREDENTIALS_JSON is required for the google provider")
        try:
            info = json.loads(credentials_json) if isinstance(credentials_json, str) else credentials_json
        except json.JSONDecodeError as e:
            raise ConfigurationException(f"SHEETS_CREDENTIALS_JSON is not valid JSON: {e}")
        return service_account.Credentials.from_service_account_info(info, scopes=scopes or SHEETS_SCOPES)
