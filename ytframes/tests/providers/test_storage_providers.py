import base64
from pathlib import Path

import pytest

from ytframes.exceptions import ConfigurationException
from ytframes.providers.azure_providers import AzureStorageProvider
from ytframes.providers.credentials import AzureCredentials
from ytframes.providers.custom_providers import LocalStorageProvider


async def test_local_save_and_overwrite(tmp_path):
    provider = LocalStorageProvider({"base_path": str(tmp_path), "container_name": "frames"})

    url = await provider.save_base64("abc-48-portrait", base64.b64encode(b"first").decode())
    url_again = await provider.save_base64("abc-48-portrait", base64.b64encode(b"second").decode())

    assert url == url_again
    assert url.startswith("file://")
    assert (tmp_path / "frames" / "abc-48-portrait").read_bytes() == b"second"


async def test_local_folder_override(tmp_path):
    provider = LocalStorageProvider({"base_path": str(tmp_path)})

    url = await provider.save_base64("key", base64.b64encode(b"x").decode(), folder_name="selected")

    assert Path(tmp_path / "selected" / "key").exists()
    assert url == (tmp_path / "selected" / "key").resolve().as_uri()


async def test_azure_file_url_from_account_name():
    provider = AzureStorageProvider({"account_name": "media", "account_key": "secret", "container_name": "frames"})

    assert await provider.get_file_url("abc-4-landscape") == \
        "https://media.blob.core.windows.net/frames/abc-4-landscape"


async def test_azure_file_url_from_explicit_endpoint():
    provider = AzureStorageProvider({"account_url": "http://127.0.0.1:10000/devstoreaccount1/"})

    url = await provider.get_file_url("key", folder_name="other")

    assert url == "http://127.0.0.1:10000/devstoreaccount1/other/key"


def test_shared_key_credential():
    credential = AzureCredentials.get_storage_credential({"account_name": "media", "account_key": "secret"})
    assert credential == {"account_name": "media", "account_key": "secret"}


def test_shared_key_required_without_managed_identity():
    with pytest.raises(ConfigurationException):
        AzureCredentials.get_storage_credential({"account_name": "media"})


async def test_azure_upload_without_key_is_configuration_error():
    provider = AzureStorageProvider({"account_name": "media"})
    with pytest.raises(ConfigurationException):
        await provider.save_base64("key", base64.b64encode(b"x").decode())
