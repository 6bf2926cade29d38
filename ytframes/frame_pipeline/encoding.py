import base64
import binascii
from typing import Tuple

from ytframes.exceptions import ValidationException

DATA_URI_PREFIX = "data:image/jpeg;base64,"


def to_data_uri(image_bytes: bytes) -> str:
    return DATA_URI_PREFIX + base64.b64encode(image_bytes).decode("ascii")


def decode_data_uri(value: str) -> Tuple[str, bytes]:
    """
    Split a (possibly prefixed) base64 image into its payload and bytes.

    Raises:
        ValidationException: If the payload is empty or not valid base64.
    """
    if not value:
        raise ValidationException("Image data is required")
    payload = value
    if value.startswith("data:"):
        _, sep, payload = value.partition(",")
        if not sep:
            raise ValidationException("Invalid base64 image data: missing payload after data URI header")
    payload = payload.strip()
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationException(f"Invalid base64 image data: {e}")
    if not data:
        raise ValidationException("Image data is empty")
    return payload, data
