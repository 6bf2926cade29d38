"""
Fixed-format cropping of extracted frames.

Portrait modes are centre-anchored cover-fit crops. Landscape scales the frame
to fit inside 1200x675 and then cuts a fixed 628 px band starting 24 px from
the top.
"""

from io import BytesIO
from typing import Union

from loguru import logger
from PIL import Image, ImageOps

from .models import SizeMode

JPEG_QUALITY = 90
LANDSCAPE_FIT_BOX = (1200, 675)
LANDSCAPE_TOP_OFFSET = 24


def _cover_fit(image: Image.Image, size) -> Image.Image:
    return ImageOps.fit(image, size, method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))


def _landscape(image: Image.Image) -> Image.Image:
    target_w, target_h = SizeMode.LANDSCAPE.dimensions
    fitted = ImageOps.contain(image, LANDSCAPE_FIT_BOX, method=Image.Resampling.LANCZOS)
    if fitted.width < target_w or fitted.height < LANDSCAPE_TOP_OFFSET + target_h:
        # Source narrower than 16:9 cannot fill the fixed band
        logger.debug(f"Fitted frame {fitted.size} too small for fixed band, using cover-fit")
        return _cover_fit(image, (target_w, target_h))
    return fitted.crop((0, LANDSCAPE_TOP_OFFSET, target_w, LANDSCAPE_TOP_OFFSET + target_h))


def crop_image(source: Union[str, Image.Image], size_mode: SizeMode) -> Image.Image:
    """Return ``source`` cropped to the dimensions of ``size_mode``."""
    size_mode = SizeMode(size_mode)
    if isinstance(source, Image.Image):
        image = source
    else:
        with Image.open(source) as opened:
            image = opened.convert("RGB")
    if image.mode != "RGB":
        image = image.convert("RGB")

    if size_mode is SizeMode.LANDSCAPE:
        return _landscape(image)
    return _cover_fit(image, size_mode.dimensions)


def encode_jpeg(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="JPEG", quality=JPEG_QUALITY, optimize=True)
    return buffer.getvalue()


def crop_to_bytes(source_path: str, size_mode: SizeMode) -> bytes:
    return encode_jpeg(crop_image(source_path, size_mode))


def crop_to_file(source_path: str, output_path: str, size_mode: SizeMode) -> str:
    cropped = crop_image(source_path, size_mode)
    cropped.save(output_path, format="JPEG", quality=JPEG_QUALITY, optimize=True)
    logger.debug(f"Cropped {source_path} to {cropped.size} -> {output_path}")
    return output_path
