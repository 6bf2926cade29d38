from io import BytesIO

import pytest
from PIL import Image

from ytframes.frame_pipeline.image_cropper import crop_image, crop_to_bytes, crop_to_file
from ytframes.frame_pipeline.models import SizeMode

from conftest import make_still


@pytest.mark.parametrize(
    "mode, expected",
    [
        (SizeMode.PORTRAIT, (1080, 1920)),
        (SizeMode.PORTRAIT_4X5, (1080, 1350)),
        (SizeMode.LANDSCAPE, (1200, 628)),
    ],
)
@pytest.mark.parametrize("source_size", [(1920, 1080), (1280, 720), (640, 480), (720, 1280)])
def test_output_dimensions_are_fixed(tmp_path, mode, expected, source_size):
    source = make_still(tmp_path / "frame.jpg", size=source_size)
    assert crop_image(source, mode).size == expected


def test_accepts_plain_string_mode(tmp_path):
    source = make_still(tmp_path / "frame.jpg")
    assert crop_image(source, "portrait_4x5").size == (1080, 1350)


def test_unknown_mode_rejected(tmp_path):
    source = make_still(tmp_path / "frame.jpg")
    with pytest.raises(ValueError):
        crop_image(source, "square")


def test_landscape_removes_fixed_top_band(tmp_path):
    image = Image.new("RGB", (1920, 1080), (0, 0, 255))
    # 30 source rows scale to under 24 rows in the 1200x675 fit
    image.paste((255, 0, 0), (0, 0, 1920, 30))
    path = tmp_path / "banded.png"
    image.save(path)

    cropped = crop_image(str(path), SizeMode.LANDSCAPE)

    r, g, b = cropped.getpixel((600, 0))
    assert b > 200 and r < 60


def test_portrait_is_centre_anchored(tmp_path):
    image = Image.new("RGB", (1920, 1080), (0, 0, 0))
    image.paste((255, 255, 255), (810, 0, 1110, 1080))
    path = tmp_path / "stripe.png"
    image.save(path)

    cropped = crop_image(str(path), SizeMode.PORTRAIT)

    assert cropped.getpixel((540, 960))[0] > 200
    assert cropped.getpixel((5, 960))[0] < 60


def test_encoded_output_is_jpeg(tmp_path):
    source = make_still(tmp_path / "frame.jpg")
    data = crop_to_bytes(source, SizeMode.LANDSCAPE)

    assert data[:2] == b"\xff\xd8"
    with Image.open(BytesIO(data)) as decoded:
        assert decoded.format == "JPEG"
        assert decoded.size == (1200, 628)


def test_crop_to_file(tmp_path):
    source = make_still(tmp_path / "frame.jpg")
    output = crop_to_file(source, str(tmp_path / "out.jpg"), SizeMode.PORTRAIT)

    with Image.open(output) as written:
        assert written.size == (1080, 1920)
