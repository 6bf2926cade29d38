import pytest

from ytframes.frame_pipeline.url_parser import parse_video_id


@pytest.mark.parametrize(
    "value",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=share",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "dQw4w9WgXcQ",
    ],
)
def test_supported_shapes_return_identifier(value):
    assert parse_video_id(value) == "dQw4w9WgXcQ"


def test_identifier_keeps_dashes_and_underscores():
    assert parse_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"


@pytest.mark.parametrize(
    "value",
    [
        "not a url",
        "",
        None,
        "dQw4w9WgXc",
        "dQw4w9WgXcQQ",
        "https://vimeo.com/123456789",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=short",
    ],
)
def test_other_strings_are_not_found(value):
    assert parse_video_id(value) is None
