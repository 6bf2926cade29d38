"""
Video identifier extraction from user supplied URLs.
"""

import re
from typing import Optional

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"^([a-zA-Z0-9_-]{11})$"),
]


def parse_video_id(value: str) -> Optional[str]:
    """
    Return the 11-character video identifier embedded in ``value``.

    Long-form URLs (``watch?v=``, ``youtu.be/``, ``embed/``) are tried first,
    then a bare identifier. Returns None when nothing matches.
    """
    if not value:
        return None
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(value)
        if match:
            return match.group(1)
    return None
