import math
from typing import Iterable, List, Optional, Tuple, Union

from .models import TimestampPoint

SINGLE_FRAME_PERCENT = 65

MULTI_FRAME_POINTS: List[Tuple[str, int]] = [
    ("middle", 50),
    ("climax", 65),
    ("late", 75),
]

# 4, 8, ..., 96
GRID_PERCENTAGES: List[int] = list(range(4, 97, 4))


def compute_offset(duration: Union[int, float], percent: Union[int, float]) -> int:
    """Whole-second offset at ``percent`` of ``duration``. Not clamped."""
    return math.floor(duration * percent / 100)


def plan_timestamps(
    duration: Union[int, float],
    points: Iterable[Union[int, Tuple[Optional[str], int]]],
) -> List[TimestampPoint]:
    """
    Build an ordered plan from bare percentages or ``(label, percent)`` pairs.
    """
    plan = []
    for point in points:
        if isinstance(point, tuple):
            label, percent = point
        else:
            label, percent = None, point
        plan.append(TimestampPoint(label=label, percent=percent, timestamp=compute_offset(duration, percent)))
    return plan


def plan_multi_frame(duration: Union[int, float]) -> List[TimestampPoint]:
    return plan_timestamps(duration, MULTI_FRAME_POINTS)


def plan_grid(duration: Union[int, float]) -> List[TimestampPoint]:
    return plan_timestamps(duration, GRID_PERCENTAGES)
