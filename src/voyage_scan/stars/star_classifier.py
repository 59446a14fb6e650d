"""
Primary/secondary star marker detection using mean colour checking.

The marker next to each skill is classified from the per-channel mean of a
small window at the centre of its region.
"""

from enum import IntEnum

import cv2
import numpy as np

from ..processing.bands import sub_mat
from ..processing.constants import (
    STAR_WINDOW_HALF,
    STAR_EMPTY_SUM,
    STAR_PRIMARY_FIRST_CHANNEL,
    STAR_SECONDARY_SUM,
)


class StarMarker(IntEnum):
    """Skill emphasis marker. Values match the serialized ``primary`` field."""

    NONE = 0
    PRIMARY = 1
    SECONDARY = 2
    # Lit but neither colour profile; left distinct rather than guessed
    AMBIGUOUS = -1


def classify_star(patch: np.ndarray) -> StarMarker:
    """
    Classify the star marker in a region.

    Args:
        patch: BGR star region (already zero-floored).

    Returns:
        NONE when the window is dark, PRIMARY when the first channel is
        near zero, SECONDARY when bright, AMBIGUOUS otherwise.
    """
    if patch.size == 0:
        return StarMarker.NONE

    rows, cols = patch.shape[:2]
    center = sub_mat(
        patch,
        rows // 2 - STAR_WINDOW_HALF, rows // 2 + STAR_WINDOW_HALF,
        cols // 2 - STAR_WINDOW_HALF, cols // 2 + STAR_WINDOW_HALF,
    )
    if center.size == 0:
        return StarMarker.NONE

    mean = cv2.mean(center)
    total = mean[0] + mean[1] + mean[2]

    if total < STAR_EMPTY_SUM:
        return StarMarker.NONE
    elif mean[0] < STAR_PRIMARY_FIRST_CHANNEL:
        return StarMarker.PRIMARY
    elif total > STAR_SECONDARY_SUM:
        return StarMarker.SECONDARY
    return StarMarker.AMBIGUOUS
