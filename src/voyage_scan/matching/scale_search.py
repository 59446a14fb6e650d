"""
Scale-invariant template search for Voyage screenshot icons.

The rendering scale of a screenshot is unknown, so each reference icon is
resampled over a range of candidate heights and correlated against the
target region. All icons of one screenshot share a scale: the first height at
which every requested reference clears the threshold is accepted for all.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

import cv2
import numpy as np

from ..processing.bands import zero_floor

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


@dataclass
class ScaleSearchResult:
    """
    Accepted match of one or more references at a common scale.

    Attributes:
        anchors: Reference name -> top-left (x, y) of its best match.
        widths: Reference name -> rescaled icon width.
        height: Accepted icon height.
        scores: Reference name -> peak correlation score.
    """

    anchors: Dict[str, Point] = field(default_factory=dict)
    widths: Dict[str, int] = field(default_factory=dict)
    height: int = 0
    scores: Dict[str, float] = field(default_factory=dict)

    @property
    def score(self) -> float:
        """Lowest peak score among the matched references."""
        return min(self.scores.values()) if self.scores else 0.0


def rescale_to_height(icon: np.ndarray, height: int) -> np.ndarray:
    """
    Resize an icon to ``height`` rows, keeping its aspect ratio.

    Args:
        icon: Reference icon.
        height: Target height in pixels.

    Returns:
        Area-resampled icon of width ``cols * height // rows``.
    """
    rows, cols = icon.shape[:2]
    width = max(cols * height // rows, 1)
    return cv2.resize(icon, (width, height), interpolation=cv2.INTER_AREA)


def match_template(region: np.ndarray, template: np.ndarray, threshold: float) -> Tuple[float, Point]:
    """
    Normalized cross-correlation of a template against a region.

    The region is zero-floored first; the response is zero-floored at
    ``threshold`` so weak matches report a score of 0.

    Args:
        region: Image to search.
        template: Already rescaled reference icon.
        threshold: Response floor.

    Returns:
        (peak score, top-left location of the peak).
    """
    floored = zero_floor(region)
    response = cv2.matchTemplate(floored, template, cv2.TM_CCORR_NORMED)
    _, response = cv2.threshold(response, threshold, 1, cv2.THRESH_TOZERO)
    _, max_val, _, max_loc = cv2.minMaxLoc(response)
    return float(max_val), (int(max_loc[0]), int(max_loc[1]))


def _fits(region: np.ndarray, template: np.ndarray) -> bool:
    return template.shape[0] <= region.shape[0] and template.shape[1] <= region.shape[1]


def scale_search(
    region: np.ndarray,
    references: Mapping[str, np.ndarray],
    min_height: int,
    max_height: int,
    step_height: int,
    threshold: float
) -> Optional[ScaleSearchResult]:
    """
    Find the first common scale at which all references match.

    Args:
        region: Thresholded band to search.
        references: Reference name -> original icon.
        min_height: First candidate icon height.
        max_height: Last candidate icon height (inclusive).
        step_height: Height increment; values below 1 are treated as 1.
        threshold: Every reference must score strictly above this.

    Returns:
        ScaleSearchResult for the accepted height, or None if no height
        in the range satisfies every reference.
    """
    if region.size == 0 or not references:
        return None

    step_height = max(int(step_height), 1)
    height = max(int(min_height), 1)

    while height <= max_height:
        scaled = {name: rescale_to_height(icon, height) for name, icon in references.items()}
        if not all(_fits(region, tpl) for tpl in scaled.values()):
            logger.debug("Icons at height %d no longer fit region %s", height, region.shape[:2])
            break

        result = ScaleSearchResult(height=height)
        for name, tpl in scaled.items():
            score, loc = match_template(region, tpl, threshold)
            result.anchors[name] = loc
            result.widths[name] = tpl.shape[1]
            result.scores[name] = score

        logger.debug("Height %d scores %s", height,
                     {name: round(score, 3) for name, score in result.scores.items()})

        if all(score > threshold for score in result.scores.values()):
            logger.debug("Accepted height %d for %s at %s", height, list(references), result.anchors)
            return result

        height += step_height

    return None
