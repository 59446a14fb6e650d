"""
Band extraction for Voyage screenshots.

Splits a full screenshot into the two areas the pipeline searches:
- Top band: the antimatter counter
- Bottom band: the six skill icons, values and star markers
"""

import cv2
import numpy as np
from PIL import Image
from typing import Tuple, Union

from .constants import ZERO_FLOOR_CUTOFF
from .layouts import VoyageLayout

# (x0, y0, x1, y1) in pixels, end-exclusive
Rect = Tuple[int, int, int, int]


def to_bgr(img: Union[np.ndarray, Image.Image]) -> np.ndarray:
    """
    Normalise an input raster to a 3-channel uint8 BGR array.

    Args:
        img: BGR/BGRA/grayscale numpy array, or PIL Image (RGB order).

    Returns:
        BGR image array.
    """
    if isinstance(img, Image.Image):
        img = cv2.cvtColor(np.array(img.convert('RGB')), cv2.COLOR_RGB2BGR)

    if img.dtype == np.uint16:
        # 16-bit PNGs keep their high byte
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = np.clip(img, 0, 255).astype(np.uint8)

    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)
    if img.shape[2] == 1:
        return cv2.cvtColor(img[..., 0], cv2.COLOR_GRAY2BGR)
    return img


def sub_mat(img: np.ndarray, row0: int, row1: int, col0: int, col1: int) -> np.ndarray:
    """
    Crop rows [row0, row1) and columns [col0, col1), clipped to the image.

    Args:
        img: Source image.
        row0, row1: Row range.
        col0, col1: Column range.

    Returns:
        Cropped view (possibly empty when the range falls outside the image).
    """
    rows, cols = img.shape[:2]
    row0 = min(max(int(row0), 0), rows)
    row1 = min(max(int(row1), row0), rows)
    col0 = min(max(int(col0), 0), cols)
    col1 = min(max(int(col1), col0), cols)
    return img[row0:row1, col0:col1]


def crop_rect(img: np.ndarray, rect: Rect) -> np.ndarray:
    """Crop an (x0, y0, x1, y1) rectangle, clipped to the image."""
    x0, y0, x1, y1 = rect
    return sub_mat(img, y0, y1, x0, x1)


def zero_floor(img: np.ndarray, cutoff: int = ZERO_FLOOR_CUTOFF) -> np.ndarray:
    """
    Zero every value at or below ``cutoff``, keep the rest unchanged.

    Suppresses faded stars and background texture before matching.
    """
    if img.size == 0:
        return img.copy()
    _, floored = cv2.threshold(img, cutoff, 1, cv2.THRESH_TOZERO)
    return floored


def top_band_rect(shape: Tuple[int, ...], layout: VoyageLayout) -> Rect:
    """
    Rectangle of the antimatter band for an image of the given shape.

    Args:
        shape: Image shape (rows, cols, ...).
        layout: Screen layout.

    Returns:
        (x0, y0, x1, y1) of the band.
    """
    rows, cols = shape[:2]
    band_rows = max(rows * layout.top_rows.numerator // layout.top_rows.denominator,
                    layout.top_min_rows)
    start, end = layout.top_cols
    return (
        cols * start.numerator // start.denominator,
        0,
        cols * end.numerator // end.denominator,
        min(band_rows, rows),
    )


def bottom_band_rect(shape: Tuple[int, ...], layout: VoyageLayout) -> Rect:
    """
    Rectangle of the skills band, sized from the image aspect ratio.

    Args:
        shape: Image shape (rows, cols, ...).
        layout: Screen layout.

    Returns:
        (x0, y0, x1, y1) of the band.
    """
    rows, cols = shape[:2]
    aspect_ratio = cols / rows
    scaled_percentage = rows * (aspect_ratio * layout.bottom_aspect_factor) / layout.bottom_aspect_divisor
    start, end = layout.bottom_cols
    return (
        cols * start.numerator // start.denominator,
        max(int(rows - scaled_percentage), 0),
        cols * end.numerator // end.denominator,
        rows,
    )


def extract_band(img: np.ndarray, rect: Rect) -> np.ndarray:
    """Crop a band and zero-floor it."""
    return zero_floor(crop_rect(img, rect))


def top_band(img: np.ndarray, layout: VoyageLayout) -> np.ndarray:
    """Thresholded antimatter band of a BGR screenshot."""
    return extract_band(img, top_band_rect(img.shape, layout))


def bottom_band(img: np.ndarray, layout: VoyageLayout) -> np.ndarray:
    """Thresholded skills band of a BGR screenshot."""
    return extract_band(img, bottom_band_rect(img.shape, layout))
