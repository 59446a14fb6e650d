"""
Screenshot sources for Voyage analysis.

Accepts a URL, a local file path, encoded bytes, a PIL Image or an already
decoded array, and returns a decoded raster plus the encoded byte size.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np
import requests
from PIL import Image

from ..errors import ImageSourceError
from ..processing.constants import FETCH_TIMEOUT

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, np.ndarray, Image.Image]


def is_url(source) -> bool:
    """Check whether ``source`` is an http(s) URL string."""
    return isinstance(source, str) and source.lower().startswith(('http://', 'https://'))


def fetch_bytes(url: str, timeout: float = FETCH_TIMEOUT) -> bytes:
    """
    Download a screenshot.

    Args:
        url: http(s) URL.
        timeout: Request timeout in seconds.

    Returns:
        Response body.

    Raises:
        ImageSourceError: On network errors or non-2xx responses.
    """
    try:
        res = requests.get(url, timeout=timeout)
        res.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise ImageSourceError(f"Could not download {url}: {e}") from e

    logger.debug("Downloaded %d bytes from %s", len(res.content), url)
    return res.content


def decode_image(data: bytes) -> np.ndarray:
    """
    Decode an encoded image (PNG, JPEG, ...) keeping its channels.

    Raises:
        ImageSourceError: If the bytes are not a decodable image.
    """
    buf = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED) if buf.size else None
    if img is None:
        raise ImageSourceError(f"Could not decode image ({len(data)} bytes)")
    return img


def load_image(source: ImageSource, timeout: float = FETCH_TIMEOUT) -> Tuple[np.ndarray, int]:
    """
    Resolve any supported source into a raster.

    Args:
        source: URL, file path, encoded bytes, PIL Image or numpy array.
        timeout: Download timeout for URLs.

    Returns:
        Tuple of (decoded image, encoded size in bytes). In-memory rasters
        report a size of 0.

    Raises:
        ImageSourceError: If the source cannot be read or decoded.
    """
    if isinstance(source, np.ndarray):
        if source.ndim not in (2, 3) or source.size == 0:
            raise ImageSourceError(f"Expected a non-empty 2D or 3D image array, got shape {source.shape}")
        return source, 0

    if isinstance(source, Image.Image):
        # PIL decodes lazily, so a truncated file only fails here
        try:
            rgb = np.array(source.convert('RGB'))
        except (OSError, ValueError) as e:
            raise ImageSourceError(f"Could not decode PIL image: {e}") from e
        return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR), 0

    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
        return decode_image(data), len(data)

    if is_url(source):
        data = fetch_bytes(source, timeout)
        return decode_image(data), len(data)

    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            data = path.read_bytes()
        except (OSError, ValueError) as e:
            raise ImageSourceError(f"Could not read {path!r}: {e}") from e
        return decode_image(data), len(data)

    raise ImageSourceError(f"Unsupported image source type {type(source).__name__}")
