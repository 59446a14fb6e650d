"""
Synthetic Voyage screenshots and a fake OCR engine for tests.

Reference icons are seeded random block patterns. Digit glyphs are stood in
for by solid colour codes: FakeEngine reads the colour at the centre of a
region and returns the text registered for it.
"""

from typing import Dict, Optional, Tuple

import cv2
import numpy as np

from voyage_scan.ocr.engine import OCREngine
from voyage_scan.stars import StarMarker

# (seed, cells wide, cells high, cell size in px)
ICON_SPECS = {
    'cmd': (1, 8, 8, 8),
    'dip': (2, 9, 8, 8),
    'eng': (3, 8, 8, 8),
    'med': (4, 8, 8, 8),
    'sci': (5, 8, 8, 8),
    'sec': (6, 8, 8, 8),
    'antimatter': (7, 9, 9, 10),
}

SCREEN_SIZE = (1800, 900)  # (width, height)
TOP_ORIGIN = (600, 0)
BOTTOM_ORIGIN = (300, 660)
TOP_ICON_HEIGHT = 45
BOTTOM_ICON_HEIGHT = 48

# Positions inside the bands, worked out by hand from the v1 offsets
ANTIMATTER_POS = (40, 60)
ANTIMATTER_VALUE_RECT = (85, 60, 343, 105)
ICON_POSITIONS = {
    'cmd': (260, 20),
    'dip': (254, 80),
    'eng': (260, 140),
    'sec': (700, 20),
    'med': (700, 80),
    'sci': (700, 140),
}
VALUE_RECTS = {
    'cmd': (20, 20, 254, 68),
    'dip': (20, 68, 254, 140),
    'eng': (20, 140, 260, 188),
    'sec': (767, 20, 988, 68),
    'med': (767, 68, 988, 140),
    'sci': (767, 140, 988, 188),
}
STAR_RECTS = {
    'cmd': (314, 20, 380, 68),
    'dip': (314, 68, 380, 140),
    'eng': (314, 140, 380, 188),
    'sec': (628, 20, 692, 68),
    'med': (628, 68, 692, 140),
    'sci': (628, 140, 692, 188),
}

# Colour codes standing in for rendered digits (BGR, all survive the zero-floor)
CODE_COLORS = {
    'antimatter': (0, 0, 110),
    'cmd': (0, 0, 125),
    'dip': (0, 0, 140),
    'eng': (0, 0, 155),
    'med': (0, 0, 170),
    'sci': (0, 0, 185),
    'sec': (0, 0, 200),
}

STAR_COLORS = {
    StarMarker.PRIMARY: (0, 200, 255),
    StarMarker.SECONDARY: (200, 200, 200),
}

DEFAULT_SKILLS = {
    'cmd': ('1234', StarMarker.PRIMARY),
    'dip': ('567', StarMarker.NONE),
    'eng': ('890', StarMarker.NONE),
    'med': ('42', StarMarker.NONE),
    'sci': ('1500', StarMarker.SECONDARY),
    'sec': ('305', StarMarker.NONE),
}


def make_icon(seed: int, cells_w: int, cells_h: int, cell: int) -> np.ndarray:
    """Random 0/255 block pattern icon."""
    rng = np.random.default_rng(seed)
    grid = rng.integers(0, 2, size=(cells_h, cells_w, 3), dtype=np.uint8) * 255
    return np.repeat(np.repeat(grid, cell, axis=0), cell, axis=1).astype(np.uint8)


def make_icons() -> Dict[str, np.ndarray]:
    return {name: make_icon(*spec) for name, spec in ICON_SPECS.items()}


def scale_icon(icon: np.ndarray, height: int) -> np.ndarray:
    h, w = icon.shape[:2]
    return cv2.resize(icon, (w * height // h, height), interpolation=cv2.INTER_AREA)


def paste(img: np.ndarray, patch: np.ndarray, x: int, y: int) -> None:
    h, w = patch.shape[:2]
    img[y:y + h, x:x + w] = patch


def fill(img: np.ndarray, rect: Tuple[int, int, int, int], origin: Tuple[int, int], color) -> None:
    x0, y0, x1, y1 = rect
    ox, oy = origin
    img[oy + y0:oy + y1, ox + x0:ox + x1] = color


def build_voyage_screenshot(
    icons: Dict[str, np.ndarray],
    antimatter_text: str = '2500',
    skills: Optional[Dict[str, Tuple[str, StarMarker]]] = None,
    include_top: bool = True,
    include_bottom: bool = True,
    seed: int = 0
) -> Tuple[np.ndarray, Dict[Tuple[int, int, int], str]]:
    """
    Composite a Voyage screenshot from the reference icons.

    Returns:
        (BGR screenshot, readings for FakeEngine)
    """
    skills = DEFAULT_SKILLS if skills is None else skills
    width, height = SCREEN_SIZE
    rng = np.random.default_rng(seed)
    # Faint texture, removed by the zero-floor
    img = rng.integers(0, 91, size=(height, width, 3), dtype=np.uint8)
    readings = {}

    if include_top:
        ax, ay = ANTIMATTER_POS
        paste(img, scale_icon(icons['antimatter'], TOP_ICON_HEIGHT),
              TOP_ORIGIN[0] + ax, TOP_ORIGIN[1] + ay)
        fill(img, ANTIMATTER_VALUE_RECT, TOP_ORIGIN, CODE_COLORS['antimatter'])
        readings[CODE_COLORS['antimatter']] = antimatter_text

    if include_bottom:
        for name, (x, y) in ICON_POSITIONS.items():
            paste(img, scale_icon(icons[name], BOTTOM_ICON_HEIGHT),
                  BOTTOM_ORIGIN[0] + x, BOTTOM_ORIGIN[1] + y)
        for name, (text, marker) in skills.items():
            fill(img, VALUE_RECTS[name], BOTTOM_ORIGIN, CODE_COLORS[name])
            readings[CODE_COLORS[name]] = text
            if marker in STAR_COLORS:
                fill(img, STAR_RECTS[name], BOTTOM_ORIGIN, STAR_COLORS[marker])

    return img, readings


class FakeEngine(OCREngine):
    """OCR stand-in: maps the colour at a region's centre to text."""

    name = 'fake'

    def __init__(self, readings: Optional[Dict[Tuple[int, ...], str]] = None,
                 events: Optional[list] = None, label: str = 'engine'):
        self.readings = dict(readings or {})
        self.events = events
        self.label = label
        self.whitelist = None
        self.closed = False
        self.calls = 0
        if self.events is not None:
            self.events.append(('open', label))

    def configure(self, whitelist: str) -> None:
        self.whitelist = whitelist

    def recognize_text(self, region: np.ndarray) -> str:
        if self.closed:
            raise RuntimeError("engine used after close")
        self.calls += 1
        rows, cols = region.shape[:2]
        pixel = region[rows // 2, cols // 2]
        key = tuple(int(v) for v in np.atleast_1d(pixel))
        return self.readings.get(key, '')

    def close(self) -> None:
        self.closed = True
        if self.events is not None:
            self.events.append(('close', self.label))


class TextEngine(OCREngine):
    """OCR stand-in returning fixed text for every region."""

    name = 'text'

    def __init__(self, text: str = ''):
        self.text = text
        self.whitelist = None
        self.calls = 0

    def configure(self, whitelist: str) -> None:
        self.whitelist = whitelist

    def recognize_text(self, region: np.ndarray) -> str:
        self.calls += 1
        return self.text
