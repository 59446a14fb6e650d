"""
Versioned screen layouts for the Voyage summary screen.

Every measurement region is expressed relative to a solved anchor icon, as a
multiple of the scaled icon width. Offsets follow C-style integer semantics:

- int / Fraction multiples: the product ``width * multiple`` is truncated
  toward zero, then added to the anchor coordinate.
- float multiples: ``anchor + width * multiple`` is truncated as a whole.
- ``ICON_DELTA``: the right edge is pulled left by the difference between the
  skill's own icon width and the SCI icon width, rescaled to the solved scale.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, Tuple, Union

Offset = Union[int, float, Fraction, str]

# Sentinel offset: cmd.x - (icon_w - sci_w) * (scaled_width / sci_w)
ICON_DELTA = 'icon_delta'

# Row bands between the two anchors
ROW_TOP = 'top'        # [cmd.y, cmd.y + h)
ROW_MIDDLE = 'middle'  # [cmd.y + h, sci.y)
ROW_BOTTOM = 'bottom'  # [sci.y, sci.y + h)


@dataclass(frozen=True)
class Span:
    """Horizontal extent of a region: (anchor name, start offset, end offset)."""

    anchor: str
    start: Offset
    end: Offset


@dataclass(frozen=True)
class SkillSlot:
    """Where one skill's value digits and star marker sit."""

    row: str
    value: Span
    star: Span


@dataclass(frozen=True)
class SearchRange:
    """Candidate icon heights as fractions of the searched band height."""

    min_height: Fraction
    max_height: Fraction
    step: Fraction

    def heights(self, rows: int) -> Tuple[int, int, int]:
        """Integer (min, max, step) for a band with the given row count."""
        return (
            rows * self.min_height.numerator // self.min_height.denominator,
            rows * self.max_height.numerator // self.max_height.denominator,
            rows * self.step.numerator // self.step.denominator,
        )


@dataclass(frozen=True)
class VoyageLayout:
    """
    One versioned visual layout of the Voyage screen.

    Attributes:
        version: Layout identifier used for lookup.
        top_rows: Fraction of image rows covered by the antimatter band.
        top_min_rows: Minimum row count of the antimatter band.
        top_cols: (start, end) fractions of image columns for the antimatter band.
        top_search: Height range for the antimatter icon search.
        antimatter_value: (start, end) multiples of the scaled width, right of the icon.
        bottom_aspect_factor: Aspect-ratio multiplier for the bottom band height.
        bottom_aspect_divisor: Divisor for the bottom band height.
        bottom_cols: (start, end) fractions of image columns for the skills band.
        bottom_search: Height range for the joint CMD/SCI search.
        skills: Per-skill value/star placement.
    """

    version: str
    top_rows: Fraction
    top_min_rows: int
    top_cols: Tuple[Fraction, Fraction]
    top_search: SearchRange
    antimatter_value: Tuple[Offset, Offset]
    bottom_aspect_factor: float
    bottom_aspect_divisor: float
    bottom_cols: Tuple[Fraction, Fraction]
    bottom_search: SearchRange
    skills: Dict[str, SkillSlot] = field(default_factory=dict)


# Left column skills: digits to the left of the CMD icon column, star to its right
_LEFT_VALUE = Span('cmd', -5, ICON_DELTA)
_LEFT_STAR = Span('cmd', Fraction(9, 8), Fraction(5, 2))
# Right column skills: digits to the right of the SCI icon column, star to its left
_RIGHT_VALUE = Span('sci', 1.4, 6)
_RIGHT_STAR = Span('sci', Fraction(-12, 8), Fraction(-1, 6))

LAYOUT_V1 = VoyageLayout(
    version='v1',
    top_rows=Fraction(1, 5),
    top_min_rows=80,
    top_cols=(Fraction(1, 3), Fraction(2, 3)),
    top_search=SearchRange(Fraction(1, 4), Fraction(1, 2), Fraction(1, 32)),
    antimatter_value=(1, 6.75),
    bottom_aspect_factor=1.2,
    bottom_aspect_divisor=9,
    bottom_cols=(Fraction(1, 6), Fraction(5, 6)),
    bottom_search=SearchRange(Fraction(3, 15), Fraction(5, 15), Fraction(1, 30)),
    skills={
        'cmd': SkillSlot(ROW_TOP, Span('cmd', -5, Fraction(-1, 8)), _LEFT_STAR),
        'dip': SkillSlot(ROW_MIDDLE, _LEFT_VALUE, _LEFT_STAR),
        'eng': SkillSlot(ROW_BOTTOM, _LEFT_VALUE, _LEFT_STAR),
        'sec': SkillSlot(ROW_TOP, _RIGHT_VALUE, _RIGHT_STAR),
        'med': SkillSlot(ROW_MIDDLE, _RIGHT_VALUE, _RIGHT_STAR),
        'sci': SkillSlot(ROW_BOTTOM, _RIGHT_VALUE, _RIGHT_STAR),
    },
)

DEFAULT_LAYOUT_VERSION = LAYOUT_V1.version

_LAYOUTS: Dict[str, VoyageLayout] = {
    LAYOUT_V1.version: LAYOUT_V1,
}


def get_layout(version: str = DEFAULT_LAYOUT_VERSION) -> VoyageLayout:
    """
    Look up a registered layout.

    Args:
        version: Layout identifier.

    Returns:
        The layout registered under ``version``.

    Raises:
        KeyError: If no layout is registered under that version.
    """
    try:
        return _LAYOUTS[version]
    except KeyError:
        known = ', '.join(sorted(_LAYOUTS))
        raise KeyError(f"Unknown layout version {version!r} (known: {known})") from None


def register_layout(layout: VoyageLayout) -> None:
    """Register (or replace) a layout under its version."""
    _LAYOUTS[layout.version] = layout


def layout_versions() -> Tuple[str, ...]:
    """All registered layout versions."""
    return tuple(sorted(_LAYOUTS))


def offset_to_pixels(anchor: int, width: int, offset: Offset) -> int:
    """
    Resolve a numeric offset against an anchor coordinate.

    Args:
        anchor: Anchor x coordinate in pixels.
        width: Scaled icon width in pixels.
        offset: int, Fraction or float multiple of ``width``.

    Returns:
        Pixel coordinate.
    """
    if isinstance(offset, str):
        raise ValueError(f"Offset {offset!r} needs icon widths to resolve")
    if isinstance(offset, float):
        return int(anchor + width * offset)
    return anchor + int(Fraction(width) * offset)
