"""Layout offsets and region derivation tests"""

import dataclasses
from fractions import Fraction

import pytest

from voyage_scan.layout import antimatter_value_rect, derive_regions
from voyage_scan.processing import layouts
from voyage_scan.processing.layouts import (
    LAYOUT_V1,
    get_layout,
    layout_versions,
    offset_to_pixels,
    register_layout,
)

from tests.helpers import ANTIMATTER_VALUE_RECT, ICON_POSITIONS, STAR_RECTS, VALUE_RECTS

ICON_WIDTHS = {'cmd': 64, 'dip': 72, 'eng': 64, 'med': 64, 'sci': 64, 'sec': 64, 'antimatter': 90}


class TestOffsets:
    def test_fraction_truncates_toward_zero(self):
        # -10 / 8 = -1.25 -> -1, not -2
        assert offset_to_pixels(100, 10, Fraction(-1, 8)) == 99
        assert offset_to_pixels(100, 10, Fraction(9, 8)) == 111

    def test_int_multiple(self):
        assert offset_to_pixels(100, 10, -5) == 50
        assert offset_to_pixels(100, 10, 6) == 160

    def test_float_truncates_whole_sum(self):
        assert offset_to_pixels(100, 10, 6.75) == 167
        assert offset_to_pixels(700, 48, 1.4) == 767

    def test_icon_delta_needs_widths(self):
        with pytest.raises(ValueError):
            offset_to_pixels(100, 10, 'icon_delta')


class TestDeriveRegions:
    def test_regions_at_scale(self):
        regions = derive_regions(
            ICON_POSITIONS['cmd'], ICON_POSITIONS['sci'], 48, 48, ICON_WIDTHS, LAYOUT_V1
        )
        assert set(regions) == {'cmd', 'dip', 'eng', 'med', 'sci', 'sec'}
        for skill in regions:
            assert regions[skill].value == VALUE_RECTS[skill], skill
            assert regions[skill].star == STAR_RECTS[skill], skill

    def test_icon_delta_uses_width_difference(self):
        widths = dict(ICON_WIDTHS, eng=80)
        regions = derive_regions((260, 20), (700, 140), 48, 48, widths, LAYOUT_V1)
        # 260 - (80 - 64) * 48 / 64 = 248
        assert regions['eng'].value[2] == 248
        assert regions['dip'].value[2] == 254

    def test_rows(self):
        regions = derive_regions((260, 20), (700, 140), 48, 48, ICON_WIDTHS, LAYOUT_V1)
        assert regions['cmd'].value[1::2] == (20, 68)
        assert regions['med'].value[1::2] == (68, 140)
        assert regions['sci'].star[1::2] == (140, 188)


def test_antimatter_value_rect():
    assert antimatter_value_rect((40, 60), 45, 45, LAYOUT_V1) == ANTIMATTER_VALUE_RECT


class TestRegistry:
    def test_default(self):
        assert get_layout() is LAYOUT_V1
        assert 'v1' in layout_versions()

    def test_unknown(self):
        with pytest.raises(KeyError):
            get_layout('v0')

    def test_register(self, monkeypatch):
        # Restore the registry afterwards
        monkeypatch.setattr(layouts, '_LAYOUTS', dict(layouts._LAYOUTS))
        custom = dataclasses.replace(LAYOUT_V1, version='test-wide')
        register_layout(custom)
        assert get_layout('test-wide') is custom

    def test_search_heights(self):
        assert LAYOUT_V1.top_search.heights(180) == (45, 90, 5)
        assert LAYOUT_V1.bottom_search.heights(240) == (48, 80, 8)

    def test_registry_untouched_by_other_tests(self):
        assert 'test-wide' not in layout_versions()
