"""
Shared fixtures: reference icons, frozen assets, an on-disk asset folder and
a composited screenshot.
"""

import cv2
import pytest

from voyage_scan.assets.template_store import freeze_icons

from tests.helpers import build_voyage_screenshot, make_icons


@pytest.fixture(scope='session')
def icons():
    return make_icons()


@pytest.fixture
def assets(icons):
    return freeze_icons(icons, generation=1)


@pytest.fixture
def base_path(tmp_path, icons):
    """Scanner base folder with data/<icon>.png written out."""
    data = tmp_path / 'data'
    (data / 'tessdata').mkdir(parents=True)
    for name, icon in icons.items():
        assert cv2.imwrite(str(data / f'{name}.png'), icon)
    return tmp_path


@pytest.fixture
def screenshot(icons):
    """(image, readings) of a complete Voyage screenshot."""
    return build_voyage_screenshot(icons)
