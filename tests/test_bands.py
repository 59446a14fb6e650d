"""Band extraction and image normalisation tests"""

import numpy as np
from PIL import Image

from voyage_scan.processing.bands import (
    bottom_band_rect,
    crop_rect,
    sub_mat,
    to_bgr,
    top_band,
    top_band_rect,
    zero_floor,
)
from voyage_scan.processing.layouts import LAYOUT_V1


def test_zero_floor_keeps_values_above_cutoff():
    img = np.array([[0, 50, 100, 101, 255]], dtype=np.uint8)
    assert zero_floor(img).tolist() == [[0, 0, 0, 101, 255]]


def test_zero_floor_empty():
    img = np.zeros((0, 5, 3), dtype=np.uint8)
    assert zero_floor(img).size == 0


def test_sub_mat_clips_to_image():
    img = np.arange(100, dtype=np.uint8).reshape(10, 10)
    assert sub_mat(img, -5, 3, 8, 20).shape == (3, 2)
    assert sub_mat(img, 12, 15, 0, 5).size == 0
    assert sub_mat(img, 5, 2, 0, 5).size == 0


def test_crop_rect_order():
    img = np.zeros((50, 80), dtype=np.uint8)
    assert crop_rect(img, (10, 20, 30, 25)).shape == (5, 20)


def test_top_band_rect():
    assert top_band_rect((900, 1800, 3), LAYOUT_V1) == (600, 0, 1200, 180)


def test_top_band_rect_minimum_rows():
    # 300 // 5 = 60 rows is below the 80 row minimum
    assert top_band_rect((300, 400, 3), LAYOUT_V1) == (133, 0, 266, 80)


def test_top_band_rect_short_image():
    assert top_band_rect((50, 300), LAYOUT_V1) == (100, 0, 200, 50)


def test_bottom_band_rect():
    x0, y0, x1, y1 = bottom_band_rect((900, 1800, 3), LAYOUT_V1)
    assert (x0, x1, y1) == (300, 1500, 900)
    # 900 * (2.0 * 1.2) / 9 == 240 rows
    assert abs(y0 - 660) <= 1


def test_bottom_band_rect_never_negative():
    # Very wide images ask for more rows than exist
    rect = bottom_band_rect((100, 2000), LAYOUT_V1)
    assert rect[1] == 0


def test_top_band_is_thresholded():
    img = np.full((900, 1800, 3), 90, dtype=np.uint8)
    img[10, 700] = (200, 50, 150)
    band = top_band(img, LAYOUT_V1)
    assert band.shape == (180, 600, 3)
    assert band[10, 100].tolist() == [200, 0, 150]
    assert int(band.sum()) == 350


class TestToBgr:
    def test_bgr_passthrough(self):
        img = np.zeros((4, 4, 3), dtype=np.uint8)
        assert to_bgr(img) is img

    def test_grayscale(self):
        img = np.full((4, 4), 120, dtype=np.uint8)
        out = to_bgr(img)
        assert out.shape == (4, 4, 3)
        assert out[0, 0].tolist() == [120, 120, 120]

    def test_single_channel(self):
        img = np.full((4, 4, 1), 7, dtype=np.uint8)
        assert to_bgr(img).shape == (4, 4, 3)

    def test_alpha_dropped(self):
        img = np.zeros((4, 4, 4), dtype=np.uint8)
        img[..., :3] = (1, 2, 3)
        img[..., 3] = 255
        out = to_bgr(img)
        assert out.shape == (4, 4, 3)
        assert out[0, 0].tolist() == [1, 2, 3]

    def test_pil_rgb_becomes_bgr(self):
        pil = Image.new('RGB', (4, 4), (255, 0, 0))
        assert to_bgr(pil)[0, 0].tolist() == [0, 0, 255]

    def test_sixteen_bit_scaled(self):
        img = np.full((2, 2, 3), 0x8040, dtype=np.uint16)
        img[0, 0] = (0xFFFF, 0x00FF, 0x0100)
        out = to_bgr(img)
        assert out.dtype == np.uint8
        assert out[0, 0].tolist() == [255, 0, 1]
        assert out[1, 1].tolist() == [128, 128, 128]

    def test_float_input_clipped(self):
        img = np.full((2, 2, 3), 300.0)
        out = to_bgr(img)
        assert out.dtype == np.uint8
        assert out[0, 0].tolist() == [255, 255, 255]
