import pytest

from hexworld.coord import HexCoord, PixelLayout


def test_layout_scales_and_translates():
    layout = PixelLayout(size_x=4.0, size_y=2.0, origin_x=10.0, origin_y=5.0)
    assert layout.to_pixel(HexCoord(1, 0)) == pytest.approx((14.0, 5.0))
    assert layout.to_pixel(HexCoord(0, 0)) == pytest.approx((10.0, 5.0))


def test_layout_roundtrip():
    layout = PixelLayout(size_x=6.0, size_y=3.5, origin_x=-2.0, origin_y=1.0)
    for q in range(0, 256, 5):
        for r in range(0, 256, 7):
            coord = HexCoord(q, r)
            assert layout.from_pixel(*layout.to_pixel(coord)) == coord


def test_layout_maps_click_near_centre():
    layout = PixelLayout(size_x=8.0, size_y=4.0)
    x, y = layout.to_pixel(HexCoord(2, 3))
    assert layout.from_pixel(x + 1.0, y - 0.5) == HexCoord(2, 3)


def test_layout_requires_positive_sizes():
    with pytest.raises(ValueError):
        PixelLayout(size_x=0.0)
