import pytest

from oledlab.bitmaps import BITMAPS, bitmap_for_radius, bitmap_rows


@pytest.mark.parametrize("radius", range(5, 15))
def test_bitmap_size_matches_diameter(radius):
    diameter = radius * 2
    data = bitmap_for_radius(radius)
    assert len(data) == diameter * ((diameter + 7) // 8)
    assert data is BITMAPS[diameter]


def test_smallest_bitmap_starts_with_source_bytes():
    assert bitmap_for_radius(5)[:4] == b"\x02\x00\x3f\x00"


def test_fraction_is_truncated():
    assert bitmap_for_radius(14.9) == bitmap_for_radius(14)


@pytest.mark.parametrize("radius", [4, 15, 30])
def test_radius_out_of_range(radius):
    with pytest.raises(ValueError):
        bitmap_for_radius(radius)


def test_rows_unpack_msb_first():
    rows = bitmap_rows(b"\x02\x00", 10, 1)
    assert rows == ((False,) * 6 + (True,) + (False,) * 3,)


def test_rows_shape_for_every_sprite():
    for diameter, data in BITMAPS.items():
        rows = bitmap_rows(data, diameter, diameter)
        assert len(rows) == diameter
        assert all(len(row) == diameter for row in rows)
        assert any(any(row) for row in rows)


def test_rows_reject_short_data():
    with pytest.raises(ValueError):
        bitmap_rows(b"\x00", 10, 2)


def test_rows_reject_empty_size():
    with pytest.raises(ValueError):
        bitmap_rows(b"\x00", 0, 1)