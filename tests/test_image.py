import pytest

from yftfont.image import Image


def test_new_image_is_blank():
    image = Image(4, 3)
    assert all(image.get_pixel(x, y) == 0 for x in range(4) for y in range(3))


def test_put_then_get_round_trip():
    image = Image(5, 5)
    image.put_pixel(2, 3, 0x123456)
    assert image.get_pixel(2, 3) == 0x123456
    assert image.get_pixel(3, 2) == 0


def test_color_kept_to_32_bits():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 2)])
def test_out_of_bounds_put_raises(x, y):
    image = Image(4, 2)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)


def test_out_of_bounds_get_raises():
    with pytest.raises(IndexError):
        Image(2, 2).get_pixel(2, 2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 3)


def test_rows_shape_and_content():
    image = Image(3, 2)
    image.put_pixel(1, 1, 7)
    rows = list(image.rows())
    assert len(rows) == image.height
    assert all(len(row) == image.width for row in rows)
    assert rows[1][1] == 7
    assert rows[0] == (0, 0, 0)


def test_empty_image_has_no_rows():
    assert list(Image(0, 5).rows()) == []


def test_contains():
    image = Image(2, 3)
    assert image.contains(1, 2)
    assert not image.contains(2, 0)