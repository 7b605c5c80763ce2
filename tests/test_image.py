import struct

import pytest

from virtualrig.image import BitmapError, Image, load_bitmap


def _bitmap(width, height, pixels, planes=1, bpp=24):
    header = b"BM" + b"\x00" * 16
    header += struct.pack("<IIHH", width, height, planes, bpp)
    header += b"\x00" * 24
    return header + pixels


def _write(tmp_path, content):
    path = tmp_path / "picture.bmp"
    path.write_bytes(content)
    return path


def test_dimensions_are_read(tmp_path):
    path = _write(tmp_path, _bitmap(2, 3, bytes(range(18))))
    image = load_bitmap(path)
    assert (image.size_x, image.size_y) == (2, 3)
    assert len(image.data) == 18


def test_bgr_becomes_rgb(tmp_path):
    path = _write(tmp_path, _bitmap(2, 1, bytes([1, 2, 3, 10, 20, 30])))
    image = load_bitmap(path)
    assert image.data == bytes([3, 2, 1, 30, 20, 10])


def test_accepts_string_path(tmp_path):
    path = _write(tmp_path, _bitmap(1, 1, bytes([7, 8, 9])))
    assert load_bitmap(str(path)) == Image(1, 1, bytes([9, 8, 7]))


def test_extra_trailing_bytes_are_ignored(tmp_path):
    path = _write(tmp_path, _bitmap(1, 1, bytes([4, 5, 6, 99, 99])))
    assert load_bitmap(path).data == bytes([6, 5, 4])


def test_wrong_planes(tmp_path):
    path = _write(tmp_path, _bitmap(1, 1, bytes(3), planes=2))
    with pytest.raises(BitmapError):
        load_bitmap(path)


def test_wrong_bits_per_pixel(tmp_path):
    path = _write(tmp_path, _bitmap(1, 1, bytes(4), bpp=32))
    with pytest.raises(BitmapError):
        load_bitmap(path)


def test_short_pixel_data(tmp_path):
    path = _write(tmp_path, _bitmap(2, 2, bytes(5)))
    with pytest.raises(BitmapError):
        load_bitmap(path)


def test_truncated_header(tmp_path):
    path = _write(tmp_path, b"BM\x00\x00")
    with pytest.raises(BitmapError):
        load_bitmap(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bitmap(tmp_path / "absent.bmp")