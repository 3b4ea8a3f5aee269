from __future__ import annotations

from box_packer.geometry import dims_of, fits_within, volume
from box_packer.models import Box, Product


def _product(length: float, width: float, height: float) -> Product:
    return Product(id=1, name="P", length=length, width=width, height=height, weight=1)


def _box(length: float, width: float, height: float) -> Box:
    return Box(id=1, name="B", length=length, width=width, height=height, weight_limit=10)


def test_dims_and_volume() -> None:
    p = _product(10, 5, 2)
    assert dims_of(p) == (10.0, 5.0, 2.0)
    assert volume(p) == 100.0


def test_fits_within_equal_extents() -> None:
    """Equal extents on every axis fit."""
    assert fits_within(_product(10, 10, 10), _box(10, 10, 10)) is True


def test_fits_within_is_positional() -> None:
    """A 10x5x5 product does not fit a 5x10x5 box: no rotation."""
    assert fits_within(_product(10, 5, 5), _box(5, 10, 5)) is False
    assert fits_within(_product(5, 10, 5), _box(5, 10, 5)) is True


def test_fits_within_single_axis_too_long() -> None:
    assert fits_within(_product(5, 5, 11), _box(10, 10, 10)) is False
