"""Geometry utilities for box packing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Dimensions


def dims_of(item: "Dimensions") -> tuple[float, float, float]:
    """Return (L, W, H) as floats."""
    return float(item.length), float(item.width), float(item.height)


def volume(item: "Dimensions") -> float:
    L, W, H = dims_of(item)
    return L * W * H


def fits_within(inner: "Dimensions", outer: "Dimensions") -> bool:
    """
    Positional extent check: length against length, width against width,
    height against height.

    No rotation is attempted, so a 10x5x5 item does not fit a 5x10x5 box.
    Equal extents fit.
    """
    il, iw, ih = dims_of(inner)
    ol, ow, oh = dims_of(outer)
    return il <= ol and iw <= ow and ih <= oh
