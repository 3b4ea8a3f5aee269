"""Ordering heuristics for packing."""

from __future__ import annotations

from typing import Iterable, TypeVar

from box_packer.geometry import volume
from box_packer.models import Product

T = TypeVar("T")


def efficiency(product: Product) -> float:
    """
    Volume-to-weight ratio of one unit.

    Bulky but light products score high and are packed first, while boxes
    still have spatial headroom.
    """
    return volume(product) / float(product.weight)


def rank_selections(items: Iterable[tuple[Product, T]]) -> list[tuple[Product, T]]:
    """
    Order (product, payload) pairs by efficiency, highest first.

    Args:
        items: Pairs whose first element is the resolved product

    Returns:
        New list; pairs with equal efficiency keep their input order
    """
    # sorted() stays stable with reverse=True
    return sorted(items, key=lambda pair: efficiency(pair[0]), reverse=True)
