# src/box_packer/packing/first_fit.py

from __future__ import annotations

from typing import Sequence

from box_packer.geometry import volume
from box_packer.metrics import compute_metrics, item_weight
from box_packer.models import Box, PackedBox, PackedItem, Product
from box_packer.packing.constraints import can_fit


def find_existing_slot(
    open_boxes: Sequence[PackedBox],
    product: Product,
    quantity: int,
) -> int | None:
    """
    Index of the first opened box that can take all `quantity` units.

    A box qualifies when one unit passes can_fit against the box type and the
    box's current total plus the added weight stays within its weight limit.
    First-fit: boxes are scanned in opening order, no best-fit scoring.
    """
    added = item_weight(product.weight, quantity)
    for i, packed_box in enumerate(open_boxes):
        if not can_fit(product, packed_box.box):
            continue
        if packed_box.total_weight + added <= packed_box.box.weight_limit:
            return i
    return None


def find_existing_box(
    open_boxes: Sequence[PackedBox],
    product: Product,
    quantity: int,
) -> PackedBox | None:
    slot = find_existing_slot(open_boxes, product, quantity)
    return None if slot is None else open_boxes[slot]


def find_smallest_new_box(
    box_types: Sequence[Box],
    product: Product,
    required_weight: float,
) -> Box | None:
    """
    Smallest box type (by volume) that fits one unit and carries required_weight.

    Ties on volume go to the box listed first in the catalog.
    """
    candidates = [
        box for box in box_types
        if can_fit(product, box) and required_weight <= box.weight_limit
    ]
    if not candidates:
        return None
    # min() returns the first minimal element, which keeps catalog order on ties
    return min(candidates, key=volume)


def open_packed_box(box: Box) -> PackedBox:
    """Empty packed box for a freshly opened box type."""
    return PackedBox(
        box=box,
        products=(),
        total_weight=0.0,
        remaining_weight=float(box.weight_limit),
        utilization=0.0,
    )


def add_to_box(packed_box: PackedBox, product: Product, quantity: int) -> PackedBox:
    """
    Return a copy of packed_box with `quantity` units of product appended.

    Does not re-check fit or weight; callers place only what the search
    functions above accepted.
    """
    total_weight, remaining_weight, utilization = compute_metrics(
        packed_box.box,
        packed_box.total_weight + item_weight(product.weight, quantity),
    )
    return packed_box.model_copy(
        update={
            "products": packed_box.products + (PackedItem(product=product, quantity=quantity),),
            "total_weight": total_weight,
            "remaining_weight": remaining_weight,
            "utilization": utilization,
        }
    )
