"""Packing orchestrator: places product selections into catalog boxes."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from box_packer.catalog import get_product, index_products
from box_packer.metrics import item_weight
from box_packer.models import (
    Box,
    PackedBox,
    PackingResult,
    Product,
    ProductSelection,
    UnpackableEntry,
)
from box_packer.packing.first_fit import (
    add_to_box,
    find_existing_slot,
    find_smallest_new_box,
    open_packed_box,
)
from box_packer.packing.heuristics import rank_selections

logger = logging.getLogger(__name__)

NO_SUITABLE_BOX = "No suitable box found for product dimensions or weight"


def pack_products(
    selections: Sequence[ProductSelection],
    products: Sequence[Product] | Mapping[int, Product],
    boxes: Sequence[Box],
) -> PackingResult:
    """
    Pack every selection into as few boxes as the heuristic manages.

    - Resolves all product ids first; an unknown id raises UnknownProductError
      before anything is placed
    - Orders selections by volume-to-weight efficiency, highest first (stable)
    - Each selection is atomic: all of its units go into one box, or the
      whole selection is reported as unpackable
    - Tries opened boxes first (first-fit), then opens the smallest box type
      that can hold the selection
    - Deterministic; inputs are never modified

    Args:
        selections: Requested (product_id, quantity) pairs
        products: Product catalog, as a sequence or a mapping by id
        boxes: Box type catalog; order breaks volume ties

    Returns:
        PackingResult with success=True iff nothing was unpackable
    """
    index = index_products(products)
    resolved = [(get_product(index, s.product_id), s.quantity) for s in selections]

    packed_boxes: list[PackedBox] = []
    unpackable: list[UnpackableEntry] = []

    for product, quantity in rank_selections(resolved):
        slot = find_existing_slot(packed_boxes, product, quantity)

        if slot is None:
            required_weight = item_weight(product.weight, quantity)
            box = find_smallest_new_box(boxes, product, required_weight)
            if box is None:
                logger.warning(
                    f"Unpackable: product_id={product.id} quantity={quantity} "
                    f"required_weight={required_weight}"
                )
                unpackable.append(
                    UnpackableEntry(product=product, quantity=quantity, reason=NO_SUITABLE_BOX)
                )
                continue
            packed_boxes.append(open_packed_box(box))
            slot = len(packed_boxes) - 1
            logger.debug(f"Opened box_id={box.id} at slot={slot}")

        packed_boxes[slot] = add_to_box(packed_boxes[slot], product, quantity)
        logger.debug(
            f"Placed product_id={product.id} quantity={quantity} in slot={slot} "
            f"total_weight={packed_boxes[slot].total_weight}"
        )

    return PackingResult(
        success=not unpackable,
        packed_boxes=tuple(packed_boxes),
        unpackable_products=tuple(unpackable),
    )
