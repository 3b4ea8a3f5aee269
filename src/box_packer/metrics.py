from __future__ import annotations

from box_packer.models import Box, PackedBox


def item_weight(weight: float, quantity: int) -> float:
    return float(weight) * quantity


def compute_metrics(box: Box, total_weight: float) -> tuple[float, float, float]:
    """Return (total_weight, remaining_weight, utilization %) for box."""
    limit = float(box.weight_limit)
    remaining_weight = limit - total_weight
    utilization = total_weight / limit * 100.0
    return total_weight, remaining_weight, utilization


def units_in_box(packed_box: PackedBox) -> int:
    return sum(item.quantity for item in packed_box.products)
