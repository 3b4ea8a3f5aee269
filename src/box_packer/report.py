"""Human-readable and summary views of a PackingResult."""

from __future__ import annotations

from typing import Any

from box_packer.metrics import units_in_box
from box_packer.models import PackingResult


def _num(value: float) -> str:
    # 10.0 -> "10", 2.5 -> "2.5"
    return f"{value:g}"


def summarize(result: PackingResult) -> dict[str, Any]:
    return {
        "success": result.success,
        "box_count": len(result.packed_boxes),
        "units_packed": sum(units_in_box(pb) for pb in result.packed_boxes),
        "units_unpacked": sum(u.quantity for u in result.unpackable_products),
    }


def format_result(result: PackingResult) -> str:
    """
    Render the result the way the review screen lists it.

    Unpackable selections come first under a warning header, then one block
    per box in opening order.
    """
    lines: list[str] = ["Packing Results"]

    if not result.success and result.unpackable_products:
        lines.append("")
        lines.append("Warning: Some products could not be packed")
        for entry in result.unpackable_products:
            lines.append(f"  {entry.quantity}x {entry.product.name}: {entry.reason}")

    for n, packed_box in enumerate(result.packed_boxes, start=1):
        box = packed_box.box
        lines.append("")
        lines.append(f"Box {n}: {box.name}")
        lines.append(f"  Dimensions: {_num(box.length)}x{_num(box.width)}x{_num(box.height)} cm")
        lines.append(f"  Weight Limit: {_num(box.weight_limit)} kg")
        lines.append(f"  Total Weight: {packed_box.total_weight:.1f} kg")
        lines.append(f"  Utilization: {packed_box.utilization:.1f}%")
        lines.append("  Packed Items:")
        for item in packed_box.products:
            p = item.product
            lines.append(
                f"    {item.quantity}x {p.name} "
                f"({_num(p.length)}x{_num(p.width)}x{_num(p.height)} cm, {_num(p.weight)} kg each)"
            )

    return "\n".join(lines)
