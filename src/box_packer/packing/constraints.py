"""Constraints deciding whether a single product unit may go into a box type."""

from __future__ import annotations

from box_packer.geometry import fits_within
from box_packer.models import Box, Product


class Constraint:
    """Base class for per-unit packing constraints."""

    def check(self, product: Product, box: Box) -> bool:
        """
        Check whether one unit of product satisfies the constraint in box.

        Args:
            product: Product to check
            box: Box type to check against

        Returns:
            True if constraint is satisfied, False otherwise
        """
        raise NotImplementedError


class DimensionConstraint(Constraint):
    """Product extents must not exceed the box extents on any axis."""

    def check(self, product: Product, box: Box) -> bool:
        return fits_within(product, box)


class WeightConstraint(Constraint):
    """A single unit must not exceed the box weight limit."""

    def check(self, product: Product, box: Box) -> bool:
        return product.weight <= box.weight_limit


DEFAULT_CONSTRAINTS: tuple[Constraint, ...] = (DimensionConstraint(), WeightConstraint())


def can_fit(product: Product, box: Box) -> bool:
    """
    Per-unit admissibility of product in box.

    Ignores anything already packed in the box; capacity checks against
    current contents happen in the placement search.
    """
    return all(c.check(product, box) for c in DEFAULT_CONSTRAINTS)
