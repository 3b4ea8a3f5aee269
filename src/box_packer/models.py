from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Dimensions(BaseModel):
    """Length, width and height in the catalog's linear unit."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(gt=0, description="Length")
    width: float = Field(gt=0, description="Width")
    height: float = Field(gt=0, description="Height")


class Product(Dimensions):
    """Catalog product. Reference data, never modified by the packer."""

    id: int = Field(description="Unique identifier for the product")
    name: str = Field(description="Display name")
    weight: float = Field(gt=0, description="Unit weight in kg")


class Box(Dimensions):
    """Catalog box type: a container shape and its weight limit."""

    id: int = Field(description="Unique identifier for the box type")
    name: str = Field(description="Display name")
    weight_limit: float = Field(gt=0, description="Maximum content weight in kg")


class ProductSelection(BaseModel):
    """A requested quantity of one catalog product."""

    model_config = ConfigDict(frozen=True)

    product_id: int = Field(description="Identifier of the selected product")
    quantity: int = Field(ge=1, description="Number of units requested")


class PackedItem(BaseModel):
    """Line item inside a packed box."""

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(ge=1)


class PackedBox(BaseModel):
    """
    A box opened during one packing run together with its contents.

    remaining_weight and utilization are derived from total_weight and are
    kept in sync by the functions in box_packer.packing.first_fit.
    utilization is a percentage of the weight limit and is not clamped.
    """

    model_config = ConfigDict(frozen=True)

    box: Box
    products: tuple[PackedItem, ...] = ()
    total_weight: float = 0.0
    remaining_weight: float
    utilization: float = 0.0


class UnpackableEntry(BaseModel):
    """A selection that no existing or new box could hold as a whole."""

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(ge=1)
    reason: str


class PackingResult(BaseModel):
    """Outcome of a packing run."""

    model_config = ConfigDict(frozen=True)

    success: bool = True
    packed_boxes: tuple[PackedBox, ...] = ()
    unpackable_products: tuple[UnpackableEntry, ...] = ()
