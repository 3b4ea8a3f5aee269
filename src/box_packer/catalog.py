# src/box_packer/catalog.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from pydantic import BaseModel, Field

from box_packer.models import Box, Product, ProductSelection


class UnknownProductError(ValueError):
    """A selection references a product id missing from the catalog."""

    def __init__(self, product_id: int, valid_ids: Iterable[int]):
        self.product_id = product_id
        self.valid_ids = sorted(valid_ids)
        super().__init__(f"Unknown product id {product_id}. Valid: {self.valid_ids}")


class Catalog(BaseModel):
    """Products that can be selected and the box types available to pack them."""

    products: list[Product] = Field(default_factory=list)
    boxes: list[Box] = Field(default_factory=list)


def load_catalog(path: str | Path) -> Catalog:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Catalog.model_validate(data)


def index_products(products: Sequence[Product] | Mapping[int, Product]) -> dict[int, Product]:
    """
    Build an id -> Product mapping.

    Mapping keys must equal each product's id. Sequences must not repeat an id.
    """
    if isinstance(products, Mapping):
        for key, p in products.items():
            if key != p.id:
                raise ValueError(f"Catalog key {key} does not match product id {p.id}")
        return dict(products)
    index: dict[int, Product] = {}
    for p in products:
        if p.id in index:
            raise ValueError(f"Duplicate product id {p.id} in catalog")
        index[p.id] = p
    return index


def get_product(index: Mapping[int, Product], product_id: int) -> Product:
    if product_id not in index:
        raise UnknownProductError(product_id, index.keys())
    return index[product_id]


def validate_selections(selections: Sequence[ProductSelection], max_selections: int) -> None:
    if len(selections) > max_selections:
        raise ValueError(
            f"Too many selections: {len(selections)} (maximum {max_selections})"
        )
