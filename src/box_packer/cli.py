from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from box_packer.catalog import Catalog, load_catalog, validate_selections
from box_packer.config import Settings
from box_packer.models import PackingResult, ProductSelection
from box_packer.packer import pack_products
from box_packer.report import format_result, summarize

# Load .env once (e.g. local dev); does not override existing env
load_dotenv()

logger = logging.getLogger(__name__)


def load_input(path: Path, catalog_path: str | None) -> tuple[list[ProductSelection], Catalog]:
    """
    Read selections and the catalog they refer to.

    The input file holds either a bare list of selections or an object with
    "selections" and, optionally, inline "products" and "boxes". Inline
    catalog entries take precedence over the catalog file.
    """
    data = json.loads(path.read_text(encoding="utf-8"))

    if isinstance(data, list):
        data = {"selections": data}
    if "selections" not in data:
        raise ValueError("Input must be a list of selections or include 'selections'")

    selections = [ProductSelection.model_validate(s) for s in data["selections"]]

    if "products" in data and "boxes" in data:
        catalog = Catalog.model_validate({"products": data["products"], "boxes": data["boxes"]})
    elif catalog_path:
        catalog = load_catalog(catalog_path)
        if "products" in data or "boxes" in data:
            # Merge a partial inline catalog over the file
            catalog = Catalog.model_validate({
                "products": data.get("products", catalog.model_dump()["products"]),
                "boxes": data.get("boxes", catalog.model_dump()["boxes"]),
            })
    else:
        raise ValueError("No catalog: pass --catalog, set BOX_PACKER_CATALOG, or inline 'products' and 'boxes'")

    return selections, catalog


def write_result(result: PackingResult, path: str) -> None:
    """
    Write a packing result and its summary to a JSON file.

    Creates parent folders if needed and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"result": result.model_dump(mode="json"), "metrics": summarize(result)}
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    logger.info(f"Wrote result to {output_path}")


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    parser = argparse.ArgumentParser(description="Box Packer CLI")
    parser.add_argument("input", help="Selections JSON file")
    parser.add_argument(
        "--catalog",
        default=settings.catalog_path,
        help="Catalog JSON file with 'products' and 'boxes' (default: $BOX_PACKER_CATALOG)",
    )
    parser.add_argument("--output", default=None, help="Write the result as JSON to this file")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        selections, catalog = load_input(Path(args.input), args.catalog)
        validate_selections(selections, settings.max_selections)
        result = pack_products(selections, catalog.products, catalog.boxes)
    except (OSError, ValidationError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        return 2

    print(format_result(result))

    if args.output:
        write_result(result, args.output)

    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
