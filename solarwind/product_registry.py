"""
Product descriptor loader for solarwind.

Loads product YAML files from solarwind/products/ and provides structured,
immutable access via Pydantic models. Each product defines:
- name: unique identifier ("magnetometer", "plasma")
- url_slug: prefix of the NOAA file name ("mag" -> mag-5-minute.json)
- columns: ordered (name, type) pairs; the names form the expected header,
  the types select the value accessor used by the row parser.

Column types:
- timestamp: NOAA time tag, only allowed as the first column
- float: parsed with CellValue.as_float (null -> 0.0)
- integer: parsed with CellValue.as_integer (null -> 0)
- text: CellValue.as_text (null -> "")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, model_validator

from solarwind.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# Directory containing product YAML files (sibling package)
_PRODUCTS_DIR = Path(__file__).parent / "products"

# Loaded lazily by get_product()
_PRODUCTS: dict[str, Product] = {}

ColumnType = Literal["timestamp", "float", "integer", "text"]


class ColumnSpec(BaseModel):
    """One column of a product table."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ColumnType


class Product(BaseModel):
    """A NOAA solar wind product definition loaded from YAML."""

    model_config = ConfigDict(frozen=True)

    name: str
    url_slug: str
    description: str = ""
    columns: tuple[ColumnSpec, ...]

    @model_validator(mode="after")
    def _check_columns(self) -> Product:
        """The time tag comes first, exactly once, and names are unique."""
        if not self.columns or self.columns[0].type != "timestamp":
            raise ValueError(
                f"Product '{self.name}' must start with a timestamp column."
            )
        extra = [c.name for c in self.columns[1:] if c.type == "timestamp"]
        if extra:
            raise ValueError(
                f"Product '{self.name}' has more than one timestamp column: {extra}"
            )
        names = [c.name for c in self.columns]
        if len(set(names)) != len(names):
            raise ValueError(f"Product '{self.name}' has duplicate column names: {names}")
        return self

    @property
    def header(self) -> tuple[str, ...]:
        """Column names in document order."""
        return tuple(c.name for c in self.columns)

    @property
    def field_count(self) -> int:
        return len(self.columns)


def load_product(path: Path) -> Product:
    """Load a single product YAML file.

    Raises:
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the descriptor fails schema validation.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Product descriptor is empty: {path}")
    return Product.model_validate(raw)


def load_all_products(products_dir: Path | None = None) -> list[Product]:
    """Load all product YAML files, sorted by name.

    Args:
        products_dir: Directory to scan for .yaml files. Defaults to
            the built-in products/ directory.

    Returns:
        List of Product objects. Files that fail to load are skipped
        with a warning.
    """
    products_dir = products_dir or _PRODUCTS_DIR
    products: list[Product] = []
    for yaml_path in sorted(products_dir.glob("*.yaml")):
        try:
            product = load_product(yaml_path)
            products.append(product)
            logger.debug("Loaded product: %s from %s", product.name, yaml_path)
        except Exception as e:
            logger.warning("Failed to load product from %s: %s", yaml_path, e)
    products.sort(key=lambda p: p.name)
    logger.debug("Loaded %d products", len(products))
    return products


def get_product(name: str) -> Product:
    """Return the built-in product called *name*.

    Raises:
        ConfigValidationError: If no built-in product has that name.
    """
    if not _PRODUCTS:
        for product in load_all_products():
            _PRODUCTS[product.name] = product
    try:
        return _PRODUCTS[name]
    except KeyError:
        raise ConfigValidationError(
            f"Unknown product '{name}'. Known products: {sorted(_PRODUCTS)}"
        ) from None
