"""
Unit tests for product descriptors (solarwind.product_registry).

Tests the built-in YAML descriptors, the Product validation rules and the
loader's handling of broken files.
"""

import pytest
from pydantic import ValidationError

from solarwind.exceptions import ConfigValidationError
from solarwind.product_registry import (
    Product,
    get_product,
    load_all_products,
    load_product,
)


def _columns(*specs):
    return [{"name": name, "type": type_} for name, type_ in specs]


# ---------------------------------------------------------------------------
# Built-in products
# ---------------------------------------------------------------------------

class TestBuiltInProducts:
    """Tests for the descriptors shipped in solarwind/products/."""

    def test_all_products_loaded_sorted(self):
        assert [p.name for p in load_all_products()] == ["magnetometer", "plasma"]

    def test_magnetometer_header(self):
        product = get_product("magnetometer")
        assert product.header == ("time_tag", "bx_gsm", "by_gsm", "bz_gsm", "lon_gsm", "lat_gsm", "bt")
        assert product.field_count == 7
        assert product.url_slug == "mag"

    def test_plasma_header(self):
        product = get_product("plasma")
        assert product.header == ("time_tag", "density", "speed", "temperature")
        assert product.field_count == 4
        assert product.url_slug == "plasma"

    def test_numeric_columns_are_float(self):
        for name in ("magnetometer", "plasma"):
            types = [c.type for c in get_product(name).columns]
            assert types[0] == "timestamp"
            assert set(types[1:]) == {"float"}

    def test_get_product_is_cached(self):
        assert get_product("plasma") is get_product("plasma")

    def test_unknown_product(self):
        with pytest.raises(ConfigValidationError, match="Unknown product 'kp'"):
            get_product("kp")

    def test_products_are_frozen(self):
        with pytest.raises(ValidationError):
            get_product("plasma").url_slug = "other"


# ---------------------------------------------------------------------------
# Product validation
# ---------------------------------------------------------------------------

class TestProductValidation:
    """Tests for the Product column rules."""

    def test_timestamp_must_come_first(self):
        with pytest.raises(ValidationError, match="must start with a timestamp column"):
            Product(name="x", url_slug="x", columns=_columns(("speed", "float"), ("time_tag", "timestamp")))

    def test_no_columns(self):
        with pytest.raises(ValidationError, match="must start with a timestamp column"):
            Product(name="x", url_slug="x", columns=[])

    def test_single_timestamp_only(self):
        with pytest.raises(ValidationError, match="more than one timestamp column"):
            Product(
                name="x",
                url_slug="x",
                columns=_columns(("time_tag", "timestamp"), ("end", "timestamp")),
            )

    def test_duplicate_names(self):
        with pytest.raises(ValidationError, match="duplicate column names"):
            Product(
                name="x",
                url_slug="x",
                columns=_columns(("time_tag", "timestamp"), ("v", "float"), ("v", "integer")),
            )

    def test_unknown_column_type(self):
        with pytest.raises(ValidationError):
            Product(name="x", url_slug="x", columns=_columns(("time_tag", "timestamp"), ("v", "double")))


# ---------------------------------------------------------------------------
# Loading from disk
# ---------------------------------------------------------------------------

class TestLoading:
    """Tests for load_product() and load_all_products() on custom directories."""

    def test_load_product(self, tmp_path):
        path = tmp_path / "kp.yaml"
        path.write_text(
            "name: kp\n"
            "url_slug: kp\n"
            "columns:\n"
            "  - {name: time_tag, type: timestamp}\n"
            "  - {name: kp, type: integer}\n",
            encoding="utf-8",
        )
        product = load_product(path)
        assert product.header == ("time_tag", "kp")
        assert product.description == ""

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="empty"):
            load_product(path)

    def test_broken_files_are_skipped(self, tmp_path):
        (tmp_path / "good.yaml").write_text(
            "name: good\nurl_slug: good\ncolumns:\n  - {name: time_tag, type: timestamp}\n",
            encoding="utf-8",
        )
        (tmp_path / "bad.yaml").write_text("name: bad\n", encoding="utf-8")
        (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
        assert [p.name for p in load_all_products(tmp_path)] == ["good"]
