"""Tests for shopstore/domain/models/product.py."""

import pytest

from shopstore.domain.models import MAX_DATETIME, Product, ProductStatus
from shopstore.domain.models.product import slugify


# --- defaults ---

def test_new_product_defaults():
    product = Product.new()
    assert product.status == ProductStatus.DRAFT
    assert product.title == ""
    assert product.description == ""
    assert product.short_description == ""
    assert product.quantity_int == 0
    assert product.price_float == 0
    assert product.memo == ""
    assert product.soft_deleted_at == MAX_DATETIME


# --- data tracking ---

def test_data_tracking():
    product = Product()
    product.set_title("Title").set_description("Desc").set_short_description("Short")
    product.set_memo("Memo").set_status(ProductStatus.ACTIVE)
    product.set_price_float(19.99)
    product.set_quantity_int(5)

    expected = {
        "title": "Title",
        "description": "Desc",
        "short_description": "Short",
        "memo": "Memo",
        "status": "active",
        "price": "19.99",
        "quantity": "5",
    }
    assert product.data() == expected
    assert product.data_changed() == expected


# --- price / quantity ---

def test_price_and_quantity_helpers():
    product = Product()
    assert product.set_quantity_int(10).quantity == "10"
    assert product.quantity_int == 10
    product.set_price_float(49.95)
    assert product.price_float == 49.95
    assert product.price == "49.95"


def test_is_free():
    product = Product().set_price_float(49.95)
    assert product.is_free() is False
    assert product.set_price_float(0).is_free() is True


def test_unparseable_price_reads_as_zero():
    assert Product.from_existing({"price": "n/a"}).price_float == 0


# --- status ---

def test_status_predicates():
    product = Product().set_status(ProductStatus.ACTIVE)
    assert product.is_active() is True
    assert product.is_draft() is False
    assert product.set_status(ProductStatus.DISABLED).is_disabled() is True
    assert product.set_status(ProductStatus.DRAFT).is_draft() is True


# --- slug ---

def test_slug_from_title():
    assert Product().set_title("  Hello World!  ").slug() == "hello-world"


@pytest.mark.parametrize(
    "text, expected",
    [("Mug", "mug"), ("Blue -- Mug", "blue-mug"), ("100% Cotton T-Shirt", "100-cotton-t-shirt"), ("", "")],
)
def test_slugify(text, expected):
    assert slugify(text) == expected
