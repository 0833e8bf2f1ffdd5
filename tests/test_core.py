# tests/test_core.py
import pytest
from fastapi import HTTPException

from app.core import decode_product, parse_product_id, validate_product
from app.models import Product


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "1.5", " 1", "1_0", "2147483648", "²"])
def test_parse_product_id_rejects(raw):
    with pytest.raises(HTTPException) as exc:
        parse_product_id(raw)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid product ID format"


@pytest.mark.parametrize("raw,expected", [("1", 1), ("0002", 2), ("+3", 3), ("2147483647", 2147483647)])
def test_parse_product_id_accepts(raw, expected):
    assert parse_product_id(raw) == expected


def test_decode_product_reads_aliases():
    p = decode_product(b'{"id":9,"name":"X","price":1,"stock":2,"category":"c","imageUrl":"u"}')
    assert p.id == 9
    assert p.price == 1.0
    assert p.image_url == "u"


def test_decode_product_missing_fields_take_defaults():
    p = decode_product(b'{"price":1}')
    assert p.name == ""
    assert p.description == ""
    assert p.stock == 0
    assert p.category is None


@pytest.mark.parametrize("body", [
    b'{"name":"X","price":1,"stock":1,"bogus":true}',
    b'{"name":"X","price":1,"stock":1,"image_url":"u"}',
    b'{"name":"X","price":"1","stock":1}',
    b'{"name":"X","price":1,"stock":1.5}',
    b'{"name":"X","price":1,"stock":2147483648}',
    b'{"id":-2147483649,"name":"X","price":1,"stock":1}',
    b'{"name":"X","price":1,"stock":true}',
    b'[1, 2]',
    b'not json',
    b'',
])
def test_decode_product_rejects(body):
    with pytest.raises(HTTPException) as exc:
        decode_product(body)
    assert exc.value.status_code == 400
    assert exc.value.detail.startswith("Invalid request body")


@pytest.mark.parametrize("product", [
    Product(name="", price=1.0, stock=1),
    Product(name="X", price=-0.01, stock=1),
    Product(name="X", price=1.0, stock=-1),
])
def test_validate_product_rejects(product):
    with pytest.raises(HTTPException) as exc:
        validate_product(product)
    assert exc.value.status_code == 400
    assert exc.value.detail.startswith("Invalid product data")


def test_validate_product_accepts_zero_values():
    validate_product(Product(name="X", price=0.0, stock=0))


def test_decode_product_null_means_missing():
    p = decode_product(b'{"name":"X","description":null,"price":null,"stock":1,"category":null}')
    assert p.description == ""
    assert p.price == 0.0
    assert p.category is None


def test_decode_product_null_name_fails_validation():
    p = decode_product(b'{"name":null,"price":1,"stock":1}')
    with pytest.raises(HTTPException) as exc:
        validate_product(p)
    assert exc.value.detail.startswith("Invalid product data")


def test_decode_product_accepts_int32_bounds():
    p = decode_product(b'{"id":-2147483648,"name":"X","price":1,"stock":2147483647}')
    assert p.stock == 2147483647
