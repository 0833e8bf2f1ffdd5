import re
from typing import List

from fastapi import HTTPException
from pydantic import ValidationError

from .database import ProductStore
from .models import MAX_INT32, Product

MAX_PRODUCT_ID = MAX_INT32

_PRODUCT_ID_RE = re.compile(r"[+-]?[0-9]+")

SEED_PRODUCTS: List[Product] = [
    Product(name="Laptop", description="High-performance laptop", price=999.99, stock=10, category="Electronics"),
    Product(name="Mouse", description="Wireless mouse", price=29.99, stock=50, category="Electronics"),
    Product(name="Keyboard", description="Mechanical keyboard", price=79.99, stock=30, category="Electronics"),
]


def parse_product_id(raw: str) -> int:
    if raw is None or not _PRODUCT_ID_RE.fullmatch(raw):
        raise HTTPException(status_code=400, detail="Invalid product ID format")
    product_id = int(raw)
    if product_id < 1 or product_id > MAX_PRODUCT_ID:
        raise HTTPException(status_code=400, detail="Invalid product ID format")
    return product_id


def _describe_validation_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    if loc:
        return f"{loc}: {err['msg']}"
    return err["msg"]


def decode_product(body: bytes) -> Product:
    """Decode a JSON request body into a Product, rejecting unknown fields."""
    try:
        return Product.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid request body: {_describe_validation_error(e)}")


def validate_product(product: Product) -> None:
    if not product.name or product.price < 0 or product.stock < 0:
        raise HTTPException(
            status_code=400,
            detail="Invalid product data: name is required, price and stock must be non-negative",
        )


def seed_store(store: ProductStore) -> List[Product]:
    return [store.create(p) for p in SEED_PRODUCTS]
