from fastapi import HTTPException

from .core import decode_product, parse_product_id, validate_product
from .database import ProductStore
from .models import Product

# Request-handler logic. These run on worker threads and talk to the store
# directly; main.py only wires them to routes.


def get_product_logic(store: ProductStore, raw_product_id: str) -> Product:
    product_id = parse_product_id(raw_product_id)
    product = store.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product with ID {product_id} not found")
    return product


def update_product_details_logic(store: ProductStore, raw_product_id: str, body: bytes) -> None:
    product_id = parse_product_id(raw_product_id)
    product = decode_product(body)
    validate_product(product)
    if not store.replace(product_id, product):
        raise HTTPException(status_code=404, detail=f"Product with ID {product_id} not found")
