# sdk/pystore.py
import requests
import httpx
from typing import Optional, Dict, Any


def _details_payload(name: str, price: float, stock: int, description: str = "",
                     category: Optional[str] = None, image_url: Optional[str] = None) -> Dict[str, Any]:
    payload = {"name": name, "description": description, "price": price, "stock": stock}
    if category is not None:
        payload["category"] = category
    if image_url is not None:
        payload["imageUrl"] = image_url
    return payload


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:8080", timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def health(self) -> str:
        r = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        r.raise_for_status()
        return r.text

    def get_product(self, product_id: int):
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Replaces the whole record; fields left out fall back to empty values.
    def update_product_details(self, product_id: int, name: str, price: float, stock: int,
                               description: str = "", category: Optional[str] = None,
                               image_url: Optional[str] = None) -> None:
        payload = _details_payload(name, price, stock, description, category, image_url)
        r = self.session.post(f"{self.base_url}/products/{product_id}/details", json=payload, timeout=self.timeout)
        r.raise_for_status()

    async def update_product_details_async(self, product_id: int, name: str, price: float, stock: int,
                                           description: str = "", category: Optional[str] = None,
                                           image_url: Optional[str] = None) -> httpx.Response:
        payload = _details_payload(name, price, stock, description, category, image_url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(f"{self.base_url}/products/{product_id}/details", json=payload)
            # do not raise here, callers compare status codes across concurrent updates
            return r


def error_message(exc: Exception) -> str:
    """Pull the server's error message out of a failed request, if there is one."""
    response = getattr(exc, "response", None)
    if response is None:
        return str(exc)
    try:
        return f"HTTP {response.status_code}: {response.json()['message']}"
    except (ValueError, KeyError, TypeError):
        return f"HTTP {response.status_code}: {response.text}"
