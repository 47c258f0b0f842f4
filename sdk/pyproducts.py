# sdk/pyproducts.py
import httpx
import requests
from typing import Any, Dict, Optional


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = "123456",
                 timeout: int = 10, session: Optional[Any] = None,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        # any requests-style session works here (tests pass a TestClient)
        self.session = session if session is not None else requests.Session()
        # used by the async calls; None means a real network connection
        self.async_transport = async_transport
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str = "") -> str:
        return f"{self.base_url}/api/products{path}"

    @staticmethod
    def _product_body(name: str, description: str, price: float, category: str,
                      in_stock: bool, extra: Dict[str, Any]) -> Dict[str, Any]:
        body = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "inStock": in_stock,
        }
        body.update(extra)
        return body

    # Listing / lookup
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None,
                      limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self._url(), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, q: str):
        r = self.session.get(self._url("/search"), params={"q": q}, timeout=self.timeout)
        # a blank query is a 400 with an error body; hand it back instead of raising
        if r.status_code == 400:
            return r.json()
        r.raise_for_status()
        return r.json()

    def stats(self):
        r = self.session.get(self._url("/stats"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Writes
    def create_product(self, name: str, description: str, price: float, category: str,
                       in_stock: bool = True, **extra):
        body = self._product_body(name, description, price, category, in_stock, extra)
        r = self.session.post(self._url(), json=body, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def replace_product(self, product_id: str, name: str, description: str, price: float,
                        category: str, in_stock: bool = True, **extra):
        body = self._product_body(name, description, price, category, in_stock, extra)
        r = self.session.put(self._url(f"/{product_id}"), json=body, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> bool:
        r = self.session.delete(self._url(f"/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return True

    # Async create, used by the concurrency demo
    async def create_product_async(self, name: str, description: str, price: float, category: str,
                                   in_stock: bool = True, **extra):
        body = self._product_body(name, description, price, category, in_stock, extra)
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport) as client:
            r = await client.post(self._url(), json=body, headers=headers)
            r.raise_for_status()
            return r.json()
