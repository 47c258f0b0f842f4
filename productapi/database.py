import threading
from typing import Any, Dict, Iterator, List, Optional

# In-memory product store. One instance is owned by each application
# (see main.create_app) and handed to the route logic; nothing here is global.


class ProductStore:
    """Ordered collection of product records, insertion order preserved.

    Route logic never awaits while touching the store, so on the event loop
    every request's read-modify-write is already atomic.  The lock keeps that
    true when the store is used from worker threads.
    """

    def __init__(self) -> None:
        self._products: List[Dict[str, Any]] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.all())

    def all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._products)

    def index_of(self, product_id: str) -> int:
        with self._lock:
            for i, p in enumerate(self._products):
                if p.get("id") == product_id:
                    return i
        return -1

    def find(self, product_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            i = self.index_of(product_id)
            return self._products[i] if i != -1 else None

    def append(self, product: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            self._products.append(product)
        return product

    def replace(self, product_id: str, product: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            i = self.index_of(product_id)
            if i == -1:
                return None
            self._products[i] = product
            return product

    def remove(self, product_id: str) -> bool:
        with self._lock:
            i = self.index_of(product_id)
            if i == -1:
                return False
            del self._products[i]
            return True

    def clear(self) -> None:
        with self._lock:
            self._products.clear()
