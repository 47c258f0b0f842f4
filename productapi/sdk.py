import json
import uuid
from typing import Any, Dict, List, Optional

from starlette.responses import Response

from .core import (
    MISSING_QUERY, NOT_FOUND, ProductIn,
    _make_product_dict, _replace_product_dict, parse_int
)
from .database import ProductStore
from .middleware import ProductJSONResponse, error_response

# This file contains the logic behind every route.  Each function gets the
# store it works on; main.py does the wiring.


def _category_key(category: Any) -> str:
    # Object keys are strings in the response; non-string categories use their JSON text.
    return category if isinstance(category, str) else json.dumps(category)


def _paginate(items: List[Dict[str, Any]], page: Optional[int], limit: Optional[int]) -> List[Dict[str, Any]]:
    if page is None or limit is None:
        return []
    start = (page - 1) * limit
    return items[start:start + limit]


async def list_products_logic(store: ProductStore, category: Optional[str] = None,
                              page: Optional[str] = None, limit: Optional[str] = None):
    filtered = store.all()
    if category:
        wanted = category.lower()
        filtered = [p for p in filtered if p["category"].lower() == wanted]

    page_num = parse_int(page) if page is not None else 1
    limit_num = parse_int(limit) if limit is not None else 10
    return {
        "total": len(filtered),
        "page": page_num,
        "limit": limit_num,
        "data": _paginate(filtered, page_num, limit_num),
    }


async def get_product_logic(store: ProductStore, product_id: str):
    p = store.find(product_id)
    if p is None:
        return error_response(404, NOT_FOUND)
    return p


async def create_product_logic(store: ProductStore, payload: ProductIn):
    product = store.append(_make_product_dict(str(uuid.uuid4()), payload))
    return ProductJSONResponse(status_code=201, content=product)


async def replace_product_logic(store: ProductStore, product_id: str, payload: ProductIn):
    product = store.replace(product_id, _replace_product_dict(product_id, payload))
    if product is None:
        return error_response(404, NOT_FOUND)
    return product


async def delete_product_logic(store: ProductStore, product_id: str):
    if not store.remove(product_id):
        return error_response(404, NOT_FOUND)
    return Response(status_code=204)


async def search_products_logic(store: ProductStore, q: Optional[str] = None):
    if not q:
        return error_response(400, MISSING_QUERY)
    term = q.lower()
    results = [p for p in store.all() if term in p["name"].lower()]
    return {"count": len(results), "results": results}


async def product_stats_logic(store: ProductStore):
    stats: Dict[str, int] = {}
    for p in store.all():
        key = _category_key(p["category"])
        stats[key] = stats.get(key, 0) + 1
    return {"countByCategory": stats}
