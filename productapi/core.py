import re
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt

# Client-facing error messages, one per failure kind.
UNAUTHORIZED = "Unauthorized: Invalid API Key"
FIELDS_REQUIRED = "All fields are required"
INVALID_TYPES = "Invalid data types for price or inStock"
NOT_FOUND = "Product not found"
MISSING_QUERY = "Missing search query (?q=)"
INTERNAL_ERROR = "Something went wrong"

REQUIRED_FIELDS = ("name", "description", "price", "category", "inStock")

# Only price and inStock are checked for presence rather than truthiness,
# so 0 and false are valid values for them.
PRESENCE_ONLY_FIELDS = ("price", "inStock")


class ProductIn(BaseModel):
    """Body of a create or replace request.

    Unknown keys are kept and stored with the record.  Only ``price`` and
    ``inStock`` carry a type; the text fields are checked for presence only.
    """

    model_config = ConfigDict(extra="allow")

    name: Any
    description: Any
    price: Union[StrictInt, StrictFloat]
    category: Any
    in_stock: StrictBool = Field(alias="inStock")


def _is_falsy(value: Any) -> bool:
    # JSON values only: null, false, 0 and "" are falsy; arrays and objects are not.
    if value is None or isinstance(value, (bool, int, float, str)):
        return not value
    return False


def validation_error(body: Any) -> Optional[str]:
    """Return the error message for an invalid product body, or None."""
    fields = body if isinstance(body, dict) else {}
    for name in REQUIRED_FIELDS:
        if name not in fields:
            return FIELDS_REQUIRED
        if name not in PRESENCE_ONLY_FIELDS and _is_falsy(fields[name]):
            return FIELDS_REQUIRED

    price = fields["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return INVALID_TYPES
    if not isinstance(fields["inStock"], bool):
        return INVALID_TYPES
    return None


def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    # Body fields are spread after the generated id, so an "id" sent by the
    # client replaces it.
    return {"id": product_id, **p.model_dump(by_alias=True)}


def _replace_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    fields = p.model_dump(by_alias=True)
    fields.pop("id", None)
    return {"id": product_id, **fields}


_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_int(raw: str) -> Optional[int]:
    """Parse the leading integer of ``raw`` the way JavaScript's parseInt does.

    Returns None where parseInt would give NaN.

    >>> parse_int("2"), parse_int(" 3abc"), parse_int("0x1A"), parse_int("abc")
    (2, 3, 26, None)
    """
    m = _INT_PREFIX.match(raw)
    if not m:
        return None
    sign, hex_digits, dec_digits = m.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(dec_digits)
    return -value if sign == "-" else value
