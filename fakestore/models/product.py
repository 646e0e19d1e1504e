# fakestore/models/product.py

"""Product data model shared by the client and its callers."""

import json
import math
from dataclasses import dataclass
from typing import Any

_STRING_FIELDS = ("title", "description", "category", "image")


@dataclass(frozen=True)
class Product:
    """A single catalogue entry as exchanged with the products API.

    ``id`` is ``None`` for products built locally for a create or
    update call; the server assigns it.
    """

    id: int | None
    title: str
    price: float
    description: str
    category: str
    image: str

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        """Build a Product from a decoded JSON object.

        Raises ``TypeError``, ``KeyError`` or ``ValueError`` when the
        payload does not match the product schema. Extra keys (such as
        the API's ``rating``) are ignored.
        """
        if not isinstance(data, dict):
            raise TypeError(
                f"expected a JSON object, got {type(data).__name__}"
            )

        product_id = data.get("id")
        if product_id is not None and (
            isinstance(product_id, bool) or not isinstance(product_id, int)
        ):
            raise TypeError(f"'id' must be an integer, got {product_id!r}")

        price = data["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError(f"'price' must be a number, got {price!r}")

        try:
            price = float(price)
        except OverflowError:
            raise ValueError("'price' is too large for a float") from None
        if not math.isfinite(price):
            raise ValueError(f"'price' must be finite, got {price!r}")

        values: dict[str, str] = {}
        for name in _STRING_FIELDS:
            value = data[name]
            if not isinstance(value, str):
                raise TypeError(f"'{name}' must be a string, got {value!r}")
            values[name] = value

        return cls(id=product_id, price=price, **values)

    @classmethod
    def list_from_json(cls, data: Any) -> list["Product"]:
        """Decode a JSON array of product objects."""
        if not isinstance(data, list):
            raise TypeError(
                f"expected a JSON array, got {type(data).__name__}"
            )
        return [cls.from_dict(item) for item in data]

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire object (``id`` is ``null`` when unset)."""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
        }

    def to_json(self) -> bytes:
        """Encode as a UTF-8 JSON request body."""
        return json.dumps(
            self.to_dict(), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
