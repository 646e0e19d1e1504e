# fakestore/network/endpoints.py

"""URL table for the products API."""

from urllib.parse import urlsplit

from fakestore.config.settings import Settings


def _valid_url(candidate: str) -> str | None:
    """Return *candidate* if it is an absolute http(s) URL, else None."""
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    if any(ch.isspace() for ch in candidate):
        return None
    return candidate


class ProductEndpoints:
    """Static URL builders for every product operation."""

    @staticmethod
    def all_products() -> str | None:
        return _valid_url(f"{Settings.API_BASE_URL}/products")

    @staticmethod
    def for_product_id(product_id: int) -> str | None:
        return _valid_url(f"{Settings.API_BASE_URL}/products/{product_id}")

    @staticmethod
    def add_product() -> str | None:
        return _valid_url(f"{Settings.API_BASE_URL}/products")

    @staticmethod
    def update_product(product_id: int) -> str | None:
        return _valid_url(f"{Settings.API_BASE_URL}/products/{product_id}")

    @staticmethod
    def delete_product(product_id: int) -> str | None:
        return _valid_url(f"{Settings.API_BASE_URL}/products/{product_id}")
