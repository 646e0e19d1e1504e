# fakestore/services/product_service.py

"""Product operations that call the API and print what came back."""

import logging

from rich import print

from fakestore.models.product import Product
from fakestore.network.endpoints import ProductEndpoints
from fakestore.network.errors import NetworkError
from fakestore.network.resource import (
    Delete,
    Get,
    Post,
    Put,
    QueryItem,
    Resource,
)
from fakestore.network.web_service import WebService

logger = logging.getLogger("fakestore.products")

SAMPLE_PRODUCT = Product(
    id=None,
    title="Sample Product",
    price=100.0,
    description="Sample Description",
    category="Sample Category",
    image="https://i.sample.cc",
)

UPDATABLE_PRODUCT = Product(
    id=None,
    title="Updatable Product",
    price=100.0,
    description="Updatable Description",
    category="Updatable Category",
    image="https://i.updatable.cc",
)


def _invalid_url() -> None:
    logger.error("Endpoint table produced no URL")
    print("Invalid Url")


def _report(exc: NetworkError) -> None:
    logger.error("%s: %s", type(exc).__name__, exc.description)
    print(exc.description)


async def fetch_products(
    query_items: tuple[QueryItem, ...] = (),
    service: WebService | None = None,
) -> list[Product] | None:
    """GET the product list; extra *query_items* go into the query string."""
    url = ProductEndpoints.all_products()
    if url is None:
        _invalid_url()
        return None

    resource = Resource(url, Get(query_items))
    try:
        products = await (service or WebService()).load(
            resource, Product.list_from_json
        )
    except NetworkError as exc:
        _report(exc)
        return None
    print(products)
    return products


async def fetch_product_by_id(
    product_id: int, service: WebService | None = None
) -> Product | None:
    url = ProductEndpoints.for_product_id(product_id)
    if url is None:
        _invalid_url()
        return None

    try:
        product = await (service or WebService()).load(
            Resource(url), Product.from_dict
        )
    except NetworkError as exc:
        _report(exc)
        return None
    print(product)
    return product


async def add_sample_product(
    service: WebService | None = None,
) -> Product | None:
    """POST ``SAMPLE_PRODUCT`` and return the server's copy."""
    url = ProductEndpoints.add_product()
    if url is None:
        _invalid_url()
        return None

    resource = Resource(url, Post(SAMPLE_PRODUCT.to_json()))
    try:
        added = await (service or WebService()).load(
            resource, Product.from_dict
        )
    except NetworkError as exc:
        _report(exc)
        return None
    print(added)
    return added


async def update_sample_product(
    product_id: int = 8, service: WebService | None = None
) -> Product | None:
    """PUT ``UPDATABLE_PRODUCT`` over product *product_id*."""
    url = ProductEndpoints.update_product(product_id)
    if url is None:
        _invalid_url()
        return None

    resource = Resource(url, Put(UPDATABLE_PRODUCT.to_json()))
    try:
        updated = await (service or WebService()).load(
            resource, Product.from_dict
        )
    except NetworkError as exc:
        _report(exc)
        return None
    print(updated)
    return updated


async def delete_product(
    product_id: int, service: WebService | None = None
) -> Product | None:
    """DELETE product *product_id*; the API echoes the removed product."""
    url = ProductEndpoints.delete_product(product_id)
    if url is None:
        _invalid_url()
        return None

    try:
        deleted = await (service or WebService()).load(
            Resource(url, Delete()), Product.from_dict
        )
    except NetworkError as exc:
        _report(exc)
        return None
    print(deleted)
    return deleted
