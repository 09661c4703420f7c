"""
Business logic for products.

The ``ProductService`` validates product payloads, enforces the
case‑insensitive uniqueness of product names and implements the
filtered and sorted listing.  Records are kept in the shared
:class:`~catalog_api.app.core.store.RecordStore` handed to the service
by the API layer.
"""

import logging
import unicodedata
from operator import itemgetter
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.errors import BadRequestError, ConflictError, NotFoundError
from ..core.store import Record, RecordStore
from ..schemas.product import (
    ProductDeleted,
    ProductFilters,
    ProductList,
    ProductListMetadata,
    ProductRead,
)
from .validators import clean_price, is_number, parse_query_number, parse_record_id


logger = logging.getLogger(__name__)


def name_sort_key(product: Record) -> Tuple[str, str, str]:
    """Order names alphabetically ignoring case and accents ("Érable" near "E")."""
    name = product["name"]
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name.casefold(), name


SORT_KEYS: Dict[str, Callable[[Record], Any]] = {
    "id": itemgetter("id"),
    "price": itemgetter("price"),
    "name": name_sort_key,
}


class ProductService:
    """Product catalogue operations on top of a record store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def list_products(
        self,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        name: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> ProductList:
        """Return products matching all given filters.

        Query values arrive as raw strings.  Price bounds that cannot be
        parsed and unknown ``sort_by`` fields are ignored instead of
        rejected; the metadata reports ``None`` for them.  ``order``
        defaults to ascending and only ``desc`` reverses the sort.
        """
        filters = ProductFilters(
            min_price=parse_query_number(min_price),
            max_price=parse_query_number(max_price),
            name=name.strip() if name and name.strip() else None,
            sort_by=sort_by if sort_by in SORT_KEYS else None,
            order="desc" if order and order.lower() == "desc" else "asc",
        )

        products = self.store.all()
        total = len(products)
        if filters.min_price is not None:
            products = [p for p in products if p["price"] >= filters.min_price]
        if filters.max_price is not None:
            products = [p for p in products if p["price"] <= filters.max_price]
        if filters.name is not None:
            needle = filters.name.casefold()
            products = [p for p in products if needle in p["name"].casefold()]
        if filters.sort_by is not None:
            products.sort(key=SORT_KEYS[filters.sort_by], reverse=filters.order == "desc")

        return ProductList(
            products=[ProductRead(**p) for p in products],
            metadata=ProductListMetadata(total=total, filtered=len(products), filters=filters),
        )

    async def create_product(self, body: Dict[str, Any]) -> ProductRead:
        """Validate ``body`` and store a new product.

        ``name`` and ``price`` are required.  The name is trimmed and
        must not clash, ignoring case, with an existing product.
        """
        name = body.get("name")
        if name in (None, "") or "price" not in body:
            raise BadRequestError(
                "Missing data",
                "Name and price are required",
                required=["name", "price"],
            )
        if not isinstance(name, str) or not is_number(body["price"]):
            raise BadRequestError(
                "Invalid data types",
                "The name must be text and the price must be a number",
            )
        name = name.strip()
        if not name:
            raise BadRequestError("Invalid name", "The name cannot be empty")
        price = clean_price(body["price"])

        with self.store.transaction():
            folded = name.casefold()
            if self.store.find(lambda p: p["name"].casefold() == folded):
                raise ConflictError("Duplicate product", f"A product named '{name}' already exists")
            product = self.store.insert({"name": name, "price": price})
        logger.info("Created product %s (%s)", product["id"], product["name"])
        return ProductRead(**product)

    async def get_product(self, raw_id: Any) -> ProductRead:
        product_id = parse_record_id(raw_id)
        product = self.store.get(product_id)
        if product is None:
            raise NotFoundError("Product not found", f"No product exists with ID: {product_id}")
        return ProductRead(**product)

    async def delete_product(self, raw_id: Any) -> ProductDeleted:
        product_id = parse_record_id(raw_id)
        with self.store.transaction():
            product = self.store.delete(product_id)
            if product is None:
                raise NotFoundError(
                    "Product not found",
                    f"Cannot delete. No product exists with ID: {product_id}",
                )
            remaining = self.store.count()
        logger.info("Deleted product %s, %d remaining", product_id, remaining)
        return ProductDeleted(
            message="Product deleted successfully",
            deleted_product=ProductRead(**product),
            remaining_products=remaining,
        )
