"""
Pydantic models for product data.

Wire names are camelCase (``minPrice``, ``deletedProduct``); the Python
attributes are snake_case and mapped through field aliases.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Laptop"])
    price: float = Field(..., gt=0, examples=[1200.0])


class ProductFilters(BaseModel):
    """Normalized filter values that were applied to a listing.

    Filters that were absent or could not be parsed are ``None``.
    """

    model_config = ConfigDict(populate_by_name=True)

    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    name: Optional[str] = None
    sort_by: Optional[str] = Field(None, alias="sortBy")
    order: str = "asc"


class ProductListMetadata(BaseModel):
    total: int = Field(..., description="Number of products in the collection")
    filtered: int = Field(..., description="Number of products matching the filters")
    filters: ProductFilters


class ProductList(BaseModel):
    products: List[ProductRead]
    metadata: ProductListMetadata


class ProductDeleted(BaseModel):
    """Summary returned after a product has been removed."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_product: ProductRead = Field(..., alias="deletedProduct")
    remaining_products: int = Field(..., alias="remainingProducts")
