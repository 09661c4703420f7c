"""
FastAPI dependencies for API v1.

Services are built per request around the stores attached to the
running application, so both the collection routes and the by‑id
routes of a resource operate on the same records.
"""

from fastapi import Depends

from catalog_api.app.core.store import Stores, get_stores
from catalog_api.app.services.product_service import ProductService
from catalog_api.app.services.user_service import UserService


def get_product_service(stores: Stores = Depends(get_stores)) -> ProductService:
    return ProductService(stores.products)


def get_user_service(stores: Stores = Depends(get_stores)) -> UserService:
    return UserService(stores.users)
