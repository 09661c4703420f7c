"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers (products, users)
under a unified prefix.  When new domains are introduced, update this
file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import hello, products, users

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(hello.router, prefix="/hello", tags=["hello"])
