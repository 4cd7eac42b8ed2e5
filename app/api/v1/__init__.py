"""
API v1 routes
"""

from fastapi import APIRouter
from app.api.v1 import contact, products, uploads

api_router = APIRouter(prefix="/api")

api_router.include_router(products.router)
api_router.include_router(uploads.router)
api_router.include_router(contact.router)

files_router = uploads.files_router

__all__ = ["api_router", "files_router"]
