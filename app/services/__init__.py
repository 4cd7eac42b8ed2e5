"""
Business logic services
"""

from app.services.product_service import ProductService
from app.services.upload_service import UploadStorage
from app.services.whatsapp_service import WhatsAppLinkBuilder

__all__ = [
    "ProductService",
    "UploadStorage",
    "WhatsAppLinkBuilder",
]
