from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.services.product_service import ProductService
from app.services.upload_service import UploadStorage
from app.services.whatsapp_service import WhatsAppLinkBuilder


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_upload_storage(settings: Settings = Depends(get_settings)) -> UploadStorage:
    return UploadStorage(settings.UPLOAD_DIR, max_files=settings.MAX_UPLOAD_FILES)


def get_link_builder(settings: Settings = Depends(get_settings)) -> WhatsAppLinkBuilder:
    return WhatsAppLinkBuilder(
        contact_number=settings.WHATSAPP_CONTACT_NUMBER,
        sales_number=settings.WHATSAPP_SALES_NUMBER,
    )
