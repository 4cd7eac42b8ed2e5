from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    InquiryResponse,
    MessageResponse,
)
from app.schemas.upload import UploadResponse
from app.schemas.contact import ContactRequest, ContactResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "InquiryResponse",
    "MessageResponse",
    "UploadResponse",
    "ContactRequest",
    "ContactResponse",
]
