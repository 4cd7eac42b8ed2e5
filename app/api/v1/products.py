from fastapi import APIRouter, Depends
from typing import List, Optional

from app.core.dependencies import get_link_builder, get_product_service
from app.schemas.product import (
    InquiryResponse,
    MessageResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from app.services.product_service import ProductService
from app.services.whatsapp_service import WhatsAppLinkBuilder

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductResponse], response_model_exclude_none=True)
def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    service: ProductService = Depends(get_product_service),
):
    return service.list_products(category=category, search=search)


@router.post(
    "",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def create_product(
    request: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return service.create_product(request)


@router.get(
    "/{product_id}", response_model=ProductResponse, response_model_exclude_none=True
)
def get_product(
    product_id: str, service: ProductService = Depends(get_product_service)
):
    return service.get_product(product_id)


@router.put(
    "/{product_id}", response_model=ProductResponse, response_model_exclude_none=True
)
def replace_product(
    product_id: str,
    request: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """Remplacer un produit (le formulaire renvoie tous les champs)"""
    return service.replace_product(product_id, request)


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: str, service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id)
    return {"message": "Product deleted successfully"}


@router.get("/{product_id}/inquiry", response_model=InquiryResponse)
def product_inquiry(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    links: WhatsAppLinkBuilder = Depends(get_link_builder),
):
    product = service.get_product(product_id)
    return {"whatsappUrl": links.build_inquiry_link(product)}
