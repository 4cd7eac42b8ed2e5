from fastapi import APIRouter, Depends

from app.core.dependencies import get_link_builder
from app.schemas.contact import ContactRequest, ContactResponse
from app.services.whatsapp_service import WhatsAppLinkBuilder

router = APIRouter(tags=["Contact"])


@router.post("/contact", response_model=ContactResponse)
def contact(
    request: ContactRequest,
    links: WhatsAppLinkBuilder = Depends(get_link_builder),
):
    url = links.build_contact_link(request.name, request.email, request.message)
    return {"whatsappUrl": url}
