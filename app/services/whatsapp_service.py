from typing import Optional
from urllib.parse import quote
import logging

from app.models.product import Product
from app.utils.exceptions import MissingFieldError
from app.utils.validators import is_blank

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"

# Same unescaped set as JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_text(text: str) -> str:
    return quote(text, safe=URI_COMPONENT_SAFE)


def build_whatsapp_url(phone_number: str, text: str) -> str:
    return f"{WHATSAPP_BASE_URL}/{phone_number.lstrip('+')}?text={encode_text(text)}"


def format_contact_message(name: str, email: str, message: str) -> str:
    return f"Message from {name} ({email}):\n\n{message}"


def format_inquiry_message(product: Product) -> str:
    lines = ["🛒 *Product Inquiry*", "", f"*Product:* {product.title}"]

    if product.category:
        lines.append(f"*Category:* {product.category}")
    if product.subtitle:
        lines.append(f"*Subtitle:* {product.subtitle}")
    if product.description:
        lines.append(f"*Description:* {product.description}")

    if product.features:
        lines.append("*Features:*")
        lines.extend(f"• {feature}" for feature in product.features)

    if product.specifications:
        lines.append("*Specifications:*")
        lines.extend(f"• {key}: {value}" for key, value in product.specifications.items())

    lines.append("")
    lines.append(
        "I'm interested in purchasing this product. "
        "Please provide more information about pricing and availability."
    )
    return "\n".join(lines)


class WhatsAppLinkBuilder:
    """Construit des liens wa.me ; aucun appel réseau, le client ouvre le lien."""

    def __init__(self, contact_number: str, sales_number: Optional[str] = None):
        self.contact_number = contact_number
        self.sales_number = sales_number or contact_number

    def build_contact_link(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
    ) -> str:
        for field, value in (("name", name), ("email", email), ("message", message)):
            if is_blank(value):
                raise MissingFieldError(field)

        url = build_whatsapp_url(
            self.contact_number, format_contact_message(name, email, message)
        )
        logger.info(f"Generated WhatsApp contact URL for {email}")
        return url

    def build_inquiry_link(self, product: Product) -> str:
        url = build_whatsapp_url(self.sales_number, format_inquiry_message(product))
        logger.info(f"Generated WhatsApp inquiry URL for product {product.id}")
        return url
