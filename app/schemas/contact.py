from pydantic import BaseModel
from typing import Optional


class ContactRequest(BaseModel):
    # Emptiness is checked by the relay itself so the client gets a single message
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    whatsappUrl: str
