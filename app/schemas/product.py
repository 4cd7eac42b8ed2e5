from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict


class ProductCreate(BaseModel):
    """Document produit tel que soumis par le formulaire d'administration.

    Les clés inconnues (par ex. l'ancien champ ``image``) sont ignorées.
    """

    title: str = Field(..., min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    features: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("Product title cannot be empty")
        return v

    @field_validator("images")
    @classmethod
    def validate_images(cls, v):
        for image in v:
            if not image or not image.strip():
                raise ValueError("Image references cannot be empty")
        return v


class ProductUpdate(ProductCreate):
    """Remplacement complet : les champs omis disparaissent du document."""


class ProductResponse(BaseModel):
    id: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    description: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    features: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None

    model_config = ConfigDict(from_attributes=True)


class InquiryResponse(BaseModel):
    whatsappUrl: str


class MessageResponse(BaseModel):
    message: str
