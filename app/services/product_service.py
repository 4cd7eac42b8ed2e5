from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import Optional, List, Dict, Any
import logging

from app.middleware.transaction_handler import transactional
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.utils.exceptions import (
    InvalidIdentifierError,
    ProductNotFoundError,
    ProductValidationError,
)
from app.utils.validators import (
    escape_like,
    sanitize_image_name,
    sanitize_search_query,
    validate_product_id,
)

logger = logging.getLogger(__name__)

DOCUMENT_FIELDS = (
    "title",
    "subtitle",
    "description",
    "images",
    "category",
    "features",
    "specifications",
)


class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def list_products(
        self, category: Optional[str] = None, search: Optional[str] = None
    ) -> List[Product]:
        query = self.db.query(Product)

        if category:
            query = query.filter(Product.category == category)

        search = sanitize_search_query(search) if search else None
        if search:
            pattern = f"%{escape_like(search)}%"
            query = query.filter(
                or_(
                    Product.title.ilike(pattern, escape="\\"),
                    Product.subtitle.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )

        return query.order_by(Product.seq).all()

    def get_product(self, product_id: str) -> Product:
        if not validate_product_id(product_id):
            logger.info(f"Invalid product ID format: {product_id}")
            raise InvalidIdentifierError(product_id)

        product = self._find(product_id)
        if not product:
            logger.info(f"Product not found with ID: {product_id}")
            raise ProductNotFoundError(product_id)

        return product

    @transactional
    def create_product(self, payload: ProductCreate) -> Product:
        product = Product(**self._to_document(payload))
        self.db.add(product)
        self.db.flush()

        logger.info(f"Product created: {product.id} - {product.title}")
        return product

    @transactional
    def replace_product(self, product_id: str, payload: ProductUpdate) -> Product:
        product = self.get_product(product_id)

        for key, value in self._to_document(payload).items():
            setattr(product, key, value)
        self.db.flush()

        logger.info(f"Product replaced: {product.id} - {product.title}")
        return product

    @transactional
    def delete_product(self, product_id: str) -> None:
        # A malformed id can never be stored, so it is simply absent here
        product = self._find(product_id) if validate_product_id(product_id) else None

        if not product:
            logger.info(f"Delete requested for missing product: {product_id}")
            raise ProductNotFoundError(product_id)

        self.db.delete(product)
        logger.info(f"Product deleted: {product_id}")

    def _find(self, product_id: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    @staticmethod
    def _to_document(payload: ProductCreate) -> Dict[str, Any]:
        """Document complet, champs omis à None, images réduites au nom de fichier."""
        data = payload.model_dump()
        document = {field: data.get(field) for field in DOCUMENT_FIELDS}

        images = []
        for image in document["images"] or []:
            filename = sanitize_image_name(image)
            if not filename:
                raise ProductValidationError(f"Invalid image reference: {image!r}")
            images.append(filename)
        document["images"] = images

        return document
