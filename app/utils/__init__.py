from app.utils.validators import (
    validate_product_id,
    sanitize_image_name,
    sanitize_search_query,
    escape_like,
    is_blank,
)
from app.utils.exceptions import (
    CatalogError,
    ProductValidationError,
    InvalidIdentifierError,
    ProductNotFoundError,
    NoFilesProvidedError,
    UploadedFileNotFoundError,
    MissingFieldError,
    TooManyFilesError,
)

__all__ = [
    "validate_product_id",
    "sanitize_image_name",
    "sanitize_search_query",
    "escape_like",
    "is_blank",
    "CatalogError",
    "ProductValidationError",
    "InvalidIdentifierError",
    "ProductNotFoundError",
    "NoFilesProvidedError",
    "UploadedFileNotFoundError",
    "MissingFieldError",
    "TooManyFilesError",
]
