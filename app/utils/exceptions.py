from typing import Optional
from fastapi import status


class CatalogError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ProductValidationError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid product payload"


class InvalidIdentifierError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid product ID format."

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__()


class ProductNotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Product not found"

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__()


class NoFilesProvidedError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "No files uploaded."


class UploadedFileNotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "File not found"

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__()


class MissingFieldError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "All fields are required"

    def __init__(self, field: str):
        self.field = field
        super().__init__()


class TooManyFilesError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Too many files. At most {limit} files per upload.")
