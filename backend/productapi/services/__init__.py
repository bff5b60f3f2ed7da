# Services package
#
# Module structure:
# - product_service.py: request validation and business rules (main API)
# - product_repository.py: MongoDB collection access
#
#   from productapi.services import ProductService, ProductRepository

from .product_service import ProductService
from .product_repository import ProductRepository

__all__ = [
    'ProductService',
    'ProductRepository',
]
