"""
商品服务 - 业务逻辑层

校验请求体和商品 ID，调用注入的 ProductRepository，
将空结果转换为 NotFound。
"""

import logging
from typing import Any, Dict, List

from productapi.exceptions import NotFound
from productapi.models.product import Product, parse_object_id
from productapi.models.schemas import parse_create, parse_update

from .product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """商品服务类"""

    def __init__(self, repository: ProductRepository):
        self._repo = repository

    def create_product(self, payload: Any) -> Product:
        data = parse_create(payload)
        doc = self._repo.insert(data.model_dump())
        product = Product.from_document(doc)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def list_products(self) -> List[Product]:
        return [Product.from_document(doc) for doc in self._repo.find_all()]

    def get_product(self, product_id: str) -> Product:
        oid = parse_object_id(product_id)
        doc = self._repo.find_by_id(oid)
        if doc is None:
            raise NotFound()
        return Product.from_document(doc)

    def update_product(self, product_id: str, payload: Any) -> Product:
        oid = parse_object_id(product_id)
        changes: Dict[str, Any] = parse_update(payload).changes()
        doc = self._repo.update(oid, changes)
        if doc is None:
            raise NotFound()
        logger.info("Updated product %s fields=%s", oid, sorted(changes))
        return Product.from_document(doc)

    def delete_product(self, product_id: str) -> Product:
        oid = parse_object_id(product_id)
        doc = self._repo.delete(oid)
        if doc is None:
            raise NotFound()
        logger.info("Deleted product %s", oid)
        return Product.from_document(doc)
