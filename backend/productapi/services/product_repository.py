"""
商品数据仓库 - 封装 MongoDB 集合访问

仓库实例由应用工厂创建并注入 ProductService，不读取全局连接。
所有 pymongo 异常统一转换为 InternalError。
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from productapi.exceptions import InternalError
from productapi.models.product import utcnow

logger = logging.getLogger(__name__)


def _store_errors(method):
    """Re-raise driver failures as InternalError with the driver message."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except PyMongoError as e:
            logger.exception("MongoDB %s failed", method.__name__)
            raise InternalError(str(e)) from e
    return wrapper


class ProductRepository:
    """商品集合的读写"""

    def __init__(self, collection, clock: Callable = utcnow):
        self._collection = collection
        self._clock = clock

    @classmethod
    def from_database(cls, db, collection_name: str = 'products') -> 'ProductRepository':
        return cls(db[collection_name])

    @_store_errors
    def ping(self) -> None:
        self._collection.database.client.admin.command('ping')

    @_store_errors
    def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        now = self._clock()
        doc = dict(fields)
        doc['createdAt'] = now
        doc['updatedAt'] = now
        result = self._collection.insert_one(doc)
        doc['_id'] = result.inserted_id
        return doc

    @_store_errors
    def find_all(self) -> List[Dict[str, Any]]:
        return list(self._collection.find({}))

    @_store_errors
    def find_by_id(self, product_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self._collection.find_one({'_id': product_id})

    @_store_errors
    def update(self, product_id: ObjectId, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set the given fields, refresh updatedAt, return the updated document."""
        update = dict(changes)
        update['updatedAt'] = self._clock()
        return self._collection.find_one_and_update(
            {'_id': product_id},
            {'$set': update},
            return_document=ReturnDocument.AFTER,
        )

    @_store_errors
    def delete(self, product_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self._collection.find_one_and_delete({'_id': product_id})
