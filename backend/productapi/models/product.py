from datetime import datetime, timezone
from bson import ObjectId

from productapi.exceptions import InvalidIdentifier


def format_timestamp(value):
    """BSON datetime -> ISO-8601 UTC, millisecond precision, ``Z`` suffix"""
    if value is None:
        return None
    # pymongo returns naive datetimes that are already UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def parse_object_id(raw) -> ObjectId:
    """Parse a product id from the URL, rejecting anything that is not an ObjectId."""
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise InvalidIdentifier()
    return ObjectId(raw)


class Product:
    """商品模型"""

    def __init__(self, id, name, price, category, created_at=None, updated_at=None):
        self.id = id
        self.name = name
        self.price = price
        self.category = category
        self.created_at = created_at
        self.updated_at = updated_at

    def to_dict(self):
        """转换为 API 输出字典"""
        return {
            'id': str(self.id),
            'name': self.name,
            'price': self.price,
            'category': self.category,
            'createdAt': format_timestamp(self.created_at),
            'updatedAt': format_timestamp(self.updated_at),
        }

    @staticmethod
    def from_document(doc):
        """从 MongoDB 文档创建商品"""
        return Product(
            id=doc['_id'],
            name=doc.get('name'),
            price=doc.get('price'),
            category=doc.get('category'),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt'),
        )

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'<Product {self.id} {self.name!r}>'


def utcnow() -> datetime:
    """Current UTC time truncated to BSON datetime precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
