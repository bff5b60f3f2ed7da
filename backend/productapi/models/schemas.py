"""
请求体校验 - create 和 update 共用同一套字段规则

- ProductCreate: POST /api/products, name/price/category 必填
- ProductUpdate: PUT /api/products/<id>, 字段可选但至少提供一个
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError
from pydantic import field_validator, model_validator
from pydantic_core import PydanticCustomError

from productapi.exceptions import ValidationError

REQUIRED_FIELDS = ('name', 'price', 'category')

# Error types whose messages are already written for API callers
_CUSTOM_ERROR_TYPES = {'blank', 'price_type', 'negative_price', 'no_fields'}


class _ProductFields(BaseModel):
    """Field rules shared by create and update payloads."""

    model_config = ConfigDict(extra='ignore', allow_inf_nan=False)

    @field_validator('name', 'category', mode='before', check_fields=False)
    @classmethod
    def _strip_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator('name', 'category', check_fields=False)
    @classmethod
    def _require_text(cls, value, info):
        if value is not None and not value:
            raise PydanticCustomError(
                'blank', 'Product {field} cannot be empty', {'field': info.field_name}
            )
        return value

    @field_validator('price', mode='before', check_fields=False)
    @classmethod
    def _reject_bool_price(cls, value):
        if isinstance(value, bool):
            raise PydanticCustomError('price_type', 'Price must be a number')
        return value

    @field_validator('price', check_fields=False)
    @classmethod
    def _non_negative_price(cls, value):
        if value is not None and value < 0:
            raise PydanticCustomError('negative_price', 'Price cannot be negative')
        return value


class ProductCreate(_ProductFields):
    name: str
    price: float
    category: str


class ProductUpdate(_ProductFields):
    name: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None

    @model_validator(mode='after')
    def _at_least_one_field(self):
        if not self.changes():
            raise PydanticCustomError(
                'no_fields',
                'At least one field (name, price, or category) must be provided',
            )
        return self

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller supplied with a value."""
        return self.model_dump(exclude_none=True)


def _is_missing(error: Dict[str, Any]) -> bool:
    return error['type'] in ('missing', 'blank') or error.get('input', '') is None


def _field_of(error: Dict[str, Any]) -> Optional[str]:
    loc = error.get('loc') or ()
    return str(loc[0]) if loc else None


def _describe(error: Dict[str, Any]) -> str:
    if error['type'] in _CUSTOM_ERROR_TYPES:
        return error['msg']
    field = _field_of(error)
    return f"{field}: {error['msg']}" if field else error['msg']


def _ensure_object(payload) -> Dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    return payload


def parse_create(payload) -> ProductCreate:
    """Validate a create payload, listing missing fields in one message."""
    payload = _ensure_object(payload)
    try:
        return ProductCreate.model_validate(payload)
    except PydanticValidationError as e:
        errors = e.errors()
        missing = {_field_of(err) for err in errors if _is_missing(err)}
        messages: List[str] = []
        if missing:
            names = [f for f in REQUIRED_FIELDS if f in missing]
            messages.append('Missing required fields: ' + ', '.join(names))
        messages.extend(_describe(err) for err in errors if not _is_missing(err))
        raise ValidationError('; '.join(messages)) from e


def parse_update(payload) -> ProductUpdate:
    """Validate a partial update payload."""
    payload = _ensure_object(payload)
    try:
        return ProductUpdate.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError('; '.join(_describe(err) for err in e.errors())) from e
