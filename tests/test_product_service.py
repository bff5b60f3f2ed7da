"""ProductService against the in-memory collection."""

import pytest
from bson import ObjectId

from productapi.exceptions import InvalidIdentifier, NotFound, ValidationError


def _create(service, **overrides):
    payload = {'name': 'Pen', 'price': 1.5, 'category': 'Stationery'}
    payload.update(overrides)
    return service.create_product(payload)


class TestCreate:

    def test_create_then_get_returns_same_fields(self, service):
        created = _create(service)
        fetched = service.get_product(str(created.id))
        assert (fetched.name, fetched.price, fetched.category) == ('Pen', 1.5, 'Stationery')
        assert isinstance(fetched.id, ObjectId)
        assert fetched.created_at is not None
        assert fetched.created_at == fetched.updated_at

    def test_invalid_payload_is_not_persisted(self, service, collection):
        with pytest.raises(ValidationError):
            service.create_product({'name': 'Pen', 'category': 'Stationery'})
        assert collection.calls == []
        assert service.list_products() == []


class TestList:

    def test_lists_in_insertion_order(self, service):
        _create(service, name='A')
        _create(service, name='B')
        assert [p.name for p in service.list_products()] == ['A', 'B']

    def test_empty_store(self, service):
        assert service.list_products() == []


class TestIdentifiers:

    @pytest.mark.parametrize('operation', ['get', 'update', 'delete'])
    def test_malformed_id_leaves_store_untouched(self, service, collection, operation):
        with pytest.raises(InvalidIdentifier) as exc:
            if operation == 'get':
                service.get_product('not-an-id')
            elif operation == 'update':
                service.update_product('not-an-id', {'price': 1})
            else:
                service.delete_product('not-an-id')
        assert exc.value.status_code == 400
        assert collection.calls == []

    @pytest.mark.parametrize('operation', ['get', 'update', 'delete'])
    def test_absent_id_is_not_found(self, service, operation):
        missing = str(ObjectId())
        with pytest.raises(NotFound) as exc:
            if operation == 'get':
                service.get_product(missing)
            elif operation == 'update':
                service.update_product(missing, {'price': 1})
            else:
                service.delete_product(missing)
        assert exc.value.status_code == 404


class TestUpdate:

    def test_partial_update_keeps_other_fields(self, service):
        created = _create(service)
        updated = service.update_product(str(created.id), {'category': 'X'})
        assert updated.category == 'X'
        assert updated.name == 'Pen'
        assert updated.price == 1.5
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    def test_negative_price_leaves_product_unchanged(self, service):
        created = _create(service)
        with pytest.raises(ValidationError):
            service.update_product(str(created.id), {'price': -5})
        assert service.get_product(str(created.id)) == created

    def test_invalid_id_checked_before_payload(self, service):
        with pytest.raises(InvalidIdentifier):
            service.update_product('123', {})


class TestDelete:

    def test_delete_returns_last_state_then_not_found(self, service):
        created = _create(service)
        service.update_product(str(created.id), {'price': 2.0})
        deleted = service.delete_product(str(created.id))
        assert deleted.price == 2.0
        with pytest.raises(NotFound):
            service.get_product(str(created.id))
