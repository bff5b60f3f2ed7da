"""
Shared fixtures: an in-memory stand-in for the pymongo collection, injected
through ``create_app(repository=...)`` so the real repository, service and
blueprint run without MongoDB.
"""

import copy
import os
import sys
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo import ReturnDocument

# ---------------------------------------------------------------------------
# Ensure project paths are importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'backend'))

from config import TestConfig  # noqa: E402
from productapi import create_app  # noqa: E402
from productapi.services import ProductRepository, ProductService  # noqa: E402


class InMemoryCollection:
    """The subset of ``pymongo.collection.Collection`` the repository uses."""

    def __init__(self):
        self.docs = {}
        self.calls = []

    def insert_one(self, doc):
        self.calls.append('insert_one')
        doc.setdefault('_id', ObjectId())
        self.docs[doc['_id']] = copy.deepcopy(doc)
        return SimpleNamespace(inserted_id=doc['_id'])

    def find(self, filter=None):
        self.calls.append('find')
        assert not filter
        return iter([copy.deepcopy(d) for d in self.docs.values()])

    def find_one(self, filter):
        self.calls.append('find_one')
        doc = self.docs.get(filter['_id'])
        return copy.deepcopy(doc) if doc is not None else None

    def find_one_and_update(self, filter, update, return_document=ReturnDocument.BEFORE):
        self.calls.append('find_one_and_update')
        doc = self.docs.get(filter['_id'])
        if doc is None:
            return None
        before = copy.deepcopy(doc)
        doc.update(copy.deepcopy(update['$set']))
        return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before

    def find_one_and_delete(self, filter):
        self.calls.append('find_one_and_delete')
        return self.docs.pop(filter['_id'], None)


class TickingClock:
    """Deterministic clock: each call is one second after the previous one."""

    def __init__(self, start=datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def collection():
    return InMemoryCollection()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def repository(collection, clock):
    return ProductRepository(collection, clock=clock)


@pytest.fixture
def service(repository):
    return ProductService(repository)


@pytest.fixture
def app(repository):
    return create_app(TestConfig, repository=repository)


@pytest.fixture
def client(app):
    return app.test_client()
