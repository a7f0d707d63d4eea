"""Shared fixtures: an in-process mock items service and clients bound to it."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import ItemStore, get_store
from services.items_api import ItemsAPI
from services.list_synchronizer import ListSynchronizer
from tests.helpers import make_api


@pytest.fixture
def store():
    """Fresh seeded store per test: Yogurt, Pomegranate, Lettuce."""
    fresh = ItemStore()
    app.dependency_overrides[get_store] = lambda: fresh
    yield fresh
    app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api(client):
    return ItemsAPI(client=client)


@pytest.fixture
def synchronizer(api):
    sync = ListSynchronizer(api=api)
    assert sync.load().success
    return sync


@pytest.fixture
def offline_api():
    """ItemsAPI that cannot reach its server."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    return make_api(handler)
