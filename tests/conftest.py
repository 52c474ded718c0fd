"""Shared pytest fixtures for storefront tests."""

import pytest

from artvault.app import ShopApplication
from artvault.data.catalog import CatalogStore, load_catalog
from artvault.data.product_schema import Product
from artvault.presentation import RecordingPresenter
from artvault.utils.cart import CartStore


@pytest.fixture
def catalog():
    """The bundled six-item catalog."""
    return load_catalog()


@pytest.fixture
def two_item_catalog():
    """Minimal catalog with two prints."""
    return CatalogStore([
        Product(id=1, title="Swing Lady", category="historical", price=1200),
        Product(id=2, title="Red Flowers", category="digital", price=1000),
    ])


@pytest.fixture
def cart(catalog):
    return CartStore(catalog)


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def shop(catalog, presenter):
    """A page session wired to a recording presenter."""
    app = ShopApplication(catalog=catalog, presenter=presenter, delay=0.01)
    yield app
    app.close()
