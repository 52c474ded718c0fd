"""Catalog data and schemas."""
from .product_schema import Product, CartEntry
from .catalog import CatalogStore, load_catalog

__all__ = [
    "Product",
    "CartEntry",
    "CatalogStore",
    "load_catalog"
]
