"""Read-only catalog store loaded from a static manifest."""
import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from pydantic import TypeAdapter
from artvault.config import settings
from artvault.data.product_schema import Product
from artvault.utils.log import log

DEFAULT_MANIFEST_PATH = Path(__file__).parent / "catalog.json"

_manifest_adapter = TypeAdapter(List[Product])


class CatalogStore:
    """Ordered, immutable collection of products for one session."""

    def __init__(self, products: Iterable[Product]):
        """
        Build the catalog.

        Args:
            products: Products in display order

        Raises:
            ValueError: If two products share an ID
        """
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product ID in catalog: {product.id}")
            self._by_id[product.id] = product

    @property
    def products(self) -> Tuple[Product, ...]:
        """All products in catalog order."""
        return self._products

    def get(self, product_id: int) -> Optional[Product]:
        """Look up a product by ID, or None if it does not exist."""
        return self._by_id.get(product_id)

    def contains(self, product_id: int) -> bool:
        return product_id in self._by_id

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        seen = []
        for product in self._products:
            if product.category not in seen:
                seen.append(product.category)
        return seen

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)


def load_catalog(path: Optional[str] = None) -> CatalogStore:
    """
    Load the catalog manifest from a JSON file.

    Args:
        path: Manifest path (defaults to settings.catalog_path, then the bundled manifest)

    Returns:
        Catalog store holding the validated products

    Raises:
        pydantic.ValidationError: If a record does not match the product schema
    """
    manifest_path = Path(path or settings.catalog_path or DEFAULT_MANIFEST_PATH)
    with open(manifest_path, "r", encoding="utf-8") as f:
        records = json.load(f)

    products = _manifest_adapter.validate_python(records)
    log("SHOP", f"Loaded {len(products)} products from {manifest_path.name}")
    return CatalogStore(products)
