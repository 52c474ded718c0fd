"""Filter, search and sort pipeline over the catalog."""
from typing import Iterable, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator
from artvault.data.product_schema import Product

SortMode = Literal["default", "priceAsc", "priceDesc"]

# Values emitted by the sort selector control
SORT_ALIASES = {
    "default": "default",
    "priceAsc": "priceAsc",
    "priceDesc": "priceDesc",
    "low": "priceAsc",
    "high": "priceDesc",
}


class FilterCriteria(BaseModel):
    """Current filter control values."""
    category: str = Field("all", description="Category to keep, or 'all'")
    sort_mode: SortMode = Field("default", description="Ordering of the result")
    search_text: str = Field("", description="Case-insensitive title/category substring")

    @field_validator('category')
    @classmethod
    def normalize_category(cls, v):
        v = (v or "").strip()
        return v or "all"

    @field_validator('search_text')
    @classmethod
    def normalize_search(cls, v):
        return (v or "").strip().lower()

    @field_validator('sort_mode', mode='before')
    @classmethod
    def normalize_sort(cls, v):
        return SORT_ALIASES.get(str(v or "default"), "default")

    class Config:
        frozen = True


def criteria_from_controls(
    category: Optional[str] = None,
    sort: Optional[str] = None,
    search: Optional[str] = None
) -> FilterCriteria:
    """
    Build criteria from raw control values.

    Missing controls fall back to 'all', 'default' and an empty search.
    """
    return FilterCriteria(
        category=category or "all",
        sort_mode=sort or "default",
        search_text=search or ""
    )


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """Check a single product against category and search text."""
    if criteria.category != "all" and product.category != criteria.category:
        return False
    query = criteria.search_text
    if query and query not in product.title.lower() and query not in product.category.lower():
        return False
    return True


def project(catalog: Iterable[Product], criteria: FilterCriteria) -> List[Product]:
    """
    Project the catalog into the displayed subset.

    Args:
        catalog: Products in catalog order
        criteria: Filter and sort criteria

    Returns:
        Matching products; price sorts are stable in both directions
    """
    result = [p for p in catalog if matches(p, criteria)]

    if criteria.sort_mode == "priceAsc":
        result.sort(key=lambda p: p.price)
    elif criteria.sort_mode == "priceDesc":
        result.sort(key=lambda p: p.price, reverse=True)

    return result
