"""View projection layer."""
from .projection import (
    AddButtonView,
    CartPanelView,
    CartRowView,
    ProductCardView,
    ProductDetailView,
    StorefrontView,
    button_state,
    product_detail,
    project_view
)

__all__ = [
    "AddButtonView",
    "CartPanelView",
    "CartRowView",
    "ProductCardView",
    "ProductDetailView",
    "StorefrontView",
    "button_state",
    "product_detail",
    "project_view"
]
