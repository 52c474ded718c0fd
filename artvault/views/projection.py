"""Derives all UI-observable state from the catalog, cart and filter criteria."""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from artvault.data.catalog import CatalogStore
from artvault.data.product_schema import Product
from artvault.utils.cart import CartStore
from artvault.utils.filtering import FilterCriteria, project
from artvault.utils.formatters import format_price

ADD_LABEL = "Add to Cart"
ADDED_LABEL = "Added to Cart"
EMPTY_CART_MESSAGE = "Your cart is empty."

# Every element that displays the cart count
BADGE_IDS = ("cartCount", "cartCountFloat")


class AddButtonView(BaseModel):
    """State shared by every add-to-cart button for one product."""
    product_id: int
    label: str
    disabled: bool
    style: str


class ProductCardView(BaseModel):
    """Grid card for a visible product."""
    id: int
    title: str
    category: str
    image: str
    price: int
    price_display: str
    old_price_display: Optional[str] = None
    add_button: AddButtonView


class ProductDetailView(BaseModel):
    """Content of the product detail dialog."""
    id: int
    title: str
    image: str
    price_display: str
    old_price_display: Optional[str] = None
    description: str
    add_button: AddButtonView


class CartRowView(BaseModel):
    """One row of the cart panel."""
    index: int
    product_id: int
    title: str
    image: str
    quantity: int
    unit_price: int
    line_total: int
    unit_price_display: str
    line_total_display: str


class CartPanelView(BaseModel):
    """Content of the cart dialog."""
    rows: List[CartRowView] = Field(default_factory=list)
    is_empty: bool
    empty_message: str = EMPTY_CART_MESSAGE
    total: int
    total_display: str


class StorefrontView(BaseModel):
    """Complete derived state for one render pass."""
    products: List[ProductCardView] = Field(default_factory=list)
    cart: CartPanelView
    item_count: int
    badges: Dict[str, int]
    criteria: FilterCriteria


def button_state(product_id: int, cart: CartStore) -> AddButtonView:
    """Add-button state, determined only by cart membership."""
    added = cart.contains(product_id)
    return AddButtonView(
        product_id=product_id,
        label=ADDED_LABEL if added else ADD_LABEL,
        disabled=added,
        style="btn-success" if added else "btn-outline-secondary"
    )


def product_card(product: Product, cart: CartStore) -> ProductCardView:
    return ProductCardView(
        id=product.id,
        title=product.title,
        category=product.category,
        image=product.image,
        price=product.price,
        price_display=format_price(product.price),
        old_price_display=format_price(product.old_price) if product.old_price else None,
        add_button=button_state(product.id, cart)
    )


def product_detail(product: Product, cart: CartStore) -> ProductDetailView:
    """Detail dialog content; its add button mirrors the grid card's."""
    return ProductDetailView(
        id=product.id,
        title=product.title,
        image=product.image,
        price_display=format_price(product.price),
        old_price_display=format_price(product.old_price) if product.old_price else None,
        description=f"Category: {product.category} — ID: {product.id}",
        add_button=button_state(product.id, cart)
    )


def cart_panel(catalog: CatalogStore, cart: CartStore) -> CartPanelView:
    """
    Build the cart panel rows and total.

    Rows keep their cart index so line controls address the current
    sequence. Entries whose product no longer resolves are skipped.
    """
    rows = []
    for idx, entry in enumerate(cart.entries):
        product = catalog.get(entry.product_id)
        if product is None:
            continue
        line_total = product.price * entry.quantity
        rows.append(CartRowView(
            index=idx,
            product_id=product.id,
            title=product.title,
            image=product.image,
            quantity=entry.quantity,
            unit_price=product.price,
            line_total=line_total,
            unit_price_display=f"{format_price(product.price)} each",
            line_total_display=format_price(line_total)
        ))

    total = sum(row.line_total for row in rows)
    return CartPanelView(
        rows=rows,
        is_empty=cart.item_count == 0,
        total=total,
        total_display=format_price(total)
    )


def project_view(catalog: CatalogStore, cart: CartStore, criteria: FilterCriteria) -> StorefrontView:
    """
    Recompute the full storefront view.

    Args:
        catalog: Session catalog
        cart: Session cart
        criteria: Last filter criteria

    Returns:
        View model for the product grid, cart panel and count badges
    """
    count = cart.item_count
    return StorefrontView(
        products=[product_card(p, cart) for p in project(catalog, criteria)],
        cart=cart_panel(catalog, cart),
        item_count=count,
        badges={badge_id: count for badge_id in BADGE_IDS},
        criteria=criteria
    )
