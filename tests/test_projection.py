"""Tests for the view projection layer."""

from artvault.utils.filtering import FilterCriteria, criteria_from_controls
from artvault.utils.formatters import format_price
from artvault.views.projection import (
    ADD_LABEL,
    ADDED_LABEL,
    EMPTY_CART_MESSAGE,
    button_state,
    product_detail,
    project_view,
)


class TestButtonState:
    """Tests for add-button state."""

    def test_default_state(self, cart):
        state = button_state(1, cart)

        assert state.label == ADD_LABEL
        assert state.disabled is False
        assert state.style == "btn-outline-secondary"

    def test_added_state(self, cart):
        cart.add(1)
        state = button_state(1, cart)

        assert state.label == ADDED_LABEL
        assert state.disabled is True
        assert state.style == "btn-success"

    def test_grid_and_detail_buttons_agree(self, catalog, cart):
        """Card and detail dialog render the same button state for a product."""
        cart.add(4)
        view = project_view(catalog, cart, FilterCriteria())
        card = next(c for c in view.products if c.id == 4)
        detail = product_detail(catalog.get(4), cart)

        assert card.add_button == detail.add_button
        assert detail.add_button.disabled is True


class TestProjectView:
    """Tests for project_view."""

    def test_empty_cart_placeholder(self, catalog, cart):
        view = project_view(catalog, cart, FilterCriteria())

        assert view.cart.is_empty is True
        assert view.cart.rows == []
        assert view.cart.empty_message == EMPTY_CART_MESSAGE
        assert view.cart.total_display == "$0"

    def test_rows_totals_and_badges(self, catalog, cart):
        cart.add(1)
        cart.add(1)
        cart.add(2)

        view = project_view(catalog, cart, FilterCriteria())

        assert [(r.index, r.product_id, r.quantity, r.line_total) for r in view.cart.rows] == [
            (0, 1, 2, 2400),
            (1, 2, 1, 1000),
        ]
        assert view.cart.total == 3400
        assert view.cart.total_display == "$3,400"
        assert view.cart.rows[0].unit_price_display == "$1,200 each"
        assert view.item_count == 2
        assert set(view.badges.values()) == {2}

    def test_visible_products_follow_criteria(self, catalog, cart):
        view = project_view(catalog, cart, criteria_from_controls(category="anime", sort="low"))

        assert [c.id for c in view.products] == [5, 4]
        assert view.products[0].old_price_display == "$1,600"
        assert view.products[1].old_price_display is None

    def test_dangling_entry_skipped(self, catalog, cart, two_item_catalog):
        cart.add(1)
        cart.add(5)
        view = project_view(two_item_catalog, cart, FilterCriteria())

        assert [r.product_id for r in view.cart.rows] == [1]


def test_format_price():
    assert format_price(480) == "$480"
    assert format_price(1200) == "$1,200"
