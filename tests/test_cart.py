"""Tests for the session cart store."""

from artvault.utils.cart import CartStore


def quantities(cart):
    return [(e.product_id, e.quantity) for e in cart.entries]


class TestAdd:
    """Tests for CartStore.add."""

    def test_repeated_add_increments_single_entry(self, cart):
        """Adding the same product twice yields one entry with quantity 2."""
        cart.add(1)
        cart.add(1)

        assert quantities(cart) == [(1, 2)]

    def test_scenario_total(self, two_item_catalog):
        """add(1), add(1), add(2) -> [(1, 2), (2, 1)] totalling 3400."""
        cart = CartStore(two_item_catalog)
        cart.add(1)
        cart.add(1)
        result = cart.add(2)

        assert quantities(cart) == [(1, 2), (2, 1)]
        assert cart.total() == 3400
        assert result["cart_total"] == 3400
        assert result["item_count"] == 2

    def test_unknown_product_is_noop(self, cart):
        result = cart.add(42)

        assert result["success"] is False
        assert cart.entries == ()

    def test_insertion_order_is_first_add_order(self, cart):
        cart.add(3)
        cart.add(1)
        cart.add(3)

        assert [e.product_id for e in cart.entries] == [3, 1]

    def test_item_count_counts_entries_not_units(self, cart):
        cart.add(1)
        cart.add(1)
        cart.add(2)

        assert cart.item_count == 2


class TestLineOperations:
    """Tests for index-based mutators."""

    def test_increment_at(self, cart):
        cart.add(1)
        cart.increment_at(0)

        assert cart.quantity_of(1) == 2

    def test_decrement_to_zero_removes_entry(self, cart):
        """Decrementing a quantity-1 entry removes it; no zero entry remains."""
        cart.add(1)
        cart.add(2)

        cart.decrement_at(0)

        assert quantities(cart) == [(2, 1)]
        assert all(e.quantity >= 1 for e in cart.entries)

    def test_decrement_keeps_entry_above_one(self, cart):
        cart.add(1)
        cart.add(1)
        cart.decrement_at(0)

        assert quantities(cart) == [(1, 1)]

    def test_remove_shifts_later_entries(self, cart):
        """After removeAt(i), later indices address the shifted sequence."""
        cart.add(1)
        cart.add(2)
        cart.add(3)

        cart.remove_at(0)
        cart.increment_at(0)
        cart.remove_at(1)

        assert quantities(cart) == [(2, 2)]

    def test_out_of_range_index_is_noop(self, cart):
        cart.add(1)
        before = cart.entries

        for index in (1, 5, -1):
            assert cart.remove_at(index)["success"] is False
            assert cart.increment_at(index)["success"] is False
            assert cart.decrement_at(index)["success"] is False

        assert cart.entries == before

    def test_non_integer_index_is_noop(self, cart):
        cart.add(1)

        assert cart.remove_at(None)["success"] is False
        assert cart.remove_at(True)["success"] is False
        assert cart.item_count == 1

    def test_clear_empties_cart(self, cart):
        cart.add(1)
        cart.add(2)

        cart.clear()
        cart.clear()

        assert cart.entries == ()
        assert cart.total() == 0


class TestTotalsAndSignals:
    """Tests for totals and the cart-changed signal."""

    def test_dangling_entry_skipped_in_total(self, cart, two_item_catalog):
        cart.add(1)
        cart.add(6)
        # swap in a catalog that no longer has product 6
        cart.catalog = two_item_catalog

        assert cart.total() == 1200

    def test_listeners_notified_on_change(self, cart):
        calls = []
        cart.subscribe(lambda c: calls.append(c.item_count))

        cart.add(1)
        cart.add(99)
        cart.increment_at(0)
        cart.remove_at(0)

        assert calls == [1, 1, 0]

    def test_failing_listener_does_not_break_mutation(self, cart):
        def broken(_):
            raise RuntimeError("boom")

        seen = []
        cart.subscribe(broken)
        cart.subscribe(lambda c: seen.append(c.item_count))

        cart.add(1)

        assert cart.item_count == 1
        assert seen == [1]

    def test_unsubscribe(self, cart):
        calls = []
        listener = lambda c: calls.append(1)
        cart.subscribe(listener)
        cart.unsubscribe(listener)

        cart.add(1)

        assert calls == []
