"""Cart state management for the page session."""
from typing import Any, Callable, Dict, List, Optional, Tuple
from artvault.data.catalog import CatalogStore
from artvault.data.product_schema import CartEntry
from artvault.utils.log import log, warn

CartListener = Callable[["CartStore"], None]


class CartStore:
    """
    Owns the session cart and all of its invariants.

    Entries keep first-add order, there is at most one entry per product,
    and no entry is ever kept at quantity 0.
    """

    def __init__(self, catalog: CatalogStore):
        """
        Initialize an empty cart.

        Args:
            catalog: Catalog used to resolve product IDs
        """
        self.catalog = catalog
        self._entries: List[CartEntry] = []
        self._listeners: List[CartListener] = []

    # ---------- queries ----------

    @property
    def entries(self) -> Tuple[CartEntry, ...]:
        """Snapshot of the cart entries in insertion order."""
        return tuple(self._entries)

    @property
    def item_count(self) -> int:
        """Number of distinct entries (not the sum of quantities)."""
        return len(self._entries)

    def index_of(self, product_id: int) -> int:
        """Position of the product's entry, or -1."""
        for i, entry in enumerate(self._entries):
            if entry.product_id == product_id:
                return i
        return -1

    def contains(self, product_id: int) -> bool:
        return self.index_of(product_id) != -1

    def quantity_of(self, product_id: int) -> int:
        idx = self.index_of(product_id)
        return self._entries[idx].quantity if idx >= 0 else 0

    def total(self) -> int:
        """
        Calculate the cart total in minor units.

        Entries whose product no longer resolves in the catalog are skipped.
        """
        total = 0
        for entry in self._entries:
            product = self.catalog.get(entry.product_id)
            if product is None:
                continue
            total += product.price * entry.quantity
        return total

    # ---------- change notification ----------

    def subscribe(self, listener: CartListener):
        """Register a callback run after every cart change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: CartListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                warn("CART", f"cart listener failed: {e}")

    # ---------- mutators ----------

    def add(self, product_id: int) -> Dict[str, Any]:
        """
        Add one unit of a product.

        Repeated adds increment the existing entry instead of appending.

        Args:
            product_id: Catalog product ID

        Returns:
            Dictionary with cart status and message
        """
        product = self.catalog.get(product_id)
        if product is None:
            return self._result(False, f"Product with ID {product_id} not found.")

        idx = self.index_of(product_id)
        if idx >= 0:
            entry = self._entries[idx]
            self._entries[idx] = entry.model_copy(update={"quantity": entry.quantity + 1})
            message = f"Updated {product.title} quantity to {entry.quantity + 1}"
        else:
            self._entries.append(CartEntry(product_id=product_id, quantity=1))
            message = f"Added {product.title} to cart"

        log("CART", message)
        self._notify()
        return self._result(True, message)

    def increment_at(self, index: int) -> Dict[str, Any]:
        """
        Increase the quantity of the entry at a cart position.

        Args:
            index: Position in the current cart sequence

        Returns:
            Dictionary with cart status and message
        """
        if not self._valid_index(index):
            return self._result(False, f"No cart entry at position {index}.")

        entry = self._entries[index]
        self._entries[index] = entry.model_copy(update={"quantity": entry.quantity + 1})
        self._notify()
        return self._result(True, f"Increased quantity of product {entry.product_id} to {entry.quantity + 1}")

    def decrement_at(self, index: int) -> Dict[str, Any]:
        """
        Decrease the quantity of the entry at a cart position.

        An entry dropping to zero is removed, shifting later entries down.

        Args:
            index: Position in the current cart sequence

        Returns:
            Dictionary with cart status and message
        """
        if not self._valid_index(index):
            return self._result(False, f"No cart entry at position {index}.")

        entry = self._entries[index]
        if entry.quantity <= 1:
            return self.remove_at(index)

        self._entries[index] = entry.model_copy(update={"quantity": entry.quantity - 1})
        self._notify()
        return self._result(True, f"Decreased quantity of product {entry.product_id} to {entry.quantity - 1}")

    def remove_at(self, index: int) -> Dict[str, Any]:
        """
        Remove the entry at a cart position.

        Args:
            index: Position in the current cart sequence

        Returns:
            Dictionary with cart status and message
        """
        if not self._valid_index(index):
            return self._result(False, f"No cart entry at position {index}.")

        removed = self._entries.pop(index)
        self._notify()
        return self._result(True, f"Removed product {removed.product_id} from cart")

    def clear(self) -> Dict[str, Any]:
        """Empty the cart."""
        had_entries = bool(self._entries)
        self._entries = []
        if had_entries:
            self._notify()
        return self._result(True, "Cart cleared")

    # ---------- helpers ----------

    def _valid_index(self, index: Optional[int]) -> bool:
        # bool is an int subclass; True must not address position 1
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < len(self._entries)

    def _result(self, success: bool, message: str) -> Dict[str, Any]:
        return {
            "success": success,
            "message": message,
            "cart_total": self.total(),
            "item_count": self.item_count
        }
