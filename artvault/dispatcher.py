"""Routes user actions to the cart store and filter criteria."""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional
from artvault.data.catalog import CatalogStore
from artvault.presentation import ALERTS, ANIMATIONS, DIALOGS, TOASTS, NullPresenter, Presenter
from artvault.utils.cart import CartStore
from artvault.utils.filtering import FilterCriteria, criteria_from_controls
from artvault.utils.latency import SimulatedAcknowledgment
from artvault.utils.log import log, warn
from artvault.views.projection import StorefrontView, cart_panel, product_detail, project_view

PRODUCT_DIALOG = "productDetailModal"
CART_DIALOG = "cartModal"
CART_TOAST = "cartToast"
# only the header badge animates; the floating badge just updates its number
PULSE_BADGE = "cartCount"
CHECKOUT_MESSAGE = "Checkout simulated — thank you!"

ACTIONS = (
    "view-detail",
    "add-to-cart",
    "increase-qty",
    "decrease-qty",
    "remove-entry",
    "filter-changed",
    "checkout",
)

# data-action values used by the rendered buttons
ACTION_ALIASES = {
    "view": "view-detail",
    "add": "add-to-cart",
    "increase": "increase-qty",
    "decrease": "decrease-qty",
    "remove": "remove-entry",
}

Renderer = Callable[[StorefrontView], None]


@dataclass
class DispatchResult:
    """Outcome of one dispatched action."""
    action: str
    success: bool
    message: str
    view: StorefrontView
    details: Dict[str, Any] = field(default_factory=dict)


def parse_int(value: Any) -> Optional[int]:
    """Parse a numeric identifier from a control attribute; None if malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return None
    return None


def normalize_action(tag: Any) -> Optional[str]:
    if not isinstance(tag, str):
        return None
    tag = ACTION_ALIASES.get(tag, tag)
    return tag if tag in ACTIONS else None


class InteractionDispatcher:
    """
    Single entry point for storefront actions.

    Each action mutates the cart or the filter criteria, then the view is
    recomputed in full. No exception escapes `dispatch`.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        cart: CartStore,
        presenter: Optional[Presenter] = None,
        renderer: Optional[Renderer] = None,
        criteria: Optional[FilterCriteria] = None,
        checkout_delay: Optional[float] = None
    ):
        """
        Initialize the dispatcher.

        Args:
            catalog: Session catalog
            cart: Session cart store
            presenter: Optional dialog/toast collaborator
            renderer: Optional callback receiving every recomputed view
            criteria: Initial filter criteria
            checkout_delay: Delay of the checkout acknowledgment (defaults to settings)
        """
        self.catalog = catalog
        self.cart = cart
        self.presenter = presenter or NullPresenter()
        self.renderer = renderer
        self.criteria = criteria or FilterCriteria()
        self.checkout_ack = SimulatedAcknowledgment(
            self._acknowledge_checkout,
            delay=checkout_delay,
            name="checkout"
        )
        self.last_view = project_view(self.catalog, self.cart, self.criteria)

        self._handlers: Dict[str, Callable[[Mapping[str, Any]], Optional[Dict[str, Any]]]] = {
            "view-detail": self._view_detail,
            "add-to-cart": self._add_to_cart,
            "increase-qty": self._increase_qty,
            "decrease-qty": self._decrease_qty,
            "remove-entry": self._remove_entry,
            "filter-changed": self._filter_changed,
            "checkout": self._checkout,
        }
        self.cart.subscribe(self._on_cart_changed)

    def dispatch(self, action: Mapping[str, Any]) -> Optional[DispatchResult]:
        """
        Classify and route one action.

        Args:
            action: Mapping with an 'action' tag and its 'id'/'idx'/filter fields

        Returns:
            Dispatch result, or None when the action was unknown or malformed
        """
        try:
            if not isinstance(action, Mapping):
                return None
            tag = normalize_action(action.get("action"))
            if tag is None:
                log("DISPATCH", f"Ignoring unknown action: {action.get('action')!r}")
                return None

            outcome = self._handlers[tag](action)
            if outcome is None:
                log("DISPATCH", f"Ignoring malformed {tag} action")
                return None

            return DispatchResult(
                action=tag,
                success=outcome.pop("success"),
                message=outcome.pop("message"),
                view=self.last_view,
                details=outcome
            )
        except Exception as e:
            warn("DISPATCH", f"Action failed: {e}")
            return None

    def view(self) -> StorefrontView:
        """Recompute the view from the current state."""
        return self.refresh()

    def refresh(self) -> StorefrontView:
        self.last_view = project_view(self.catalog, self.cart, self.criteria)
        if self.renderer is not None:
            try:
                self.renderer(self.last_view)
            except Exception as e:
                warn("DISPATCH", f"Renderer failed: {e}")
        return self.last_view

    def open_cart(self) -> bool:
        """Show the cart dialog; False when no dialog system is available."""
        panel = cart_panel(self.catalog, self.cart)
        return self._present(DIALOGS, "show", CART_DIALOG, panel.model_dump())

    def dispose(self):
        """Detach from the cart and drop any pending acknowledgment."""
        self.cart.unsubscribe(self._on_cart_changed)
        self.checkout_ack.cancel()

    # ---------- handlers ----------

    def _view_detail(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        product_id = parse_int(action.get("id"))
        if product_id is None:
            return None
        product = self.catalog.get(product_id)
        if product is None:
            return {"success": False, "message": f"Product with ID {product_id} not found."}

        detail = product_detail(product, self.cart)
        shown = self._present(DIALOGS, "show", PRODUCT_DIALOG, detail.model_dump())
        return {"success": True, "message": f"Viewing {product.title}", "detail": detail, "dialog_shown": shown}

    def _add_to_cart(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        product_id = parse_int(action.get("id"))
        if product_id is None:
            return None
        result = self.cart.add(product_id)
        if result["success"]:
            self._pulse_badges()
            self._present(TOASTS, "show_toast", CART_TOAST)
        return result

    def _increase_qty(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return self._line_action(action, self.cart.increment_at)

    def _decrease_qty(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return self._line_action(action, self.cart.decrement_at)

    def _remove_entry(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return self._line_action(action, self.cart.remove_at)

    def _line_action(self, action, operation) -> Optional[Dict[str, Any]]:
        index = parse_int(action.get("idx"))
        if index is None:
            return None
        result = operation(index)
        if result["success"]:
            self._pulse_badges()
        return result

    def _filter_changed(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        self.criteria = criteria_from_controls(
            category=action.get("category"),
            sort=action.get("sort"),
            search=action.get("search")
        )
        view = self.refresh()
        return {"success": True, "message": f"Showing {len(view.products)} products"}

    def _checkout(self, action: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        reset_ids = [entry.product_id for entry in self.cart.entries]
        self.cart.clear()
        self._present(DIALOGS, "hide", CART_DIALOG)
        acknowledged = self.checkout_ack.start()
        return {
            "success": True,
            "message": "Checkout submitted",
            "reset_buttons": reset_ids,
            "acknowledgment_pending": self.checkout_ack.pending,
            "acknowledgment_started": acknowledged
        }

    # ---------- collaborators ----------

    def _on_cart_changed(self, cart: CartStore):
        self.refresh()

    def _acknowledge_checkout(self):
        self._present(ALERTS, "alert", CHECKOUT_MESSAGE)

    def _pulse_badges(self):
        self._present(ANIMATIONS, "pulse", PULSE_BADGE)

    def _present(self, capability: str, method: str, *args) -> bool:
        """Invoke a presenter method if the capability is available; never raises."""
        if not self.presenter.supports(capability):
            return False
        try:
            getattr(self.presenter, method)(*args)
            return True
        except Exception as e:
            warn("DISPATCH", f"Presenter {method} failed: {e}")
            return False
