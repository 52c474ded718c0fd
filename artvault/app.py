"""Application root: owns the catalog, the session cart and the widgets."""
from typing import Optional
from artvault.config import settings
from artvault.contact import CallPicker, ContactForm, Newsletter
from artvault.data.catalog import CatalogStore, load_catalog
from artvault.dispatcher import InteractionDispatcher, Renderer
from artvault.presentation import Presenter, RecordingPresenter
from artvault.utils.cart import CartStore
from artvault.utils.log import log


class ShopApplication:
    """
    One storefront page session.

    Everything is held in memory and discarded with the instance.
    """

    def __init__(
        self,
        catalog: Optional[CatalogStore] = None,
        presenter: Optional[Presenter] = None,
        renderer: Optional[Renderer] = None,
        delay: Optional[float] = None
    ):
        """
        Initialize the session.

        Args:
            catalog: Catalog to serve (defaults to the configured manifest)
            presenter: UI collaborator (defaults to a recording presenter)
            renderer: Optional callback receiving every recomputed view
            delay: Simulated acknowledgment delay (defaults to settings)
        """
        self.catalog = catalog if catalog is not None else load_catalog()
        self.presenter = presenter if presenter is not None else RecordingPresenter()
        self.cart = CartStore(self.catalog)
        self.dispatcher = InteractionDispatcher(
            self.catalog,
            self.cart,
            presenter=self.presenter,
            renderer=renderer,
            checkout_delay=delay
        )
        self.call_picker = CallPicker(settings.shop_phone_number, presenter=self.presenter)
        self.contact_form = ContactForm(presenter=self.presenter, delay=delay)
        self.newsletter = Newsletter(presenter=self.presenter)
        log("SHOP", f"Storefront initialized with {len(self.catalog)} products")

    def close(self):
        """Dispose of pending acknowledgments and detach listeners."""
        self.dispatcher.dispose()
        self.contact_form.delivery.cancel()
        self.newsletter.timer.cancel()
