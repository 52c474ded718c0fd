"""Call picker, contact form and newsletter widgets."""
import re
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from artvault.config import settings
from artvault.presentation import ALERTS, DIALOGS, NAVIGATION, NullPresenter, Presenter
from artvault.utils.latency import SimulatedAcknowledgment
from artvault.utils.log import log, warn

CALL_DIALOG = "callPicker"
NOTIFICATION_ID = "notification"
NEWSLETTER_MESSAGE_ID = "newsletterMsg"

INVALID_PHONE_MESSAGE = "Phone number not available or invalid."
INVALID_WHATSAPP_MESSAGE = "Phone number not available or not suitable for WhatsApp (needs country code)."
INVALID_FORM_MESSAGE = "Please fill in all required fields correctly."
DELIVERED_MESSAGE = "Your message has been delivered successfully!"

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def sanitize_tel(raw: Optional[str]) -> str:
    """Keep only digits and '+' for a tel: link."""
    return re.sub(r"[^0-9+]", "", str(raw or "").strip())


def sanitize_for_whatsapp(raw: Optional[str]) -> str:
    """Digits only, without leading zeros, as wa.me expects."""
    digits = re.sub(r"[^0-9]", "", str(raw or "").strip())
    return digits.lstrip("0")


class _Widget:
    """Shared presenter access for the widgets below."""

    def __init__(self, presenter: Optional[Presenter] = None):
        self.presenter = presenter or NullPresenter()

    def _present(self, capability: str, method: str, *args, **kwargs) -> bool:
        if not self.presenter.supports(capability):
            return False
        try:
            getattr(self.presenter, method)(*args, **kwargs)
            return True
        except Exception as e:
            warn("CONTACT", f"Presenter {method} failed: {e}")
            return False


class CallPicker(_Widget):
    """
    Phone button that offers a phone call or a WhatsApp chat.

    Without a dialog system, opening the picker navigates straight to the
    tel: link.
    """

    def __init__(self, number: Optional[str] = None, presenter: Optional[Presenter] = None):
        super().__init__(presenter)
        self.number = (settings.shop_phone_number if number is None else number).strip()

    @property
    def display_number(self) -> str:
        return self.number or "—"

    def open(self) -> Dict[str, Any]:
        """
        Open the picker dialog, falling back to direct navigation.

        Returns:
            Dictionary describing how the action was handled
        """
        if self._present(DIALOGS, "show", CALL_DIALOG, {"number": self.display_number}):
            return {"success": True, "mode": "dialog", "number": self.display_number}

        tel = sanitize_tel(self.number)
        if tel and self._present(NAVIGATION, "navigate", f"tel:{tel}"):
            return {"success": True, "mode": "navigate", "url": f"tel:{tel}"}

        log("CONTACT", "Call picker unavailable; action dropped")
        return {"success": False, "mode": "dropped"}

    def call_phone(self) -> Dict[str, Any]:
        """Start a phone call, or block with a message if the number is unusable."""
        tel = sanitize_tel(self.number)
        if not tel:
            self._present(ALERTS, "alert", INVALID_PHONE_MESSAGE)
            return {"success": False, "message": INVALID_PHONE_MESSAGE}

        self._present(DIALOGS, "hide", CALL_DIALOG)
        url = f"tel:{tel}"
        self._present(NAVIGATION, "navigate", url)
        return {"success": True, "url": url}

    def call_whatsapp(self) -> Dict[str, Any]:
        """Open a WhatsApp chat in a new window, or block with a message."""
        wa_number = sanitize_for_whatsapp(self.number)
        if not wa_number:
            self._present(ALERTS, "alert", INVALID_WHATSAPP_MESSAGE)
            return {"success": False, "message": INVALID_WHATSAPP_MESSAGE}

        self._present(DIALOGS, "hide", CALL_DIALOG)
        url = f"https://wa.me/{wa_number}"
        self._present(NAVIGATION, "navigate", url, new_window=True)
        return {"success": True, "url": url}


class ContactMessage(BaseModel):
    """Contact form fields; all required."""
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    message: str = Field(..., min_length=1)

    @field_validator('name', 'message')
    @classmethod
    def validate_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        v = v.strip()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class ContactForm(_Widget):
    """Contact form with a simulated delivery delay."""

    SUBMIT_LABEL = "Send Message"
    SENDING_LABEL = "Sending..."

    def __init__(self, presenter: Optional[Presenter] = None, delay: Optional[float] = None):
        super().__init__(presenter)
        self.delivery = SimulatedAcknowledgment(self._delivered, delay=delay, name="contact")
        self.last_message: Optional[ContactMessage] = None

    @property
    def submit_disabled(self) -> bool:
        return self.delivery.control_disabled

    @property
    def submit_label(self) -> str:
        return self.SENDING_LABEL if self.delivery.pending else self.SUBMIT_LABEL

    def submit(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate and send a contact message.

        Args:
            data: Raw form fields

        Returns:
            Dictionary with submission status and message
        """
        if self.delivery.pending:
            return {"success": False, "message": "A message is already being sent.", "pending": True}

        try:
            self.last_message = ContactMessage(**dict(data))
        except (ValidationError, TypeError):
            self._present(ALERTS, "notify", NOTIFICATION_ID, INVALID_FORM_MESSAGE, level="error")
            return {"success": False, "message": INVALID_FORM_MESSAGE, "pending": False}

        self.delivery.start()
        return {"success": True, "message": self.SENDING_LABEL, "pending": self.delivery.pending}

    def _delivered(self):
        self._present(ALERTS, "notify", NOTIFICATION_ID, DELIVERED_MESSAGE, level="success")
        self.last_message = None


class Newsletter(_Widget):
    """Newsletter sign-up; the thank-you message hides itself after a delay."""

    def __init__(self, presenter: Optional[Presenter] = None, delay: Optional[float] = None):
        super().__init__(presenter)
        self.message_visible = False
        self.timer = SimulatedAcknowledgment(
            self._hide_message,
            delay=settings.newsletter_message_seconds if delay is None else delay,
            name="newsletter"
        )

    def subscribe(self, email: str) -> Dict[str, Any]:
        email = (email or "").strip()
        if not EMAIL_PATTERN.match(email):
            return {"success": False, "message": INVALID_FORM_MESSAGE}

        self.message_visible = True
        self._present(ALERTS, "notify", NEWSLETTER_MESSAGE_ID, "Thanks for subscribing!", level="success")
        if self.timer.pending:
            self.timer.cancel()
        self.timer.start()
        return {"success": True, "message": "Subscribed"}

    def _hide_message(self):
        self.message_visible = False
        self._present(DIALOGS, "hide", NEWSLETTER_MESSAGE_ID)
