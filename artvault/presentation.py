"""Presentation collaborator: dialogs, toasts, alerts and navigation."""
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

DIALOGS = "dialogs"
TOASTS = "toasts"
ANIMATIONS = "animations"
NAVIGATION = "navigation"
ALERTS = "alerts"

ALL_CAPABILITIES = frozenset({DIALOGS, TOASTS, ANIMATIONS, NAVIGATION, ALERTS})


class Presenter:
    """
    Capability interface for the optional UI collaborator.

    The core asks `supports()` before calling a method; implementations
    may still raise, and callers contain those failures locally.
    """

    capabilities: FrozenSet[str] = frozenset()

    def supports(self, capability: str) -> bool:
        return capability in self.capabilities

    def show(self, dialog_id: str, payload: Optional[Dict[str, Any]] = None):
        raise NotImplementedError

    def hide(self, dialog_id: str):
        raise NotImplementedError

    def show_toast(self, element_id: str):
        raise NotImplementedError

    def pulse(self, element_id: str):
        raise NotImplementedError

    def alert(self, message: str):
        raise NotImplementedError

    def notify(self, element_id: str, message: str, level: str = "info"):
        raise NotImplementedError

    def navigate(self, url: str, new_window: bool = False):
        raise NotImplementedError


class NullPresenter(Presenter):
    """Stand-in used when no presentation layer is available."""

    capabilities = frozenset()


class RecordingPresenter(Presenter):
    """
    Records UI effects as events.

    The HTTP layer drains these events into each response so the browser
    can replay them; tests inspect them directly.
    """

    def __init__(self, capabilities: Optional[Iterable[str]] = None):
        self.capabilities = frozenset(ALL_CAPABILITIES if capabilities is None else capabilities)
        self.events: List[Dict[str, Any]] = []
        self.open_dialogs: List[str] = []

    def _record(self, kind: str, **data):
        self.events.append({"type": kind, **data})

    def show(self, dialog_id: str, payload: Optional[Dict[str, Any]] = None):
        if dialog_id not in self.open_dialogs:
            self.open_dialogs.append(dialog_id)
        self._record("show", target=dialog_id, payload=payload or {})

    def hide(self, dialog_id: str):
        if dialog_id in self.open_dialogs:
            self.open_dialogs.remove(dialog_id)
        self._record("hide", target=dialog_id)

    def show_toast(self, element_id: str):
        self._record("toast", target=element_id)

    def pulse(self, element_id: str):
        self._record("pulse", target=element_id)

    def alert(self, message: str):
        self._record("alert", message=message)

    def notify(self, element_id: str, message: str, level: str = "info"):
        self._record("notify", target=element_id, message=message, level=level)

    def navigate(self, url: str, new_window: bool = False):
        self._record("navigate", url=url, new_window=new_window)

    def drain(self) -> List[Dict[str, Any]]:
        """Return and forget the recorded events."""
        events, self.events = self.events, []
        return events
