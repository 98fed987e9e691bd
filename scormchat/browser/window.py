"""
Browsing Context Model - scormchat

A `Window` is one browsing context: it links to its parent frame and to the
window that opened it, owns a document and a bag of page globals, dispatches
page-level events and presents blocking alerts.
"""

from typing import Dict, Any, List, Optional, Callable

from .dom import Document
from ..errors import CrossOriginError
from ..utils.logging import get_logger

logger = get_logger('browser.window')

EventListener = Callable[[Dict[str, Any]], Any]


class Navigator:
    """Connectivity flag exposed to page scripts"""

    def __init__(self, on_line: bool = True):
        self.on_line = on_line


class Window:
    """Browsing context with parent/opener links

    A top-level window is its own parent, matching the browser's
    ``window.parent === window`` behavior for the top frame.
    """

    def __init__(
        self,
        name: str = "window",
        parent: Optional["Window"] = None,
        opener: Optional["Window"] = None,
        document: Optional[Document] = None,
        on_line: bool = True,
        alert_handler: Optional[Callable[[str], None]] = None,
    ):
        self.name = name
        self.parent = parent if parent is not None else self
        self.opener = opener
        self.document = document or Document()
        self.navigator = Navigator(on_line=on_line)
        self.globals: Dict[str, Any] = {}
        self.chat_widget: Optional[Any] = None
        self.alerts: List[str] = []
        self._alert_handler = alert_handler
        self._listeners: Dict[str, List[EventListener]] = {}

    def alert(self, message: str) -> None:
        """Present a blocking modal message"""
        self.alerts.append(message)
        if self._alert_handler:
            self._alert_handler(message)

    def add_event_listener(self, event_type: str, listener: EventListener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, event_type: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event_type: str, detail: Optional[Dict[str, Any]] = None) -> int:
        """Call every listener for the event; returns how many ran

        A listener that raises is logged and does not stop the others.
        """
        event = {"type": event_type, "detail": detail or {}}
        delivered = 0
        for listener in list(self._listeners.get(event_type, [])):
            try:
                listener(event)
                delivered += 1
            except Exception as e:
                logger.error(f"Listener for '{event_type}' failed: {e}")
        return delivered

    def __repr__(self) -> str:
        return f"Window(name={self.name!r})"


class CrossOriginWindow(Window):
    """A context from another origin: reading its properties raises

    Only the link attributes and the identity checks used while walking a
    frame hierarchy are restricted; the object can still be navigated to.
    """

    _RESTRICTED = frozenset({"API_1484_11", "globals", "document", "chat_widget"})

    def __init__(self, name: str = "cross-origin", parent: Optional[Window] = None,
                 opener: Optional[Window] = None, restrict_links: bool = False):
        super().__init__(name=name, parent=parent, opener=opener)
        self._restrict_links = restrict_links

    def __getattribute__(self, item: str) -> Any:
        if item in CrossOriginWindow._RESTRICTED:
            raise CrossOriginError(f"Blocked a frame from accessing '{item}' on a cross-origin window")
        if item in ("parent", "opener") and object.__getattribute__(self, "_restrict_links"):
            raise CrossOriginError(f"Blocked a frame from accessing '{item}' on a cross-origin window")
        return object.__getattribute__(self, item)
