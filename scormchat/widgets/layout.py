"""Shift the page content aside while the chat panel is open"""

from typing import Any, Dict

from .remote import CHAT_OPENED_EVENT, CHAT_CLOSED_EVENT
from ..browser.window import Window
from ..utils.logging import get_logger

MAIN_CONTENT_ID = "mainContent"
OPEN_MARGIN = "400px"
CLOSED_MARGIN = "0px"

logger = get_logger('widgets.layout')


class ChatLayoutAdjuster:
    """Toggles the right margin of the main content on chat open/close"""

    def __init__(self, window: Window, element_id: str = MAIN_CONTENT_ID,
                 open_margin: str = OPEN_MARGIN, closed_margin: str = CLOSED_MARGIN):
        self.window = window
        self.element_id = element_id
        self.open_margin = open_margin
        self.closed_margin = closed_margin
        self._attached = False

    def attach(self) -> None:
        if self._attached:
            return
        self.window.add_event_listener(CHAT_OPENED_EVENT, self._on_opened)
        self.window.add_event_listener(CHAT_CLOSED_EVENT, self._on_closed)
        self._attached = True

    def detach(self) -> None:
        self.window.remove_event_listener(CHAT_OPENED_EVENT, self._on_opened)
        self.window.remove_event_listener(CHAT_CLOSED_EVENT, self._on_closed)
        self._attached = False

    def _set_margin(self, margin: str) -> None:
        element = self.window.document.get_element_by_id(self.element_id)
        if element is not None:
            element.style["marginRight"] = margin

    def _on_opened(self, event: Dict[str, Any]) -> None:
        logger.debug("Chat opened by backend widget")
        self._set_margin(self.open_margin)

    def _on_closed(self, event: Dict[str, Any]) -> None:
        logger.debug("Chat closed by backend widget")
        self._set_margin(self.closed_margin)
