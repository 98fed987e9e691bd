"""
Chat Trigger Buttons - scormchat

The backend widget injects its own floating trigger button. Course pages
ship their own, so once the remote widget is in place the backend's buttons
are hidden and the template button is wired to the widget.
"""

import asyncio

from ..browser.window import Window
from ..utils.logging import get_logger

BACKEND_TRIGGER_CLASS = "chat-trigger"
TEMPLATE_TRIGGER_ID = "templateChatTrigger"
CHAT_BUTTON_LABEL = "💬"
WATCH_INTERVAL_SECONDS = 2.0

logger = get_logger('widgets.triggers')


class TriggerButtonManager:
    """Hides backend trigger buttons and binds the template's button"""

    def __init__(self, window: Window, interval: float = WATCH_INTERVAL_SECONDS):
        self.window = window
        self.interval = interval

    def hide_backend_triggers(self) -> int:
        """Hide backend triggers and stray chat buttons; returns how many were hidden"""
        document = self.window.document
        template_button = document.get_element_by_id(TEMPLATE_TRIGGER_ID)
        hidden = 0

        for trigger in document.query_selector_all(class_name=BACKEND_TRIGGER_CLASS):
            if not trigger.hidden:
                trigger.style["display"] = "none"
                hidden += 1

        for button in document.query_selector_all(tag="button"):
            if button is template_button or button.hidden:
                continue
            if button.inner_html == CHAT_BUTTON_LABEL:
                button.style["display"] = "none"
                hidden += 1

        if hidden:
            logger.debug(f"🔇 Hid {hidden} backend chat trigger button(s)")
        return hidden

    def bind_template_button(self) -> bool:
        button = self.window.document.get_element_by_id(TEMPLATE_TRIGGER_ID)
        widget = self.window.chat_widget
        if button is None or widget is None:
            return False

        button.onclick = widget.show_chat
        logger.info("✅ Template button connected to chat widget")
        return True

    async def watch(self) -> None:
        """Keep hiding backend triggers that appear later; runs until cancelled"""
        while True:
            self.hide_backend_triggers()
            await asyncio.sleep(self.interval)
