"""
Remote Chat Widget - scormchat

Fetches the chat backend's widget script over HTTP and installs the widget
it provides on the page.
"""

from typing import Any, Mapping, Optional, Union

import httpx

from .models import ChatWidgetConfig
from ..browser.window import Window
from ..utils.logging import get_logger

WIDGET_SCRIPT_PATH = "/chat-widget.js"
CHAT_OPENED_EVENT = "chatOpened"
CHAT_CLOSED_EVENT = "chatClosed"

logger = get_logger('widgets.remote')


class RemoteChatWidget:
    """Widget surface provided by the backend's ``chat-widget.js``"""

    is_fallback = False

    def __init__(self, window: Window, backend_url: str, script_source: str = ""):
        self.window = window
        self.backend_url = backend_url
        self.script_source = script_source
        self.is_open = False
        self.active_config: Optional[ChatWidgetConfig] = None

    def init_chat_widget(self, config: Union[ChatWidgetConfig, Mapping[str, Any], None] = None) -> ChatWidgetConfig:
        """Open the chat panel for ``config``"""
        self.active_config = ChatWidgetConfig.coerce(config)
        self.is_open = True
        self.window.dispatch_event(CHAT_OPENED_EVENT, {"topic": self.active_config.topic})
        return self.active_config

    def show_chat(self) -> ChatWidgetConfig:
        topic_config = self.window.globals.get("topicConfig") or {}
        return self.init_chat_widget(ChatWidgetConfig(topic=topic_config.get("topic") or "general"))

    def hide_chat(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self.window.dispatch_event(CHAT_CLOSED_EVENT)


class HttpScriptLoader:
    """Script loader that fetches the widget script with httpx

    On a successful fetch it installs a `RemoteChatWidget`, which is what
    executing the script does in a real page.
    """

    def __init__(self, timeout: Optional[float] = None, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self.client = client

    async def fetch(self, url: str) -> str:
        if self.client is not None:
            response = await self.client.get(url)
            response.raise_for_status()
            return response.text

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text

    async def __call__(self, url: str, window: Window) -> None:
        source = await self.fetch(url)
        backend_url = url[:-len(WIDGET_SCRIPT_PATH)] if url.endswith(WIDGET_SCRIPT_PATH) else url
        window.chat_widget = RemoteChatWidget(window, backend_url, source)
        logger.debug(f"Installed remote widget from {url} ({len(source)} bytes)")
