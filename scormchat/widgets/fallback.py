"""
Fallback Chat Widget - scormchat

Synchronous stand-in installed when the remote widget script could not be
loaded. It cannot chat; it tells the learner why, via a blocking alert.
"""

from typing import Any, Mapping, Union

from .models import ChatWidgetConfig
from ..browser.window import Window

DEFAULT_FALLBACK_MESSAGE = "Chat would open here"
SHOW_CHAT_GREETING = "Hello! I have questions about this topic."


class FallbackChatWidget:
    """Local chat widget that summarizes the request instead of opening a chat"""

    is_fallback = True

    def __init__(self, window: Window):
        self.window = window

    def build_message(self, config: Union[ChatWidgetConfig, Mapping[str, Any], None]) -> str:
        config = ChatWidgetConfig.coerce(config)
        message = config.initial_message or DEFAULT_FALLBACK_MESSAGE
        is_online = self.window.navigator.on_line

        status = "Backend Offline" if is_online else "No Internet"
        reason = "⚠️ Backend server not responding" if is_online else "📡 No internet connection"

        return (
            f"🤖 Chat Widget ({status})\n\n"
            f"Topic: {config.topic}\n"
            f"Context: {config.context}\n"
            f"Message: {message}\n\n"
            f"{reason}"
        )

    def init_chat_widget(self, config: Union[ChatWidgetConfig, Mapping[str, Any], None] = None) -> str:
        """Show the fallback summary for ``config`` and return it"""
        text = self.build_message(config)
        self.window.alert(text)
        return text

    def show_chat(self) -> str:
        topic_config = self.window.globals.get("topicConfig") or {}
        return self.init_chat_widget(ChatWidgetConfig(
            topic=topic_config.get("topic") or "general",
            context="general",
            initial_message=SHOW_CHAT_GREETING,
        ))
