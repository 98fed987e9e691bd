"""Chat widget bootstrap for course pages"""

from .models import WidgetState, ChatWidgetConfig, MAX_LOAD_ATTEMPTS
from .fallback import FallbackChatWidget
from .remote import RemoteChatWidget, HttpScriptLoader, CHAT_OPENED_EVENT, CHAT_CLOSED_EVENT
from .loader import WidgetLoader, WidgetScriptError, RETRY_DELAY_SECONDS
from .layout import ChatLayoutAdjuster
from .triggers import TriggerButtonManager
from .renderer import PageTemplateRenderer

__all__ = [
    'WidgetState',
    'ChatWidgetConfig',
    'MAX_LOAD_ATTEMPTS',
    'FallbackChatWidget',
    'RemoteChatWidget',
    'HttpScriptLoader',
    'CHAT_OPENED_EVENT',
    'CHAT_CLOSED_EVENT',
    'WidgetLoader',
    'WidgetScriptError',
    'RETRY_DELAY_SECONDS',
    'ChatLayoutAdjuster',
    'TriggerButtonManager',
    'PageTemplateRenderer',
]
