"""Widget state and configuration objects"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

MAX_LOAD_ATTEMPTS = 3


@dataclass
class WidgetState:
    """Load progress of the chat widget for one page"""
    loaded: bool = False
    attempts: int = 0
    max_attempts: int = MAX_LOAD_ATTEMPTS


@dataclass
class ChatWidgetConfig:
    """Options passed to a widget's ``init_chat_widget``"""
    topic: str = "general"
    context: str = "general"
    initial_message: Optional[str] = None

    @classmethod
    def coerce(cls, config: Union["ChatWidgetConfig", Mapping[str, Any], None]) -> "ChatWidgetConfig":
        """Accept a config object or a page-style mapping (``initialMessage``)"""
        if isinstance(config, cls):
            return config
        if not config:
            return cls()
        return cls(
            topic=config.get("topic", "general"),
            context=config.get("context", "general"),
            initial_message=config.get("initial_message", config.get("initialMessage")),
        )
