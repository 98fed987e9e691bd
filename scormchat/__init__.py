"""
scormchat - SCORM course page integrations and build tooling

Chat-widget bootstrap and SCORM runtime bridge for course pages, plus the
build, extraction and test-server glue around the SCORM package builder.
"""

__version__ = "1.0.0"

from .browser import Window, Document, Element
from .page import PageController
from .runtime import RuntimeApiBridge, LearnerSession, SessionClock, find_api
from .widgets import WidgetLoader, WidgetState, FallbackChatWidget, ChatWidgetConfig

__all__ = [
    "Window",
    "Document",
    "Element",
    "PageController",
    "RuntimeApiBridge",
    "LearnerSession",
    "SessionClock",
    "find_api",
    "WidgetLoader",
    "WidgetState",
    "FallbackChatWidget",
    "ChatWidgetConfig",
    "__version__",
]
