"""
SCORM 2004 API Discovery - scormchat

The LMS injects its runtime API object (``API_1484_11``) into some window
above the content: a parent frame, or the window that opened the content
in a popup. Discovery walks that chain.
"""

from typing import Any, Optional, Protocol, Set

from ..utils.logging import get_logger

API_PROPERTY = "API_1484_11"

logger = get_logger('runtime.api')


class RuntimeApi(Protocol):
    """The part of the SCORM 2004 runtime API the bridge uses"""

    def Initialize(self, parameter: str) -> str: ...

    def GetValue(self, element: str) -> str: ...


def _read(win: Any, name: str) -> Optional[Any]:
    """Read ``win.<name>``; access errors mean the value is unavailable"""
    try:
        return getattr(win, name, None)
    except Exception as e:
        logger.debug(f"Cannot read '{name}' on {win!r}: {e}")
        return None


def find_api(start_window: Any) -> Optional[RuntimeApi]:
    """Search ``start_window`` and its parent/opener chain for the runtime API

    At each window: check for the API, then move to the parent when there
    is one distinct from the window itself, otherwise to the opener. The
    walk ends when neither link exists or a window repeats.
    """
    visited: Set[int] = set()
    win = start_window

    while win is not None and id(win) not in visited:
        visited.add(id(win))

        api = _read(win, API_PROPERTY)
        if api is not None:
            return api

        parent = _read(win, "parent")
        if parent is not None and parent is not win:
            win = parent
        else:
            win = _read(win, "opener")

    return None
