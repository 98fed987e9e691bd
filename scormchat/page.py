"""
Page Controller - scormchat

One controller per course page. It owns every piece of page state that the
SCORM template scripts used to keep in globals: the widget loader and its
state, the runtime bridge and the learner session, and the session clock.
"""

import asyncio
from typing import Any, Callable, List, Optional

from .browser.window import Window
from .runtime.bridge import RuntimeApiBridge
from .runtime.session import LearnerSession, SessionClock
from .widgets.layout import ChatLayoutAdjuster
from .widgets.loader import WidgetLoader, ScriptLoader
from .widgets.models import WidgetState
from .widgets.triggers import TriggerButtonManager
from .utils.logging import get_logger

TEMPLATE_CONFIG_GLOBAL = "templateConfig"


class PageController:
    """Starts and stops the page-load integrations"""

    def __init__(
        self,
        window: Window,
        backend_url: Optional[str] = None,
        script_loader: Optional[ScriptLoader] = None,
        clock: Optional[SessionClock] = None,
        tick_interval: float = 1.0,
        **loader_options: Any,
    ):
        self.window = window
        if backend_url is None:
            backend_url = (window.globals.get(TEMPLATE_CONFIG_GLOBAL) or {}).get("backendUrl", "")

        self.widget_loader = WidgetLoader(window, backend_url, script_loader=script_loader, **loader_options)
        self.runtime = RuntimeApiBridge(window)
        self.layout = ChatLayoutAdjuster(window)
        self.triggers = TriggerButtonManager(window)
        self.clock = clock or SessionClock()
        self.tick_interval = tick_interval
        self.logger = get_logger('page')

        self._tasks: List[asyncio.Task] = []

    @property
    def learner_session(self) -> LearnerSession:
        return self.runtime.session

    @property
    def widget_state(self) -> WidgetState:
        return self.widget_loader.state

    @property
    def session_seconds(self) -> int:
        return self.clock.elapsed_seconds

    def ensure_chat_widget(self, callback: Callable[[], Any]) -> None:
        self.widget_loader.ensure_ready(callback)

    async def start(self) -> bool:
        """Run the page-load sequence; returns whether an LMS session was found"""
        loop = asyncio.get_running_loop()

        self.layout.attach()
        connected = self.runtime.init_session()

        self._tasks.append(self.widget_loader.start())
        self._tasks.append(loop.create_task(self._connect_triggers()))
        self._tasks.append(loop.create_task(self.clock.run(self.tick_interval)))
        return connected

    async def _connect_triggers(self) -> None:
        widget = await self.widget_loader.wait_ready()
        if not getattr(widget, "is_fallback", False):
            self.triggers.bind_template_button()
        await self.triggers.watch()

    async def stop(self) -> None:
        """Tear the page down: cancel every task it scheduled"""
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()
        self.layout.detach()
