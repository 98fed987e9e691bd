"""
Chat Widget Loader - scormchat

Loads the backend's chat-widget script with bounded retries and falls back
to a local widget once the retries are exhausted. Readiness is a
single-resolution event: callers either await it or register a callback
that fires exactly once.
"""

import asyncio
from typing import Any, Awaitable, Callable, List, Optional

from .fallback import FallbackChatWidget
from .models import WidgetState, MAX_LOAD_ATTEMPTS
from .remote import HttpScriptLoader, WIDGET_SCRIPT_PATH
from ..browser.window import Window
from ..utils.logging import get_logger

RETRY_DELAY_SECONDS = 1.0

ScriptLoader = Callable[[str, Window], Awaitable[None]]
WidgetFactory = Callable[[Window], Any]


class WidgetScriptError(RuntimeError):
    """The widget script loaded but did not install a widget"""


class WidgetLoader:
    """Bootstraps ``window.chat_widget`` for one page

    Failures never reach callers: every error counts as a failed attempt,
    and after ``max_attempts`` failures the fallback widget is installed and
    counts as loaded.
    """

    def __init__(
        self,
        window: Window,
        backend_url: str,
        script_loader: Optional[ScriptLoader] = None,
        max_attempts: int = MAX_LOAD_ATTEMPTS,
        retry_delay: float = RETRY_DELAY_SECONDS,
        fallback_factory: WidgetFactory = FallbackChatWidget,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.window = window
        self.backend_url = backend_url
        self.script_loader = script_loader or HttpScriptLoader()
        self.retry_delay = retry_delay
        self.fallback_factory = fallback_factory
        self.state = WidgetState(max_attempts=max_attempts)
        self.logger = get_logger('widgets.loader')

        self._ready = asyncio.Event()
        self._pending: List[Callable[[], Any]] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def script_url(self) -> str:
        return f"{(self.backend_url or '').rstrip('/')}{WIDGET_SCRIPT_PATH}"

    @property
    def is_ready(self) -> bool:
        return self.state.loaded and self.window.chat_widget is not None

    @property
    def used_fallback(self) -> bool:
        return bool(getattr(self.window.chat_widget, "is_fallback", False))

    def start(self) -> asyncio.Task:
        """Schedule `load` on the running loop (idempotent)"""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.load())
        return self._task

    async def load(self) -> Any:
        """Run the load/retry/fallback sequence and return the installed widget"""
        while not self.is_ready:
            try:
                await self.script_loader(self.script_url, self.window)
                if self.window.chat_widget is None:
                    raise WidgetScriptError(f"{self.script_url} did not install a chat widget")
            except Exception as e:
                self.state.attempts += 1
                self.logger.warning(
                    f"❌ Failed to load chat widget (attempt {self.state.attempts}/{self.state.max_attempts}): {e}"
                )
                if self.state.attempts < self.state.max_attempts:
                    await asyncio.sleep(self.retry_delay)
                    continue

                self.logger.warning("🔄 Using fallback chat widget")
                self.window.chat_widget = self.fallback_factory(self.window)
            else:
                self.logger.info("✅ Chat widget loaded successfully")

            self._mark_loaded()

        return self.window.chat_widget

    def ensure_ready(self, callback: Callable[[], Any]) -> None:
        """Invoke ``callback`` once the widget (real or fallback) is ready

        Runs immediately when already ready. Registering the same callback
        again while the load is pending does not queue a second call.
        """
        if self.is_ready:
            self._invoke(callback)
            return
        if callback not in self._pending:
            self._pending.append(callback)

    async def wait_ready(self) -> Any:
        """Wait until the widget is ready and return it"""
        await self._ready.wait()
        return self.window.chat_widget

    def _mark_loaded(self) -> None:
        self.state.loaded = True
        self._ready.set()

        pending, self._pending = self._pending, []
        for callback in pending:
            self._invoke(callback)

    def _invoke(self, callback: Callable[[], Any]) -> None:
        try:
            callback()
        except Exception as e:
            self.logger.error(f"Chat widget ready callback failed: {e}")
