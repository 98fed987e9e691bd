"""
Page Controller Tests - scormchat

End-to-end page-load sequence over the in-process browsing model.
"""

import asyncio

import pytest

from conftest import ScriptLoaderStub
from scormchat.browser import Window, Element
from scormchat.page import PageController
from scormchat.widgets import FallbackChatWidget, RemoteChatWidget


async def settle(rounds: int = 5):
    for _ in range(rounds):
        await asyncio.sleep(0)


class TestPageController:
    """Test the per-page controller"""

    @pytest.mark.asyncio
    async def test_full_page_load_with_lms_and_backend(self, lms_frames):
        content = lms_frames["content"]
        stub = ScriptLoaderStub()
        controller = PageController(content, backend_url="https://x.test", script_loader=stub,
                                    tick_interval=3600)

        connected = await controller.start()
        widget = await controller.widget_loader.wait_ready()
        await settle()

        assert connected is True
        assert controller.learner_session.learner_name == "Ada Lovelace"
        assert isinstance(widget, RemoteChatWidget)
        assert controller.widget_state.loaded is True

        content.document.get_element_by_id("templateChatTrigger").click()
        assert content.document.get_element_by_id("mainContent").style["marginRight"] == "400px"

        widget.hide_chat()
        assert content.document.get_element_by_id("mainContent").style["marginRight"] == "0px"

        await controller.stop()

    @pytest.mark.asyncio
    async def test_standalone_page_with_fallback(self, window):
        controller = PageController(window, backend_url="https://x.test",
                                    script_loader=ScriptLoaderStub(failures=99),
                                    retry_delay=0, tick_interval=3600)
        fired = []

        assert await controller.start() is False
        controller.ensure_chat_widget(lambda: fired.append(window.chat_widget))
        await controller.widget_loader.wait_ready()
        await settle()

        assert controller.learner_session.learner_id is None
        assert len(fired) == 1
        assert isinstance(fired[0], FallbackChatWidget)
        assert controller.widget_state.attempts == 3
        assert controller.session_seconds == 0

        await controller.stop()

    @pytest.mark.asyncio
    async def test_fallback_page_still_hides_backend_triggers(self, window):
        backend_trigger = Element(id="backendTrigger", tag="button", class_list=["chat-trigger"])
        window.document.append(backend_trigger)
        controller = PageController(window, backend_url="https://x.test",
                                    script_loader=ScriptLoaderStub(failures=99),
                                    retry_delay=0, tick_interval=3600)

        await controller.start()
        await controller.widget_loader.wait_ready()
        await settle()

        assert controller.widget_loader.used_fallback is True
        assert backend_trigger.hidden is True
        template_button = window.document.get_element_by_id("templateChatTrigger")
        assert template_button.hidden is False
        assert template_button.onclick is None

        await controller.stop()

    @pytest.mark.asyncio
    async def test_backend_url_from_template_config(self):
        window = Window()
        window.globals["templateConfig"] = {"backendUrl": "https://backend.test"}
        controller = PageController(window, script_loader=ScriptLoaderStub())

        assert controller.widget_loader.script_url == "https://backend.test/chat-widget.js"

    @pytest.mark.asyncio
    async def test_stop_cancels_background_tasks(self, window):
        controller = PageController(window, backend_url="https://x.test",
                                    script_loader=ScriptLoaderStub(), tick_interval=0)

        await controller.start()
        await settle()
        tasks = list(controller._tasks)
        await controller.stop()

        assert all(task.done() for task in tasks)
        assert controller._tasks == []
