"""
Support Module Tests - scormchat

- Page template rendering
- Logging helpers
- Browsing-context model
"""

import logging

import pytest
from jinja2 import TemplateNotFound

from scormchat.browser import Window, Document, Element
from scormchat.errors import CrossOriginError
from scormchat.browser import CrossOriginWindow
from scormchat.utils.logging import get_logger, ScormChatFormatter, TopicContextAdapter, setup_logging
from scormchat.widgets import PageTemplateRenderer


class TestPageTemplateRenderer:
    """Test built-in and override templates"""

    def test_builtin_learner_info(self):
        html = PageTemplateRenderer().render("learner_info.html", {"name": "Ada", "progress": "completed"})
        assert "Welcome, <strong>Ada</strong>" in html
        assert "Progress: completed" in html

    def test_template_dir_overrides_builtin(self, tmp_path):
        (tmp_path / "learner_info.html").write_text("Hi {{ name }}")
        renderer = PageTemplateRenderer(template_dir=str(tmp_path))

        assert renderer.render("learner_info.html", {"name": "Ada"}) == "Hi Ada"

    def test_unknown_template(self):
        with pytest.raises(TemplateNotFound):
            PageTemplateRenderer().render("missing.html", {})


class TestLogging:
    """Test logger helpers"""

    def test_get_logger_namespaces(self):
        assert get_logger("widgets.loader").name == "scormchat.widgets.loader"
        assert get_logger("scormchat.page").name == "scormchat.page"

    def test_topic_adapter(self):
        adapter = get_logger("tooling.build", topic="safety")
        assert isinstance(adapter, TopicContextAdapter)

        msg, kwargs = adapter.process("hello", {})
        assert kwargs["extra"]["topic"] == "safety"

    def test_formatter_includes_topic(self):
        record = logging.LogRecord("scormchat.tooling.build", logging.INFO, __file__, 1, "Building", None, None)
        record.topic = "safety"

        line = ScormChatFormatter().format(record)

        assert "Building" in line
        assert "[topic=safety]" in line
        assert "build" in line

    def test_setup_logging_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "scormchat.log"
        setup_logging(level="DEBUG", log_file=str(log_file))
        setup_logging(level="DEBUG", log_file=str(log_file))

        root = logging.getLogger("scormchat")
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        get_logger("page").debug("written")
        for handler in root.handlers:
            handler.flush()
        assert "written" in log_file.read_text()

        for handler in root.handlers:
            handler.close()
        root.handlers.clear()


class TestBrowsingModel:
    """Test the window and document stand-ins"""

    def test_top_window_is_its_own_parent(self):
        top = Window()
        frame = Window(parent=top)
        assert top.parent is top
        assert frame.parent is top

    def test_failing_listener_does_not_stop_dispatch(self):
        window = Window()
        seen = []

        def broken(event):
            raise RuntimeError("boom")

        window.add_event_listener("chatOpened", broken)
        window.add_event_listener("chatOpened", seen.append)

        assert window.dispatch_event("chatOpened", {"topic": "x"}) == 1
        assert seen == [{"type": "chatOpened", "detail": {"topic": "x"}}]

    def test_document_queries(self):
        document = Document([
            Element(id="a", tag="button", class_list=["chat-trigger"]),
            Element(id="b", tag="div", class_list=["chat-trigger"]),
        ])

        assert document.get_element_by_id("b").tag == "div"
        assert document.get_element_by_id("missing") is None
        assert [e.id for e in document.query_selector_all(class_name="chat-trigger", tag="button")] == ["a"]
        assert len(document) == 2

    def test_cross_origin_reads_raise(self):
        foreign = CrossOriginWindow(restrict_links=True)

        with pytest.raises(CrossOriginError):
            foreign.API_1484_11
        with pytest.raises(CrossOriginError):
            foreign.parent
        assert foreign.name == "cross-origin"
