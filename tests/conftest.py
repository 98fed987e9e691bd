"""
Shared Test Fixtures - scormchat

- Window hierarchies (frames and popups)
- A scriptable SCORM 2004 runtime API
- Script loaders that fail or succeed on demand
- Builder settings rooted in a temporary directory
"""

import os
import zipfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from scormchat.browser import Window, Document, Element
from scormchat.config.builder import BuilderSettings
from scormchat.widgets.remote import RemoteChatWidget


class FakeScormApi:
    """SCORM 2004 runtime API double recording every call"""

    def __init__(self, values: Optional[Dict[str, str]] = None, fail_on: Optional[str] = None):
        self.values = values or {}
        self.fail_on = fail_on
        self.initialized_with: Optional[str] = None
        self.reads: List[str] = []

    def Initialize(self, parameter: str) -> str:
        self.initialized_with = parameter
        return "true"

    def GetValue(self, element: str) -> str:
        self.reads.append(element)
        if element == self.fail_on:
            raise RuntimeError(f"GetValue({element}) failed")
        return self.values.get(element, "")


class ScriptLoaderStub:
    """Script loader that fails a fixed number of times, then installs a remote widget"""

    def __init__(self, failures: int = 0, install: bool = True):
        self.failures = failures
        self.install = install
        self.urls: List[str] = []

    async def __call__(self, url: str, window: Window) -> None:
        self.urls.append(url)
        if len(self.urls) <= self.failures:
            raise ConnectionError(f"Failed to load {url}")
        if self.install:
            window.chat_widget = RemoteChatWidget(window, url.rsplit("/", 1)[0])


@pytest.fixture
def page_document():
    """Document with the elements the course template renders"""
    return Document([
        Element(id="learnerInfo"),
        Element(id="mainContent"),
        Element(id="templateChatTrigger", tag="button", inner_html="💬"),
    ])


@pytest.fixture
def window(page_document):
    return Window(name="content", document=page_document)


@pytest.fixture
def scorm_api():
    return FakeScormApi({
        "cmi.learner_id": "learner-42",
        "cmi.learner_name": "Ada Lovelace",
        "cmi.completion_status": "incomplete",
    })


@pytest.fixture
def lms_frames(scorm_api, page_document):
    """LMS top window holding the API, a wrapper frame, and the content frame"""
    top = Window(name="lms")
    top.API_1484_11 = scorm_api
    wrapper = Window(name="wrapper", parent=top)
    content = Window(name="content", parent=wrapper, document=page_document)
    return {"top": top, "wrapper": wrapper, "content": content}


@pytest.fixture
def builder_settings(tmp_path):
    return BuilderSettings(root_dir=tmp_path, build_command=["node", "build.js"])


def write_package(path: Path, files: Dict[str, str], mtime: Optional[float] = None) -> Path:
    """Create a .zip at ``path`` holding ``files``; optionally set its mtime"""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def make_package():
    return write_package
