"""
SCORM Runtime Bridge - scormchat

Connects a course page to the LMS runtime API: initializes the learner
session, mirrors learner attributes for other page scripts and renders the
learner summary. Without an LMS the page runs in standalone mode.
"""

from typing import Any, Optional

from .api import RuntimeApi, find_api
from .session import LearnerSession
from ..browser.window import Window
from ..widgets.renderer import PageTemplateRenderer
from ..utils.logging import get_logger

LEARNER_ID_KEY = "cmi.learner_id"
LEARNER_NAME_KEY = "cmi.learner_name"
COMPLETION_STATUS_KEY = "cmi.completion_status"

DEFAULT_LEARNER_ID = "anonymous"
DEFAULT_LEARNER_NAME = "Anonymous Learner"
DEFAULT_COMPLETION_STATUS = "not attempted"

LEARNER_INFO_ID = "learnerInfo"
LEARNER_DATA_GLOBAL = "scormLearnerData"


class RuntimeApiBridge:
    """Owns the discovered runtime API and the learner session for one page"""

    def __init__(self, window: Window, renderer: Optional[PageTemplateRenderer] = None,
                 learner_info_id: str = LEARNER_INFO_ID):
        self.window = window
        self.renderer = renderer or PageTemplateRenderer()
        self.learner_info_id = learner_info_id
        self.api: Optional[RuntimeApi] = None
        self.session = LearnerSession()
        self.logger = get_logger('runtime.bridge')

    @property
    def standalone(self) -> bool:
        return self.api is None

    def init_session(self) -> bool:
        """Initialize against the LMS and load the learner attributes

        Returns False (and leaves the session empty) when no API is found or
        any call fails. Values are applied only after every read succeeded.
        """
        api = find_api(self.window)
        if api is None:
            self.logger.warning("SCORM 2004 API not found. Running in standalone mode.")
            return False

        try:
            api.Initialize("")
            session = LearnerSession(
                learner_id=api.GetValue(LEARNER_ID_KEY) or DEFAULT_LEARNER_ID,
                learner_name=api.GetValue(LEARNER_NAME_KEY) or DEFAULT_LEARNER_NAME,
                completion_status=api.GetValue(COMPLETION_STATUS_KEY) or DEFAULT_COMPLETION_STATUS,
            )
        except Exception as e:
            self.logger.error(f"SCORM initialization error: {e}")
            return False

        self.api = api
        self.session = session
        self._mirror_learner_data()
        self.render_learner_info()
        self.logger.info(f"SCORM session initialized for {session.learner_id}")
        return True

    def render_learner_info(self) -> bool:
        element = self.window.document.get_element_by_id(self.learner_info_id)
        if element is None:
            return False

        element.inner_html = self.renderer.render("learner_info.html", {
            "name": self.session.learner_name,
            "progress": self.session.completion_status,
        })
        return True

    def _mirror_learner_data(self) -> None:
        shared: Any = self.window.globals.get(LEARNER_DATA_GLOBAL)
        if isinstance(shared, dict):
            shared.update(self.session.to_learner_data())
