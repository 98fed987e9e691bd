"""SCORM 2004 runtime integration"""

from .api import find_api, RuntimeApi, API_PROPERTY
from .session import LearnerSession, SessionClock
from .bridge import RuntimeApiBridge

__all__ = ['find_api', 'RuntimeApi', 'API_PROPERTY', 'LearnerSession', 'SessionClock', 'RuntimeApiBridge']
