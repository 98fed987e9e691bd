"""In-process model of the browsing contexts a course page runs in"""

from .dom import Document, Element
from .window import Window, CrossOriginWindow, Navigator

__all__ = ['Document', 'Element', 'Window', 'CrossOriginWindow', 'Navigator']
