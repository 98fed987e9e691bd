"""
Document Model - scormchat

Minimal document/element stand-ins for the page the SCORM template renders:
id lookup, class and tag queries, inner HTML, inline style and click handlers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Callable, Any, Iterable


@dataclass
class Element:
    """A page element addressed by id, tag or class"""
    id: Optional[str] = None
    tag: str = "div"
    class_list: List[str] = field(default_factory=list)
    inner_html: str = ""
    style: Dict[str, str] = field(default_factory=dict)
    onclick: Optional[Callable[[], Any]] = None

    def click(self) -> Any:
        """Invoke the bound click handler, if any"""
        if self.onclick is None:
            return None
        return self.onclick()

    @property
    def hidden(self) -> bool:
        return self.style.get("display") == "none"


class Document:
    """Element registry for one page"""

    def __init__(self, elements: Optional[Iterable[Element]] = None):
        self._elements: List[Element] = []
        for element in elements or []:
            self.append(element)

    def append(self, element: Element) -> Element:
        self._elements.append(element)
        return element

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def query_selector_all(self, class_name: Optional[str] = None, tag: Optional[str] = None) -> List[Element]:
        """Return elements matching every given criterion, in document order"""
        matches = []
        for element in self._elements:
            if class_name is not None and class_name not in element.class_list:
                continue
            if tag is not None and element.tag != tag:
                continue
            matches.append(element)
        return matches

    def __len__(self) -> int:
        return len(self._elements)
