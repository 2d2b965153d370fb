"""
Parser to construct a document tree fragment from markup.
"""

from html.parser import HTMLParser
import logging
from typing import List, Tuple

from dom.dom_node import DOMComment, DOMElement, DOMFragment, DOMNode, DOMText


# Elements that never have content or an end tag
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr"
})


class DOMParser(HTMLParser):
    """
    Builds a detached tree from a markup string.

    The parser is forgiving in the same way an editing surface is: stray end tags
    are ignored and elements still open at the end of the input are closed.
    """

    def __init__(self) -> None:
        """Initialize the parser with an empty fragment."""
        super().__init__(convert_charrefs=True)
        self._logger = logging.getLogger("DOMParser")
        self._fragment = DOMFragment()
        self._open_elements: List[DOMNode] = [self._fragment]

    def parse_fragment(self, markup: str) -> DOMFragment:
        """
        Parse markup into a new fragment.

        Args:
            markup: The markup to parse

        Returns:
            A fragment whose children are the parsed top-level nodes
        """
        self.reset()
        self._fragment = DOMFragment()
        self._open_elements = [self._fragment]

        self.feed(markup)
        self.close()
        return self._fragment

    def _current(self) -> DOMNode:
        return self._open_elements[-1]

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, str | None]]) -> None:
        element = DOMElement(tag, {name: value if value is not None else "" for name, value in attrs})
        self._current().add_child(element)
        if element.tag_name not in VOID_ELEMENTS:
            self._open_elements.append(element)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, str | None]]) -> None:
        element = DOMElement(tag, {name: value if value is not None else "" for name, value in attrs})
        self._current().add_child(element)

    def handle_endtag(self, tag: str) -> None:
        # Close back to the matching element; anything in between is implicitly closed
        for index in range(len(self._open_elements) - 1, 0, -1):
            node = self._open_elements[index]
            if isinstance(node, DOMElement) and node.tag_name == tag:
                del self._open_elements[index:]
                return

        if tag not in VOID_ELEMENTS:
            self._logger.debug("ignoring unmatched end tag </%s>", tag)

    def handle_data(self, data: str) -> None:
        current = self._current()
        if current.children and isinstance(current.children[-1], DOMText):
            current.children[-1].content += data
            return

        current.add_child(DOMText(data))

    def handle_comment(self, data: str) -> None:
        self._current().add_child(DOMComment(data))


def parse_fragment(markup: str) -> DOMFragment:
    """
    Parse markup into a detached fragment.

    Args:
        markup: The markup to parse

    Returns:
        The parsed fragment
    """
    return DOMParser().parse_fragment(markup)
