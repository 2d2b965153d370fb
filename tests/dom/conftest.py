"""Shared fixtures and utilities for document tree tests."""

import pytest

from dom import DOMElement, DOMText, parse_fragment


@pytest.fixture
def paragraph():
    """Create a paragraph inside a root element: <div><p>one <b>two</b> three</p></div>."""
    root = DOMElement("div")
    p = root.add_child(DOMElement("p"))
    p.add_child(DOMText("one "))
    b = p.add_child(DOMElement("b"))
    b.add_child(DOMText("two"))
    p.add_child(DOMText(" three"))
    return p


@pytest.fixture
def make_tree():
    """Factory for a root element holding parsed markup."""
    def _make_tree(markup: str) -> DOMElement:
        root = DOMElement("div")
        for child in list(parse_fragment(markup).children):
            root.add_child(child)

        return root
    return _make_tree
