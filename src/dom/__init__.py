"""A small mutable document tree for live markup editing."""

from dom.dom_node import (
    DOMComment,
    DOMElement,
    DOMFragment,
    DOMNode,
    DOMText,
    DOMVisitor
)
from dom.dom_parser import VOID_ELEMENTS, DOMParser, parse_fragment
from dom.dom_serializer import DOMSerializer, get_inner_html, get_outer_html, set_inner_html


__all__ = [
    "DOMComment",
    "DOMElement",
    "DOMFragment",
    "DOMNode",
    "DOMParser",
    "DOMSerializer",
    "DOMText",
    "DOMVisitor",
    "VOID_ELEMENTS",
    "get_inner_html",
    "get_outer_html",
    "parse_fragment",
    "set_inner_html"
]
