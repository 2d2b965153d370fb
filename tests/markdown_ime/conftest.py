"""Shared fixtures and utilities for markdown IME tests."""

import pytest

from dom import DOMElement, get_inner_html, parse_fragment

from markdown_ime import BlockRenderer, HybridText, MarkdownRenderer


@pytest.fixture
def block_renderer():
    """Create a markdown block renderer with default settings."""
    return BlockRenderer.create_markdown_renderer()


@pytest.fixture
def hybrid_text():
    """Create an empty hybrid text."""
    return HybridText()


@pytest.fixture
def markdown_renderer():
    """Create a markdown renderer with default settings."""
    return MarkdownRenderer()


class DocumentHelpers:
    """Helper utilities for building and inspecting documents."""

    @staticmethod
    def create_document(markup: str) -> DOMElement:
        """Create a root element whose content is the parsed markup."""
        root = DOMElement("div")
        for child in list(parse_fragment(markup).children):
            root.add_child(child)

        return root

    @staticmethod
    def to_markup(node: DOMElement) -> str:
        """Get the markup of a node's content."""
        return get_inner_html(node)


@pytest.fixture
def helpers():
    """Provide document helper utilities."""
    return DocumentHelpers
