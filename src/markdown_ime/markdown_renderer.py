"""
Renderer combining block elevation with inline rendering.

This is the surface a host editor calls when a block has been edited: the block is
elevated first (the marker is stripped and the node restructured), then inline
elements are rendered inside whatever node now holds the text.
"""

import logging
from typing import List

from dom import DOMNode

from markdown_ime.block_container import ElevationResult
from markdown_ime.block_renderer import BlockRenderer
from markdown_ime.dom_reconciler import ReconcileResult
from markdown_ime.hybrid_text import HybridText
from markdown_ime.inline_element import InlineClassicElement
from markdown_ime.markdown_ime_settings import MarkdownIMESettings


class MarkdownRenderer:
    """Renders markdown typed into a live document tree."""

    def __init__(self, settings: MarkdownIMESettings | None = None) -> None:
        """
        Initialize the renderer.

        Args:
            settings: Optional settings; defaults are used if not given
        """
        self._settings = settings if settings is not None else MarkdownIMESettings.create_default()
        self._logger = logging.getLogger("MarkdownRenderer")

        self.block_renderer = BlockRenderer.create_markdown_renderer(self._settings)
        self.inline_elements: List[InlineClassicElement] = [
            InlineClassicElement(
                element.tag_name,
                element.left_bracket,
                element.right_bracket,
                element.attributes
            )
            for element in self._settings.inline_elements
        ]

    def render_block(self, node: DOMNode | None) -> ElevationResult | None:
        """
        Elevate a block node.

        Args:
            node: The block node

        Returns:
            ElevationResult, or None if no block container applies
        """
        return self.block_renderer.elevate(node)

    def render_inline(self, node: DOMNode) -> ReconcileResult:
        """
        Render all inline elements inside a node.

        Args:
            node: The node whose content should be rendered

        Returns:
            ReconcileResult describing how much of the node's content was kept
        """
        hybrid_text = HybridText()
        hybrid_text.load_from_node(node)
        for element in self.inline_elements:
            element.render(hybrid_text)

        return hybrid_text.reconcile(node)

    def render(self, node: DOMNode | None) -> ElevationResult | None:
        """
        Elevate a block node, then render inline elements in the result.

        Inline rendering is skipped when the block became something that cannot
        hold text, such as a horizontal rule.

        Args:
            node: The block node

        Returns:
            ElevationResult, or None if no block container applied
        """
        if node is None:
            return None

        result = self.render_block(node)
        if result is None:
            self.render_inline(node)
            return None

        if result.container.is_typable:
            self.render_inline(result.child)

        return result

    def suggest_child_tag(self, container_node: DOMNode | None) -> str | None:
        """
        Get the suggested tag of a new line inside a container.

        Args:
            container_node: The container the new line is created in

        Returns:
            The suggested tag, or None if there is no suggestion
        """
        return self.block_renderer.suggest_child_tag(container_node)
