"""
Block renderer: elevates block nodes using an ordered set of block containers.
"""

import logging
from typing import List

from dom import DOMElement, DOMNode

from markdown_ime.block_container import BlockContainer, ElevationResult, create_container
from markdown_ime.markdown_ime_settings import BLOCK_CONTAINER_NAMES, MarkdownIMESettings


class BlockRenderer:
    """
    Elevates and suggests names for block nodes.

    This is not really a renderer: it changes a node's name and moves it into a
    container (a list, a blockquote...) when its text starts with a known marker.
    Containers are tried in order and the first one that matches wins, so order
    matters wherever two markers overlap.
    """

    def __init__(self, containers: List[BlockContainer] | None = None) -> None:
        """
        Initialize the block renderer.

        Args:
            containers: Block containers in priority order
        """
        self.containers: List[BlockContainer] = list(containers) if containers else []
        self._logger = logging.getLogger("BlockRenderer")

    @classmethod
    def create_markdown_renderer(cls, settings: MarkdownIMESettings | None = None) -> "BlockRenderer":
        """
        Create a block renderer for markdown.

        Containers are always registered in the canonical priority order (blockquote,
        header, horizontal rule, ordered list, unordered list); settings only choose
        which of them are enabled.

        Args:
            settings: Optional settings; defaults are used if not given

        Returns:
            The block renderer
        """
        if settings is None:
            settings = MarkdownIMESettings.create_default()

        containers = [
            create_container(name, settings.max_header_level)
            for name in BLOCK_CONTAINER_NAMES
            if name in settings.block_containers
        ]
        return cls(containers)

    def elevate(self, node: DOMNode | None) -> ElevationResult | None:
        """
        Elevate a block node with the first container whose marker matches.

        Args:
            node: The block node, attached to a document

        Returns:
            ElevationResult, or None if no container applies
        """
        for container in self.containers:
            result = container.elevate(node)
            if result is not None:
                self._logger.debug(
                    "elevated block as %s: child <%s>, parent %s",
                    container.name,
                    result.child.tag_name,
                    f"<{result.parent.tag_name}>" if result.parent is not None else "none"
                )
                return result

        return None

    def suggest_child_tag(self, container_node: DOMNode | None) -> str | None:
        """
        Get the suggested tag of a new line inside a container.

        Args:
            container_node: The container the new line is created in (e.g. a <ul>)

        Returns:
            The suggested tag, or None if there is no suggestion
        """
        if not isinstance(container_node, DOMElement):
            return None

        for container in self.containers:
            if container.parent_tag == container_node.tag_name:
                return container.child_tag

        return None
