"""
Document tree visitor to render nodes back to markup.
"""

import html

from dom.dom_node import DOMComment, DOMElement, DOMFragment, DOMNode, DOMText, DOMVisitor
from dom.dom_parser import VOID_ELEMENTS, parse_fragment


class DOMSerializer(DOMVisitor):
    """Visitor that renders a document tree as markup."""

    def visit_DOMFragment(self, node: DOMFragment) -> str:  # pylint: disable=invalid-name
        """
        Render a fragment by rendering its children.

        Args:
            node: The fragment to render

        Returns:
            The markup of the fragment's content
        """
        return self.serialize_children(node)

    def visit_DOMElement(self, node: DOMElement) -> str:  # pylint: disable=invalid-name
        """
        Render an element node to markup.

        Args:
            node: The element to render

        Returns:
            The markup string representation of the element
        """
        attributes = "".join(
            f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attributes.items()
        )
        if node.tag_name in VOID_ELEMENTS:
            return f"<{node.tag_name}{attributes}>"

        return f"<{node.tag_name}{attributes}>{self.serialize_children(node)}</{node.tag_name}>"

    def visit_DOMText(self, node: DOMText) -> str:  # pylint: disable=invalid-name
        """
        Render a text node to markup.

        Args:
            node: The text node to render

        Returns:
            The text with markup-significant characters escaped
        """
        return html.escape(node.content, quote=False)

    def visit_DOMComment(self, node: DOMComment) -> str:  # pylint: disable=invalid-name
        """
        Render a comment node to markup.

        Args:
            node: The comment node to render

        Returns:
            The comment markup
        """
        return f"<!--{node.content}-->"

    def serialize_children(self, node: DOMNode) -> str:
        """
        Render all children of a node.

        Args:
            node: The node whose children should be rendered

        Returns:
            The concatenated markup of the children
        """
        return "".join(self.visit(child) for child in node.children)


def get_inner_html(node: DOMNode) -> str:
    """
    Get the markup of a node's content.

    Args:
        node: The node to read

    Returns:
        The markup of the node's children
    """
    return DOMSerializer().serialize_children(node)


def get_outer_html(node: DOMNode) -> str:
    """
    Get the markup of a node, including the node itself.

    Args:
        node: The node to read

    Returns:
        The markup of the node
    """
    return DOMSerializer().visit(node)


def set_inner_html(node: DOMNode, markup: str) -> None:
    """
    Replace a node's content with parsed markup.

    Args:
        node: The node to update
        markup: The new content
    """
    fragment = parse_fragment(markup)
    node.remove_children()
    for child in list(fragment.children):
        node.add_child(child)
