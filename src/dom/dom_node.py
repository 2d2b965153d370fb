"""
Base classes for a mutable markup document tree.

This module provides the node types the markdown IME engine operates on: elements,
text and comments, with the tree operations needed to restructure a live document
in place (inserting, replacing and moving nodes) and a structural equality test.
"""

from typing import Any, Dict, List


class DOMNode:
    """
    Base class for all document tree nodes.

    This class provides common tree operations like adding/removing children
    and navigating between siblings.
    """

    def __init__(self) -> None:
        """Initialize a base node with empty children list and no parent."""
        self.parent: DOMNode | None = None
        self.children: List[DOMNode] = []

    def _detach(self, child: 'DOMNode') -> None:
        """Remove a node from its current parent, if it has one."""
        if child.parent is not None:
            child.parent.remove_child(child)

    def add_child(self, child: 'DOMNode') -> 'DOMNode':
        """
        Add a child node to the end of this node's children.

        If the child is already in a tree it is moved, not copied.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        self._detach(child)
        child.parent = self
        self.children.append(child)
        return child

    def insert_child(self, index: int, child: 'DOMNode') -> 'DOMNode':
        """
        Insert a child node at a given position.

        Args:
            index: Position in the children list
            child: The child node to insert

        Returns:
            The inserted child node
        """
        self._detach(child)
        child.parent = self
        self.children.insert(index, child)
        return child

    def insert_before(self, child: 'DOMNode', reference: 'DOMNode') -> 'DOMNode':
        """
        Insert a child node immediately before a reference child.

        Args:
            child: The node to insert
            reference: An existing child of this node

        Returns:
            The inserted child node

        Raises:
            ValueError: If the reference is not a child of this node
        """
        if reference.parent is not self:
            raise ValueError("Reference node is not a child of this node")

        self._detach(child)
        index = self.children.index(reference)
        child.parent = self
        self.children.insert(index, child)
        return child

    def replace_child(self, new_child: 'DOMNode', old_child: 'DOMNode') -> 'DOMNode':
        """
        Replace one child with another node, keeping its position.

        Args:
            new_child: The node to put in place
            old_child: The existing child to replace

        Returns:
            The replaced (now detached) child

        Raises:
            ValueError: If old_child is not a child of this node
        """
        if old_child.parent is not self:
            raise ValueError("Node is not a child of this node")

        if new_child is old_child:
            return old_child

        self._detach(new_child)
        index = self.children.index(old_child)
        self.children[index] = new_child
        new_child.parent = self
        old_child.parent = None
        return old_child

    def remove_child(self, child: 'DOMNode') -> None:
        """
        Remove a child node from this node.

        Args:
            child: The child node to remove

        Raises:
            ValueError: If the child is not a child of this node
        """
        if child.parent is not self:
            raise ValueError("Node is not a child of this node")

        self.children.remove(child)
        child.parent = None

    def remove_children(self) -> None:
        """Remove all children from this node."""
        for child in self.children:
            child.parent = None

        self.children = []

    def index_in_parent(self) -> int:
        """
        Get the position of this node within its parent.

        Returns:
            The index, or -1 if the node has no parent
        """
        if self.parent is None:
            return -1

        # Identity search; list.index() would use __eq__
        for index, sibling in enumerate(self.parent.children):
            if sibling is self:
                return index

        return -1

    def previous_sibling(self) -> 'DOMNode | None':
        """
        Get the previous sibling of this node, if any.

        Returns:
            The previous sibling node, or None if this is the first child or has no parent
        """
        index = self.index_in_parent()
        if index > 0:
            assert self.parent is not None
            return self.parent.children[index - 1]

        return None

    def next_sibling(self) -> 'DOMNode | None':
        """
        Get the next sibling of this node, if any.

        Returns:
            The next sibling node, or None if this is the last child or has no parent
        """
        index = self.index_in_parent()
        if index == -1:
            return None

        assert self.parent is not None
        if index < len(self.parent.children) - 1:
            return self.parent.children[index + 1]

        return None

    def previous_element_sibling(self) -> 'DOMElement | None':
        """
        Get the closest preceding sibling element.

        Whitespace-only text and comments between the two are skipped; any other
        content stops the search.  This is stricter than a browser's
        previousElementSibling, which skips all text: a block is never merged into
        an element across visible text.

        Returns:
            The preceding element, or None if there isn't one
        """
        sibling = self.previous_sibling()
        while sibling is not None:
            if isinstance(sibling, DOMElement):
                return sibling

            if isinstance(sibling, DOMText) and sibling.content.strip():
                return None

            sibling = sibling.previous_sibling()

        return None

    def text_content(self) -> str:
        """
        Get the concatenated text of all descendant text nodes.

        Returns:
            The flattened text content
        """
        return "".join(child.text_content() for child in self.children)

    def is_equal_node(self, other: 'DOMNode | None') -> bool:
        """
        Check if another node is structurally equal to this one.

        Args:
            other: The node to compare against

        Returns:
            True if both nodes have the same kind, properties and children
        """
        if other is None or type(other) is not type(self):
            return False

        if len(self.children) != len(other.children):
            return False

        return all(mine.is_equal_node(theirs) for mine, theirs in zip(self.children, other.children))


class DOMElement(DOMNode):
    """Node representing a markup element such as <p> or <li>."""

    def __init__(self, tag_name: str, attributes: Dict[str, str] | None = None) -> None:
        """
        Initialize an element node.

        Args:
            tag_name: The element's tag name (normalized to lower case)
            attributes: Optional attribute values, in document order
        """
        super().__init__()
        self.tag_name = tag_name.lower()
        self.attributes: Dict[str, str] = dict(attributes) if attributes else {}

    def get_attribute(self, name: str) -> str | None:
        """
        Get an attribute value.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or None if it is not set
        """
        return self.attributes.get(name.lower())

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute value.

        Args:
            name: Attribute name
            value: Attribute value
        """
        self.attributes[name.lower()] = value

    def is_equal_node(self, other: 'DOMNode | None') -> bool:
        if not isinstance(other, DOMElement):
            return False

        if self.tag_name != other.tag_name or self.attributes != other.attributes:
            return False

        return super().is_equal_node(other)

    def __repr__(self) -> str:
        return f"DOMElement({self.tag_name!r}, children={len(self.children)})"


class DOMText(DOMNode):
    """Node representing plain text content."""

    def __init__(self, content: str) -> None:
        """
        Initialize a text node.

        Args:
            content: The decoded text content
        """
        super().__init__()
        self.content = content

    def text_content(self) -> str:
        return self.content

    def is_equal_node(self, other: 'DOMNode | None') -> bool:
        return isinstance(other, DOMText) and self.content == other.content

    def __repr__(self) -> str:
        return f"DOMText({self.content!r})"


class DOMComment(DOMNode):
    """Node representing a markup comment."""

    def __init__(self, content: str) -> None:
        """
        Initialize a comment node.

        Args:
            content: The comment body, without the delimiters
        """
        super().__init__()
        self.content = content

    def text_content(self) -> str:
        # Comments never contribute to the flattened text
        return ""

    def is_equal_node(self, other: 'DOMNode | None') -> bool:
        return isinstance(other, DOMComment) and self.content == other.content

    def __repr__(self) -> str:
        return f"DOMComment({self.content!r})"


class DOMFragment(DOMNode):
    """Detached root used to hold parsed or scratch content."""


class DOMVisitor:
    """
    Base visitor class for document tree traversal.

    This implements the visitor pattern for tree traversal, allowing
    specialized processing of different node types.
    """

    def visit(self, node: DOMNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: DOMNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        results = []
        for child in node.children:
            results.append(self.visit(child))

        return results
