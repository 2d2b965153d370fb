"""
Block containers: declarative rules for promoting a block node into a structure.

Each container describes one construct recognised by the marker at the start of a
line (a list bullet, a quote mark, header hashes...).  Containers are immutable and
differ only in their data and in the elevator function that restructures the tree
once the marker has matched.
"""

from dataclasses import dataclass
import re
from typing import Callable, Dict, Pattern

from dom import DOMElement, DOMNode, get_inner_html, set_inner_html

from markdown_ime.markdown_ime_exceptions import MarkdownIMEContainerError
from markdown_ime.markdown_ime_settings import MAX_SUPPORTED_HEADER_LEVEL


@dataclass(frozen=True)
class ElevationResult:
    """Result of a successful elevation."""

    container: 'BlockContainer'  # The container that matched
    parent: DOMElement | None  # The enclosing container node, if any
    child: DOMElement  # The node now holding the block's content


def _move_children(source: DOMNode, destination: DOMNode) -> None:
    while source.children:
        destination.add_child(source.children[0])


def _replace_with(node: DOMElement, replacement: DOMElement) -> None:
    assert node.parent is not None
    node.parent.replace_child(replacement, node)


def elevate_generic(container: 'BlockContainer', node: DOMElement, _match: re.Match[str]) -> ElevationResult:
    """
    Rename the node to the child tag, then wrap it in (or merge it into) the parent tag.

    Args:
        container: The container that matched
        node: The block node
        _match: The feature mark match

    Returns:
        The elevation result
    """
    if container.child_tag is None:
        child = node

    else:
        child = DOMElement(container.child_tag)
        _move_children(node, child)
        _replace_with(node, child)

    if container.parent_tag is None:
        return ElevationResult(container=container, parent=None, child=child)

    previous = child.previous_element_sibling()
    if previous is not None and previous.tag_name == container.parent_tag:
        # Continue the existing container
        parent = previous
        parent.add_child(child)

    else:
        parent = DOMElement(container.parent_tag)
        _replace_with(child, parent)
        parent.add_child(child)

    return ElevationResult(container=container, parent=parent, child=child)


def elevate_horizontal_rule(container: 'BlockContainer', node: DOMElement, _match: re.Match[str]) -> ElevationResult:
    """
    Replace the node outright with a void rule element, discarding its content.

    Args:
        container: The container that matched
        node: The block node
        _match: The feature mark match

    Returns:
        The elevation result
    """
    child = DOMElement(container.child_tag or "hr")
    _replace_with(node, child)
    return ElevationResult(container=container, parent=None, child=child)


def elevate_header(container: 'BlockContainer', node: DOMElement, match: re.Match[str]) -> ElevationResult:
    """
    Rename the node to a header whose level is the number of leading hashes.

    Args:
        container: The container that matched
        node: The block node
        match: The feature mark match; group 1 is the run of hashes

    Returns:
        The elevation result
    """
    child = DOMElement(f"h{len(match.group(1))}")
    _move_children(node, child)
    _replace_with(node, child)
    return ElevationResult(container=container, parent=None, child=child)


Elevator = Callable[['BlockContainer', DOMElement, re.Match[str]], ElevationResult]


@dataclass(frozen=True)
class BlockContainer:
    """Rule describing one recognisable block construct."""

    name: str

    # The marker, anchored at the start of the text, e.g. ^\s*\d+\.\s+ for ordered lists
    feature_mark: Pattern[str]

    # Tag the node is renamed to; None keeps the original node
    child_tag: str | None = None

    # Tag of the enclosing container; None means no wrapping
    parent_tag: str | None = None

    # Whether the user can keep typing inside the result (an <hr> cannot)
    is_typable: bool = True

    # Whether the text matched by feature_mark is deleted
    remove_feature_mark: bool = True

    elevator: Elevator = elevate_generic

    def elevate(self, node: DOMNode | None) -> ElevationResult | None:
        """
        Change the node's name and move it into the proper container.

        Args:
            node: The block node to elevate; it must be attached to a tree

        Returns:
            ElevationResult, or None if the node is missing or does not match
        """
        match = self.prepare_elevate(node)
        if match is None:
            return None

        assert isinstance(node, DOMElement)
        return self.elevator(self, node, match)

    def prepare_elevate(self, node: DOMNode | None) -> re.Match[str] | None:
        """
        Check that a node can be elevated and remove its feature mark.

        Only elevate() should call this: on success the node has already been changed.

        Args:
            node: The block node to check

        Returns:
            The feature mark match against the node's text, or None
        """
        if not isinstance(node, DOMElement) or node.parent is None:
            return None

        match = self.feature_mark.match(node.text_content())
        if match is None:
            return None

        if self.remove_feature_mark:
            # Markers followed by a non-breaking space must still be found in the markup
            markup = get_inner_html(node).replace("&nbsp;", "\xa0")
            stripped = self.feature_mark.sub("", markup, count=1)
            if stripped != markup:
                set_inner_html(node, stripped)

        return match


def create_unordered_list_container() -> BlockContainer:
    """Create the container for "- item", "* item" and "+ item"."""
    return BlockContainer(
        name="unordered list",
        feature_mark=re.compile(r"^\s*[*+\-]\s+"),
        child_tag="li",
        parent_tag="ul"
    )


def create_ordered_list_container() -> BlockContainer:
    """Create the container for "1. item"."""
    return BlockContainer(
        name="ordered list",
        feature_mark=re.compile(r"^\s*\d+\.\s+"),
        child_tag="li",
        parent_tag="ol"
    )


def create_blockquote_container() -> BlockContainer:
    """Create the container for "> quote"; the node keeps its own tag."""
    return BlockContainer(
        name="blockquote",
        feature_mark=re.compile(r"^(>|&gt;)\s*"),
        parent_tag="blockquote"
    )


def create_horizontal_rule_container() -> BlockContainer:
    """Create the container for rules such as "---", "===" or "* * *"."""
    return BlockContainer(
        name="hr",
        feature_mark=re.compile(r"^\s*([\-=*])(\s*\1){2,}\s*$"),
        child_tag="hr",
        is_typable=False,
        elevator=elevate_horizontal_rule
    )


def create_header_container(max_level: int = MAX_SUPPORTED_HEADER_LEVEL) -> BlockContainer:
    """
    Create the container for "# header".

    Args:
        max_level: Deepest header level recognised; longer runs of hashes do not match

    Returns:
        The header container
    """
    return BlockContainer(
        name="header text",
        feature_mark=re.compile(rf"^(#{{1,{max_level}}})\s+"),
        elevator=elevate_header
    )


_CONTAINER_FACTORIES: Dict[str, Callable[[int], BlockContainer]] = {
    "blockquote": lambda _max_level: create_blockquote_container(),
    "header text": create_header_container,
    "hr": lambda _max_level: create_horizontal_rule_container(),
    "ordered list": lambda _max_level: create_ordered_list_container(),
    "unordered list": lambda _max_level: create_unordered_list_container()
}


def create_container(name: str, max_header_level: int = MAX_SUPPORTED_HEADER_LEVEL) -> BlockContainer:
    """
    Create a markdown container by name.

    Args:
        name: The container name
        max_header_level: Deepest header level, used by the header container

    Returns:
        The container

    Raises:
        MarkdownIMEContainerError: If there is no container with this name
    """
    factory = _CONTAINER_FACTORIES.get(name)
    if factory is None:
        raise MarkdownIMEContainerError(
            f"Unknown block container: {name}",
            {'name': name, 'valid': sorted(_CONTAINER_FACTORIES)}
        )

    return factory(max_header_level)
