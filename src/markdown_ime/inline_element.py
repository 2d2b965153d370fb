"""Render rule for bracket-delimited inline elements such as *emphasis*."""

import html
import re
from typing import Dict

from markdown_ime.hybrid_text import HybridText


def generate_element_html(tag_name: str, attributes: Dict[str, str], inner_html: str) -> str:
    """
    Build the markup of an element.

    Args:
        tag_name: The element's tag name
        attributes: Attribute values
        inner_html: Content markup, already escaped

    Returns:
        The element markup
    """
    attribute_html = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attributes.items())
    return f"<{tag_name}{attribute_html}>{inner_html}</{tag_name}>"


class InlineClassicElement:
    """Wraps text between a left and right bracket in an inline element."""

    def __init__(
        self,
        tag_name: str,
        left_bracket: str,
        right_bracket: str | None = None,
        attributes: Dict[str, str] | None = None
    ) -> None:
        """
        Initialize the inline element rule.

        Args:
            tag_name: Tag of the element to create, e.g. "em"
            left_bracket: Opening bracket, e.g. "*"
            right_bracket: Closing bracket; the left bracket is used if not given
            attributes: Attributes to set on created elements
        """
        self.tag_name = tag_name.lower()
        self.left_bracket = left_bracket
        self.right_bracket = right_bracket or left_bracket
        self.attributes: Dict[str, str] = dict(attributes) if attributes else {}
        self.name = f"{self.tag_name.upper()} with {self.left_bracket}"
        self.regex = re.compile(f"{re.escape(self.left_bracket)}(.+?){re.escape(self.right_bracket)}")

    def render(self, hybrid_text: HybridText) -> int:
        """
        Wrap every bracketed span of the text in this rule's element.

        Args:
            hybrid_text: The text to update

        Returns:
            The number of spans wrapped
        """
        return hybrid_text.rewrite(
            self.regex,
            lambda match: generate_element_html(self.tag_name, self.attributes, html.escape(match.group(1), quote=False))
        )
