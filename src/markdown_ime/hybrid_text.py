"""
A bridge between plain text and markup, used to manipulate inline content.

Markup fragments (tags, comments and backslash escapes) are swapped out for opaque
marks so that regular expressions can be run over the text without ever seeing or
damaging them.  Markup introduced by a replacement is digested the same way, so the
text stays markup-free after any number of rewrites.
"""

import html
import logging
import re
from typing import Callable, Dict, Pattern

from dom import DOMFragment, DOMNode, get_inner_html, parse_fragment

from markdown_ime.dom_reconciler import DOMReconciler, ReconcileResult


# Marks are built from characters in the Unicode "Specials" block, which do not occur
# in typed text and contain nothing a markup pattern could match
MARK_PREFIX = "\ufffc\ufff9"
MARK_SUFFIX = "\ufffb"
MARK_PATTERN = re.compile("\ufffc\ufff9[0-9a-z]+\ufffb")

_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_PATTERN = re.compile(r"</?\w+(\s+[^>]+)?>")
# A backslash before a mark is plain text; it must not take the mark's first character
_ESCAPE_PATTERN = re.compile(r"\\[^\n\ufffc\ufff9\ufffb]")

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    digits = []
    while True:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
        if value == 0:
            break

    return "".join(reversed(digits))


class HybridText:
    """
    Markup-free text view of a node's content plus the markup it stands for.

    Load content with `load_from_node()` or `set_markup()`, transform it with
    `rewrite()`, then write it back with `reconcile()` or read it with
    `materialize()`.
    """

    def __init__(self) -> None:
        """Initialize an empty hybrid text."""
        self._logger = logging.getLogger("HybridText")

        # The markup-free text; every markup fragment is replaced by a mark
        self.text = ""

        # Mark to original markup fragment
        self.proxy_storage: Dict[str, str] = {}

        self._mark_count = 0

        # Markup currently being digested, so new marks cannot collide with it either
        self._digesting = ""

        self._reconciler = DOMReconciler()

    def load_from_node(self, node: DOMNode) -> None:
        """
        Load the content of a node.

        Args:
            node: The node whose children should be loaded
        """
        self.set_markup(get_inner_html(node))

    def set_markup(self, markup: str) -> None:
        """
        Set new markup content, replacing any existing text and marks.

        Args:
            markup: The markup to load
        """
        self._mark_count = 0
        self.proxy_storage = {}
        self.text = ""
        self.text = self.digest(markup)

    def digest(self, markup: str) -> str:
        """
        Extract markup fragments and decode what remains into plain text.

        Comments, then tags, then backslash-escaped characters are each replaced by a
        new mark before character references are decoded.

        Args:
            markup: The markup to digest

        Returns:
            The plain text, with marks in place of the extracted fragments
        """
        self._digesting = markup
        try:
            text = _COMMENT_PATTERN.sub(self._proxy_match, markup)
            text = _TAG_PATTERN.sub(self._proxy_match, text)
            text = _ESCAPE_PATTERN.sub(self._proxy_match, text)

        finally:
            self._digesting = ""

        return html.unescape(text)

    def materialize(self) -> str:
        """
        Get the markup equivalent of the current text.

        Returns:
            The text with markup characters escaped and every mark replaced by the
            fragment it stands for
        """
        markup = html.escape(self.text, quote=False)
        for mark, reality in self.proxy_storage.items():
            markup = markup.replace(mark, reality)

        return markup

    def rewrite(self, pattern: str | Pattern[str], replacement: str | Callable[[re.Match[str]], str]) -> int:
        """
        Replace matches in the text with markup.

        The replacement is markup, not text: any markup characters meant literally
        must already be escaped.  It is digested before insertion, so new tags become
        marks.

        Args:
            pattern: Pattern to match against the text (not the markup)
            replacement: Replacement markup, or a function of the match producing it

        Returns:
            The number of replacements made
        """
        def substitute(match: re.Match[str]) -> str:
            markup = replacement(match) if callable(replacement) else replacement
            return self.digest(markup)

        self.text, count = re.subn(pattern, substitute, self.text)
        if count:
            self._logger.debug("rewrote %d match(es) of %r", count, getattr(pattern, 'pattern', pattern))

        return count

    def create_proxy(self, reality: str) -> str:
        """
        Store a markup fragment and get the mark that stands for it.

        Args:
            reality: The markup fragment

        Returns:
            The mark
        """
        mark = self.next_mark()
        self.proxy_storage[mark] = reality
        return mark

    def next_mark(self) -> str:
        """
        Generate a mark that does not occur in the current content.

        Returns:
            The new mark
        """
        while True:
            self._mark_count += 1
            mark = f"{MARK_PREFIX}{_to_base36(self._mark_count)}{MARK_SUFFIX}"
            if mark not in self.text and mark not in self._digesting:
                return mark

    def to_fragment(self) -> DOMFragment:
        """
        Build a detached tree from the current content.

        Returns:
            A fragment holding the parsed markup
        """
        return parse_fragment(self.materialize())

    def reconcile(self, target: DOMNode) -> ReconcileResult:
        """
        Apply the current content to a live node, keeping unchanged children.

        Args:
            target: The node to update

        Returns:
            ReconcileResult with preservation statistics
        """
        return self._reconciler.reconcile(target, self.to_fragment())

    def _proxy_match(self, match: re.Match[str]) -> str:
        return self.create_proxy(match.group(0))
