"""
Incremental markdown rendering for live document trees.

This package converts markdown typed inline into document nodes while keeping as
much of the existing tree as possible.
"""

from markdown_ime.block_container import (
    BlockContainer,
    ElevationResult,
    create_blockquote_container,
    create_container,
    create_header_container,
    create_horizontal_rule_container,
    create_ordered_list_container,
    create_unordered_list_container,
    elevate_generic,
    elevate_header,
    elevate_horizontal_rule
)
from markdown_ime.block_renderer import BlockRenderer
from markdown_ime.dom_reconciler import DOMReconciler, ReconcileResult
from markdown_ime.hybrid_text import HybridText
from markdown_ime.inline_element import InlineClassicElement
from markdown_ime.markdown_ime_exceptions import (
    MarkdownIMEContainerError,
    MarkdownIMEError,
    MarkdownIMESettingsError
)
from markdown_ime.markdown_ime_settings import InlineElementSettings, MarkdownIMESettings
from markdown_ime.markdown_renderer import MarkdownRenderer


__version__ = "0.1"


__all__ = [
    # Exceptions
    "MarkdownIMEError",
    "MarkdownIMESettingsError",
    "MarkdownIMEContainerError",
    # Settings
    "InlineElementSettings",
    "MarkdownIMESettings",
    # Hybrid text
    "HybridText",
    "DOMReconciler",
    "ReconcileResult",
    # Block elevation
    "BlockContainer",
    "BlockRenderer",
    "ElevationResult",
    "create_blockquote_container",
    "create_container",
    "create_header_container",
    "create_horizontal_rule_container",
    "create_ordered_list_container",
    "create_unordered_list_container",
    "elevate_generic",
    "elevate_header",
    "elevate_horizontal_rule",
    # Inline rendering
    "InlineClassicElement",
    "MarkdownRenderer",
]
