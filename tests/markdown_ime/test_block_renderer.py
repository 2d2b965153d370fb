"""Tests for block elevation."""

import pytest

from dom import DOMElement, DOMText

from markdown_ime import BlockRenderer, MarkdownIMESettings


class TestBlockRendererScenarios:
    """Test elevating typed blocks into structures."""

    def test_header(self, block_renderer, helpers):
        """Test that "# Hello" becomes a level 1 header."""
        root = helpers.create_document("<p># Hello</p>")

        result = block_renderer.elevate(root.children[0])

        assert result is not None
        assert result.container.name == "header text"
        assert result.parent is None
        assert result.child.tag_name == "h1"
        assert result.child.text_content() == "Hello"
        assert root.children == [result.child]
        assert helpers.to_markup(root) == "<h1>Hello</h1>"

    @pytest.mark.parametrize("hashes,tag", [("##", "h2"), ("###", "h3"), ("######", "h6")])
    def test_header_levels(self, block_renderer, helpers, hashes, tag):
        """Test that the header level follows the number of hashes."""
        root = helpers.create_document(f"<p>{hashes} Title</p>")

        result = block_renderer.elevate(root.children[0])

        assert result.child.tag_name == tag
        assert helpers.to_markup(root) == f"<{tag}>Title</{tag}>"

    def test_header_too_deep_does_not_match(self, block_renderer, helpers):
        """Test that more hashes than supported header levels is left alone."""
        root = helpers.create_document("<p>####### Title</p>")

        assert block_renderer.elevate(root.children[0]) is None

    def test_unordered_list_items_merge(self, block_renderer, helpers):
        """Test that consecutive "- " blocks end up in one list."""
        root = helpers.create_document("<p>- item one</p><p>- item two</p>")
        first_block, second_block = root.children

        first = block_renderer.elevate(first_block)
        second = block_renderer.elevate(second_block)

        assert first.child.tag_name == "li"
        assert first.parent.tag_name == "ul"
        assert second.parent is first.parent
        assert first.parent.children == [first.child, second.child]
        assert root.children == [first.parent]
        assert helpers.to_markup(root) == "<ul><li>item one</li><li>item two</li></ul>"

    def test_ordered_list(self, block_renderer, helpers):
        """Test that "1. " becomes an ordered list item."""
        root = helpers.create_document("<p>1. first</p><p>2. second</p>")

        block_renderer.elevate(root.children[0])
        block_renderer.elevate(root.children[1])

        assert helpers.to_markup(root) == "<ol><li>first</li><li>second</li></ol>"

    def test_horizontal_rule(self, block_renderer, helpers):
        """Test that "--- " is replaced by a void rule."""
        root = helpers.create_document("<p>before</p><p>--- </p><p>after</p>")
        block = root.children[1]

        result = block_renderer.elevate(block)

        assert result.container.name == "hr"
        assert result.container.is_typable is False
        assert result.parent is None
        assert result.child.tag_name == "hr"
        assert result.child.children == []
        assert block.parent is None
        assert helpers.to_markup(root) == "<p>before</p><hr><p>after</p>"

    @pytest.mark.parametrize("text", ["***", "===", "* * *", " - - - ", "-----"])
    def test_horizontal_rule_variants(self, block_renderer, helpers, text):
        """Test the rule marker variants."""
        root = helpers.create_document(f"<p>{text}</p>")

        result = block_renderer.elevate(root.children[0])

        assert result.child.tag_name == "hr"

    def test_mixed_rule_characters_are_not_a_rule(self, block_renderer, helpers):
        """Test that a rule needs one repeated character."""
        root = helpers.create_document("<p>-=-</p>")

        assert block_renderer.elevate(root.children[0]) is None

    def test_blockquotes_merge(self, block_renderer, helpers):
        """Test that consecutive "> " blocks share one blockquote."""
        root = helpers.create_document("<p>&gt; quoted</p><p>&gt; more</p>")
        first_block, second_block = root.children

        first = block_renderer.elevate(first_block)
        second = block_renderer.elevate(second_block)

        assert first.container.name == "blockquote"
        assert first.child is first_block
        assert second.child is second_block
        assert second.parent is first.parent
        assert helpers.to_markup(root) == "<blockquote><p>quoted</p><p>more</p></blockquote>"

    def test_blockquote_wins_over_list(self, block_renderer, helpers):
        """Test that "> - x" is a quote, not a list."""
        root = helpers.create_document("<p>&gt; - x</p>")

        result = block_renderer.elevate(root.children[0])

        assert result.container.name == "blockquote"
        assert helpers.to_markup(root) == "<blockquote><p>- x</p></blockquote>"

    def test_rule_wins_over_list(self, block_renderer, helpers):
        """Test that "- - -" is a rule, not a list item."""
        root = helpers.create_document("<p>- - -</p>")

        result = block_renderer.elevate(root.children[0])

        assert result.container.name == "hr"

    def test_list_after_other_container_creates_new_list(self, block_renderer, helpers):
        """Test that only a directly preceding container of the same tag is reused."""
        root = helpers.create_document("<ol><li>a</li></ol><p>- b</p>")

        result = block_renderer.elevate(root.children[1])

        assert result.parent.tag_name == "ul"
        assert helpers.to_markup(root) == "<ol><li>a</li></ol><ul><li>b</li></ul>"

    def test_marker_followed_by_non_breaking_space(self, block_renderer, helpers):
        """Test that a non-breaking space after the marker still counts."""
        root = helpers.create_document("<p>-&nbsp;item</p>")

        result = block_renderer.elevate(root.children[0])

        assert result.child.tag_name == "li"
        assert result.child.text_content() == "item"

    def test_markup_after_marker_is_preserved(self, block_renderer, helpers):
        """Test that inline markup following the marker survives."""
        root = helpers.create_document('<p>* <b>bold</b> <a href="u">link</a></p>')

        block_renderer.elevate(root.children[0])

        assert helpers.to_markup(root) == '<ul><li><b>bold</b> <a href="u">link</a></li></ul>'


class TestBlockRendererNoMatch:
    """Test that blocks without a marker are left alone."""

    def test_no_match_leaves_node_untouched(self, block_renderer, helpers):
        """Test that the node and its subtree keep their identity."""
        root = helpers.create_document("<p>just <b>text</b></p>")
        block = root.children[0]
        children = list(block.children)

        assert block_renderer.elevate(block) is None
        assert root.children == [block]
        assert block.children == children
        assert helpers.to_markup(root) == "<p>just <b>text</b></p>"

    def test_missing_node(self, block_renderer):
        """Test that a missing node is not an error."""
        assert block_renderer.elevate(None) is None

    def test_detached_node(self, block_renderer):
        """Test that a node without a parent can't be elevated."""
        block = DOMElement("p")
        block.add_child(DOMText("- item"))

        assert block_renderer.elevate(block) is None
        assert block.text_content() == "- item"

    def test_text_node(self, block_renderer):
        """Test that only elements are elevated."""
        parent = DOMElement("div")
        text = parent.add_child(DOMText("# x"))

        assert block_renderer.elevate(text) is None

    def test_marker_without_space(self, block_renderer, helpers):
        """Test that markers need their trailing space."""
        root = helpers.create_document("<p>-item</p><p>#title</p><p>1.x</p>")

        for block in list(root.children):
            assert block_renderer.elevate(block) is None


class TestBlockRendererDeterminism:
    """Test that elevation is repeatable."""

    def test_same_input_same_output(self, helpers):
        """Test that fresh renderers produce identical structures."""
        outputs = []
        for _ in range(2):
            renderer = BlockRenderer.create_markdown_renderer()
            root = helpers.create_document("<p>- a</p><p>- b</p><p>## c</p>")
            names = [renderer.elevate(block).container.name for block in list(root.children)]
            outputs.append((names, root))

        assert outputs[0][0] == outputs[1][0] == ["unordered list", "unordered list", "header text"]
        assert outputs[0][1].is_equal_node(outputs[1][1])


class TestBlockRendererSuggestions:
    """Test suggesting tags for new lines inside containers."""

    def test_suggest_list_item(self, block_renderer, helpers):
        """Test that new lines inside an elevated list become list items."""
        root = helpers.create_document("<p>- a</p>")
        result = block_renderer.elevate(root.children[0])

        assert block_renderer.suggest_child_tag(result.parent) == "li"
        assert block_renderer.suggest_child_tag(DOMElement("ol")) == "li"

    def test_no_suggestion(self, block_renderer):
        """Test containers with no specific child tag."""
        assert block_renderer.suggest_child_tag(DOMElement("div")) is None
        assert block_renderer.suggest_child_tag(DOMElement("blockquote")) is None
        assert block_renderer.suggest_child_tag(None) is None


class TestBlockRendererSettings:
    """Test building renderers from settings."""

    def test_default_priority_order(self, block_renderer):
        """Test the canonical container order."""
        assert [container.name for container in block_renderer.containers] == [
            "blockquote", "header text", "hr", "ordered list", "unordered list"
        ]

    def test_disabled_containers(self, helpers):
        """Test that disabled containers never match."""
        settings = MarkdownIMESettings(block_containers=["unordered list", "blockquote"])
        renderer = BlockRenderer.create_markdown_renderer(settings)
        root = helpers.create_document("<p># title</p>")

        assert [container.name for container in renderer.containers] == ["blockquote", "unordered list"]
        assert renderer.elevate(root.children[0]) is None

    def test_max_header_level(self, helpers):
        """Test limiting the header depth."""
        renderer = BlockRenderer.create_markdown_renderer(MarkdownIMESettings(max_header_level=2))
        root = helpers.create_document("<p>### deep</p><p>## ok</p>")

        assert renderer.elevate(root.children[0]) is None
        assert renderer.elevate(root.children[1]).child.tag_name == "h2"

    def test_empty_renderer(self, helpers):
        """Test that a renderer without containers never elevates."""
        root = helpers.create_document("<p>- a</p>")

        assert BlockRenderer().elevate(root.children[0]) is None
