"""
Unit Tests for Document Model

Tests list merging, block boundaries and document equality of the
structural renderer.
"""

import pytest
from core.formatting.document_model import (
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    StructuredDocument,
    StructureRenderer,
    render,
)
from core.formatting.line_classifier import ListKind


@pytest.fixture
def renderer():
    return StructureRenderer()


class TestListMerging:
    """Consecutive items of one kind form one maximal list."""

    def test_consecutive_ordered_items_merge(self, renderer):
        doc = renderer.render("1. a\n2. b\n3. c")
        assert doc.blocks == (ListBlock(ListKind.ORDERED, ("a", "b", "c")),)

    def test_kind_change_splits_lists(self, renderer):
        doc = renderer.render("1. a\n- b\n- c\n2. d")
        assert doc.blocks == (
            ListBlock(ListKind.ORDERED, ("a",)),
            ListBlock(ListKind.UNORDERED, ("b", "c")),
            ListBlock(ListKind.ORDERED, ("d",)),
        )

    def test_blank_line_closes_list(self, renderer):
        doc = renderer.render("- a\n\n- b")
        assert doc.blocks == (
            ListBlock(ListKind.UNORDERED, ("a",)),
            ListBlock(ListKind.UNORDERED, ("b",)),
        )

    def test_paragraph_closes_list(self, renderer):
        doc = renderer.render("- a\ntext\n- b")
        assert doc.blocks == (
            ListBlock(ListKind.UNORDERED, ("a",)),
            ParagraphBlock("text"),
            ListBlock(ListKind.UNORDERED, ("b",)),
        )

    def test_heading_closes_list(self, renderer):
        doc = renderer.render("1. a\nNext:\n1. b")
        assert doc.blocks == (
            ListBlock(ListKind.ORDERED, ("a",)),
            HeadingBlock("Next:"),
            ListBlock(ListKind.ORDERED, ("b",)),
        )

    def test_trailing_list_closed(self, renderer):
        doc = renderer.render("Intro\n- last")
        assert doc.blocks[-1] == ListBlock(ListKind.UNORDERED, ("last",))

    def test_original_numbers_ignored(self, renderer):
        doc = renderer.render("5. a\n9. b")
        assert doc.blocks[0].items == ("a", "b")


class TestRender:
    """Test full renders."""

    def test_mixed_response(self, renderer, sample_response_text):
        doc = renderer.render(sample_response_text, agent_name="SA", extra_context="deadlines")
        assert doc.blocks == (
            HeadingBlock("Situation:"),
            ParagraphBlock("The manager is asking for unrealistic timelines."),
            HeadingBlock("Risks:"),
            ListBlock(ListKind.UNORDERED, ("Burnout", "Quality drops")),
            HeadingBlock("Actions:"),
            ListBlock(ListKind.ORDERED, ("Push back with data", "Negotiate scope")),
        )
        assert doc.title == "SA - deadlines"

    def test_blank_only_input_has_no_blocks(self, renderer):
        doc = renderer.render("\n   \n\t\n")
        assert doc.blocks == ()
        assert doc.is_empty

    def test_none_is_empty(self, renderer):
        assert renderer.render(None).is_empty

    def test_no_empty_lists(self, renderer):
        doc = renderer.render("- a\n\n\n1. b\n\nText:\n\n")
        for block in doc.blocks:
            if isinstance(block, ListBlock):
                assert block.items

    def test_render_is_deterministic(self, renderer, sample_response_text):
        first = renderer.render(sample_response_text, "SA", "ctx")
        second = renderer.render(sample_response_text, "SA", "ctx")
        assert first == second

    def test_renderer_has_no_state_between_calls(self, renderer):
        renderer.render("- dangling")
        doc = renderer.render("text")
        assert doc.blocks == (ParagraphBlock("text"),)

    def test_module_render_shortcut(self):
        assert render("Head:", "EA", "x") == StructuredDocument(
            blocks=(HeadingBlock("Head:"),), agent_name="EA", extra_context="x"
        )


class TestStructuredDocument:
    """Test document helpers."""

    def test_title_with_empty_context(self):
        assert StructuredDocument(agent_name="CT").title == "CT - "

    def test_document_is_immutable(self):
        doc = StructuredDocument()
        with pytest.raises(AttributeError):
            doc.agent_name = "SA"

    def test_to_dict_statistics(self, sample_response_text):
        stats = render(sample_response_text, "SA").to_dict()
        assert stats["blocks"] == 6
        assert stats["headings"] == 3
        assert stats["paragraphs"] == 1
        assert stats["lists"] == 2
        assert stats["list_items"] == 4
