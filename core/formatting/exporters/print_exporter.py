#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Print Exporter - Export StructuredDocument to paragraph styling directives.

The directives describe a printable document independently of the
composition target. DocxDirectiveWriter realizes them with python-docx and
the PDF adapter turns that document into a PDF.

Text is carried verbatim; escaping is the target's concern.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from config.constants import (
    PAGE_MARGIN_PT,
    BODY_FONT_SIZE_PT,
    HEADING_SPACE_BEFORE_PT,
    HEADING_SPACE_AFTER_PT,
    PARAGRAPH_LINE_SPACING,
    PARAGRAPH_SPACE_AFTER_PT,
    TITLE_SPACER_COUNT,
)

from ..document_model import (
    StructuredDocument,
    Block,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)


class DirectiveKind(Enum):
    TITLE = "title"
    SPACER = "spacer"
    HEADING = "heading"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"


class Glyph(Enum):
    """List item marker."""
    BULLET = "bullet"
    NUMBER = "number"


@dataclass(frozen=True)
class StyleDirective:
    """One paragraph of the printable document and how to style it."""
    kind: DirectiveKind
    text: str = ""
    bold: bool = False
    heading_level: Optional[int] = None  # 1 = title, 2 = section heading
    font_size_pt: Optional[float] = None  # None = target default
    line_spacing: Optional[float] = None
    space_before_pt: Optional[float] = None
    space_after_pt: Optional[float] = None
    glyph: Optional[Glyph] = None
    ordinal: Optional[int] = None  # 1-based, restarts for every list block

    @property
    def marker(self) -> str:
        """Rendered list marker ("•" or "3."), empty for non-list directives."""
        if self.glyph is Glyph.BULLET:
            return "•"
        if self.glyph is Glyph.NUMBER:
            return f"{self.ordinal}."
        return ""


@dataclass(frozen=True)
class PageLayout:
    """Page margins in points."""
    margin_top_pt: float = PAGE_MARGIN_PT
    margin_bottom_pt: float = PAGE_MARGIN_PT
    margin_left_pt: float = PAGE_MARGIN_PT
    margin_right_pt: float = PAGE_MARGIN_PT


@dataclass(frozen=True)
class PrintDocument:
    title: str
    directives: Tuple[StyleDirective, ...] = ()
    layout: PageLayout = field(default_factory=PageLayout)


class PrintExporter:
    """
    Export StructuredDocument to a PrintDocument.

    Usage:
        print_doc = PrintExporter().export(doc)
        DocxDirectiveWriter().write(print_doc, "report.docx")
    """

    def __init__(
        self,
        font_size_pt: float = BODY_FONT_SIZE_PT,
        layout: Optional[PageLayout] = None,
    ):
        self.font_size_pt = font_size_pt
        self.layout = layout or PageLayout()

    def export(self, doc: StructuredDocument) -> PrintDocument:
        directives: List[StyleDirective] = [
            StyleDirective(
                kind=DirectiveKind.TITLE,
                text=doc.title,
                bold=True,
                heading_level=1,
            )
        ]
        directives.extend(
            StyleDirective(kind=DirectiveKind.SPACER, text=" ")
            for _ in range(TITLE_SPACER_COUNT)
        )

        for block in doc.blocks:
            directives.extend(self._block_to_directives(block))

        return PrintDocument(
            title=doc.title,
            directives=tuple(directives),
            layout=self.layout,
        )

    def _block_to_directives(self, block: Block) -> List[StyleDirective]:
        if isinstance(block, HeadingBlock):
            return [StyleDirective(
                kind=DirectiveKind.HEADING,
                text=block.text,
                bold=True,
                heading_level=2,
                space_before_pt=HEADING_SPACE_BEFORE_PT,
                space_after_pt=HEADING_SPACE_AFTER_PT,
            )]

        if isinstance(block, ListBlock):
            glyph = Glyph.NUMBER if block.ordered else Glyph.BULLET
            return [
                StyleDirective(
                    kind=DirectiveKind.LIST_ITEM,
                    text=item,
                    font_size_pt=self.font_size_pt,
                    glyph=glyph,
                    ordinal=index,
                )
                for index, item in enumerate(block.items, start=1)
            ]

        if isinstance(block, ParagraphBlock):
            return [StyleDirective(
                kind=DirectiveKind.PARAGRAPH,
                text=block.text,
                font_size_pt=self.font_size_pt,
                line_spacing=PARAGRAPH_LINE_SPACING,
                space_after_pt=PARAGRAPH_SPACE_AFTER_PT,
            )]

        raise TypeError(f"Unsupported block type: {type(block).__name__}")
