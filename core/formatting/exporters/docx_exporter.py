#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DOCX Directive Writer - Realize a PrintDocument as a Word document.

Uses python-docx library for DOCX generation. The file is the intermediate
document of the PDF path: it is converted to PDF, then deleted.

Mapping:
- TITLE      -> "Heading 1", bold
- SPACER     -> empty body paragraph
- HEADING    -> "Heading 2", bold, spacing before/after
- LIST_ITEM  -> "List Bullet" / "List Number" (numbering restarts per list)
- PARAGRAPH  -> body paragraph with font size, line spacing, spacing after
"""

import re
from pathlib import Path
from typing import Optional, Union

from docx import Document
from docx.shared import Pt

from .print_exporter import PrintDocument, StyleDirective, DirectiveKind, Glyph

BULLET_STYLE = "List Bullet"
NUMBER_STYLE = "List Number"

# python-docx caps core properties at 255 characters
CORE_PROPERTY_MAX_LENGTH = 255

# Control characters lxml refuses to serialize (illegal in XML 1.0)
XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


class DocxDirectiveWriter:
    """
    Write a PrintDocument to DOCX format.

    Usage:
        writer = DocxDirectiveWriter()
        path = writer.write(print_doc, "output.docx")
    """

    def __init__(self):
        self.doc: Optional[Document] = None
        self._current_num_id: Optional[int] = None

    def write(self, print_doc: PrintDocument, output_path: Union[str, Path]) -> Path:
        """
        Export PrintDocument to a DOCX file.

        Args:
            print_doc: Directives and page layout
            output_path: Path for output file

        Returns:
            Absolute path to saved file
        """
        self.doc = Document()
        self._current_num_id = None

        self._setup_page_layout(print_doc)
        self.doc.core_properties.title = self._clean(print_doc.title)[:CORE_PROPERTY_MAX_LENGTH]

        for directive in print_doc.directives:
            self._add_directive(directive)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.doc.save(str(output_path))

        return output_path.absolute()

    def _setup_page_layout(self, print_doc: PrintDocument) -> None:
        """Configure page margins."""
        layout = print_doc.layout
        for section in self.doc.sections:
            section.top_margin = Pt(layout.margin_top_pt)
            section.bottom_margin = Pt(layout.margin_bottom_pt)
            section.left_margin = Pt(layout.margin_left_pt)
            section.right_margin = Pt(layout.margin_right_pt)

    def _add_directive(self, directive: StyleDirective) -> None:
        if directive.kind in (DirectiveKind.TITLE, DirectiveKind.HEADING):
            para = self.doc.add_heading(self._clean(directive.text), level=directive.heading_level or 1)
        elif directive.kind is DirectiveKind.LIST_ITEM:
            para = self._add_list_item(directive)
        else:
            para = self.doc.add_paragraph()
            para.add_run(self._clean(directive.text))

        if directive.kind is not DirectiveKind.LIST_ITEM:
            self._current_num_id = None

        self._apply_formatting(para, directive)

    def _add_list_item(self, directive: StyleDirective):
        """Add a list item; the first numbered item of a list starts a fresh count."""
        if directive.glyph is Glyph.BULLET:
            self._current_num_id = None
            return self.doc.add_paragraph(self._clean(directive.text), style=BULLET_STYLE)

        para = self.doc.add_paragraph(self._clean(directive.text), style=NUMBER_STYLE)
        if directive.ordinal == 1 or self._current_num_id is None:
            self._current_num_id = self._new_numbering_instance()
        if self._current_num_id is not None:
            num_pr = para._p.get_or_add_pPr().get_or_add_numPr()
            num_pr.get_or_add_ilvl().val = 0
            num_pr.get_or_add_numId().val = self._current_num_id
        return para

    def _new_numbering_instance(self) -> Optional[int]:
        """
        Create a numbering instance of the "List Number" definition that
        starts at 1. Returns None when the style carries no numbering.
        """
        style_ppr = self.doc.styles[NUMBER_STYLE].element.pPr
        style_num_pr = style_ppr.numPr if style_ppr is not None else None
        if style_num_pr is None or style_num_pr.numId is None:
            return None

        numbering = self.doc.part.numbering_part.element
        style_num = numbering.num_having_numId(style_num_pr.numId.val)
        num = numbering.add_num(style_num.abstractNumId.val)
        num.add_lvlOverride(ilvl=0).add_startOverride(1)
        return num.numId

    @staticmethod
    def _clean(text: Optional[str]) -> str:
        return XML_ILLEGAL_CHARS.sub("", text or "")

    @staticmethod
    def _apply_formatting(para, directive: StyleDirective) -> None:
        for run in para.runs:
            if directive.bold:
                run.font.bold = True
            if directive.font_size_pt is not None:
                run.font.size = Pt(directive.font_size_pt)

        pf = para.paragraph_format
        if directive.space_before_pt is not None:
            pf.space_before = Pt(directive.space_before_pt)
        if directive.space_after_pt is not None:
            pf.space_after = Pt(directive.space_after_pt)
        if directive.line_spacing is not None:
            pf.line_spacing = directive.line_spacing
