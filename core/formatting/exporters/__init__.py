#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Exporters - Export structured documents to various formats.
"""

from .html_exporter import HtmlExporter, EmailHtmlExporter, escape_html
from .print_exporter import (
    PrintExporter,
    PrintDocument,
    PageLayout,
    StyleDirective,
    DirectiveKind,
    Glyph,
)
from .docx_exporter import DocxDirectiveWriter

__all__ = [
    "HtmlExporter",
    "EmailHtmlExporter",
    "escape_html",
    "PrintExporter",
    "PrintDocument",
    "PageLayout",
    "StyleDirective",
    "DirectiveKind",
    "Glyph",
    "DocxDirectiveWriter",
]
