#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Response Formatting Engine

Turns free-form model output into one structure shared by every output
format.

Stages:
1. Line Classification - blank, heading, ordered/unordered item, paragraph
2. Document Model - merge lines into heading, list and paragraph blocks
3. Export - HTML, inline-styled email HTML, print directives, DOCX
"""

__version__ = "1.0.0"

# Stage 1 & 2: Classification and Model
from .line_classifier import (
    LineKind,
    ListKind,
    ClassifiedLine,
    classify,
    classify_text,
)
from .document_model import (
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    StructuredDocument,
    StructureRenderer,
    render,
)

# Stage 3: Exporters
from .exporters import (
    HtmlExporter,
    EmailHtmlExporter,
    PrintExporter,
    PrintDocument,
    StyleDirective,
    DocxDirectiveWriter,
)

__all__ = [
    # Classification
    "LineKind",
    "ListKind",
    "ClassifiedLine",
    "classify",
    "classify_text",
    # Model
    "HeadingBlock",
    "ListBlock",
    "ParagraphBlock",
    "StructuredDocument",
    "StructureRenderer",
    "render",
    # Export
    "HtmlExporter",
    "EmailHtmlExporter",
    "PrintExporter",
    "PrintDocument",
    "StyleDirective",
    "DocxDirectiveWriter",
]
