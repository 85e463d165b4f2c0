#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HTML Exporters - Export StructuredDocument to HTML strings.

HtmlExporter produces semantic markup for the browser panel (styled by the
front end's stylesheet). EmailHtmlExporter produces the same structure and
text with inline styles, since mail clients ignore external stylesheets.

Output shape:
    <div class="agent-response">
      <h1>AGENT - CONTEXT</h1>
      <h2>..</h2> <ol><li>..</li></ol> <ul><li>..</li></ul> <p>..</p>
      <div class="footer"><p>FOOTER</p><p>TIMESTAMP</p></div>
    </div>

The returned string never contains a newline.
"""

import html
from datetime import datetime
from typing import Dict, List, Optional

from config.constants import FOOTER_TEXT, TIMESTAMP_FORMAT

from ..document_model import (
    StructuredDocument,
    Block,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)


def escape_html(text: str) -> str:
    """Escape &, <, >, " and '."""
    return html.escape(text, quote=True)


class HtmlExporter:
    """
    Export StructuredDocument to a single-line HTML fragment.

    Usage:
        exporter = HtmlExporter()
        fragment = exporter.export(doc)
    """

    # Inline style per tag; empty for the browser panel
    INLINE_STYLES: Dict[str, str] = {}

    def __init__(
        self,
        footer_text: str = FOOTER_TEXT,
        timestamp_format: str = TIMESTAMP_FORMAT,
    ):
        self.footer_text = footer_text
        self.timestamp_format = timestamp_format

    def export(
        self,
        doc: StructuredDocument,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """
        Export document to HTML.

        Args:
            doc: Rendered document
            generated_at: Footer timestamp (default: now)

        Returns:
            HTML string without newlines
        """
        generated_at = generated_at or datetime.now()

        parts: List[str] = [
            self._open("div", "agent-response"),
            self._element("h1", doc.title),
        ]
        for block in doc.blocks:
            parts.append(self._block_to_html(block))

        parts.append(self._open("div", "footer"))
        parts.append(self._element("p", self.footer_text, "footer-line"))
        parts.append(self._element("p", generated_at.strftime(self.timestamp_format), "footer-line"))
        parts.append("</div></div>")

        return "".join(parts).replace("\r", "").replace("\n", "")

    def _block_to_html(self, block: Block) -> str:
        if isinstance(block, HeadingBlock):
            return self._element("h2", block.text)

        if isinstance(block, ListBlock):
            tag = "ol" if block.ordered else "ul"
            items = "".join(self._element("li", item) for item in block.items)
            return f"{self._open(tag)}{items}</{tag}>"

        if isinstance(block, ParagraphBlock):
            return self._element("p", block.text)

        raise TypeError(f"Unsupported block type: {type(block).__name__}")

    def _element(self, tag: str, text: str, style_key: Optional[str] = None) -> str:
        return f"{self._open(tag, style_key=style_key)}{escape_html(text)}</{tag}>"

    def _open(self, tag: str, css_class: Optional[str] = None, style_key: Optional[str] = None) -> str:
        attrs = ""
        if css_class:
            attrs += f' class="{css_class}"'
        style = self.INLINE_STYLES.get(style_key or css_class or tag)
        if style:
            attrs += f' style="{style}"'
        return f"<{tag}{attrs}>"


class EmailHtmlExporter(HtmlExporter):
    """
    HtmlExporter with inline styles for mail clients.

    Structure and text are identical to HtmlExporter output.
    """

    INLINE_STYLES: Dict[str, str] = {
        "agent-response": (
            "font-family: Arial, Helvetica, sans-serif; color: #1a1a1a; "
            "max-width: 720px; margin: 0 auto; padding: 24px; line-height: 1.6;"
        ),
        "h1": (
            "font-size: 24px; color: #0f172a; border-bottom: 2px solid #2563eb; "
            "padding-bottom: 8px; margin: 0 0 16px 0;"
        ),
        "h2": "font-size: 18px; color: #1e3a8a; margin: 24px 0 8px 0;",
        "ol": "margin: 0 0 12px 0; padding-left: 24px;",
        "ul": "margin: 0 0 12px 0; padding-left: 24px;",
        "li": "font-size: 14px; margin-bottom: 6px;",
        "p": "font-size: 14px; margin: 0 0 12px 0;",
        "footer": (
            "margin-top: 32px; padding-top: 12px; border-top: 1px solid #e2e8f0; "
            "color: #64748b; font-size: 12px;"
        ),
        "footer-line": "font-size: 12px; color: #64748b; margin: 0 0 4px 0;",
    }
