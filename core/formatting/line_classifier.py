#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line Classifier - Classify single lines of model output.

Stage 1 of the formatting pipeline. Every trimmed line maps to exactly one
kind, checked in this order (first match wins):

1. ""                       -> blank
2. ends with ":"            -> heading
3. "12." + optional spaces  -> ordered list item
4. starts with "-"          -> unordered list item
5. anything else            -> paragraph

Classification is purely syntactic and never looks at neighbouring lines.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class LineKind(Enum):
    """Structural class of a single line."""
    BLANK = "blank"
    HEADING = "heading"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"


class ListKind(Enum):
    """Ordinal kind of a list (item)."""
    ORDERED = "ordered"
    UNORDERED = "unordered"


# Groups: (1) content after the "N." marker
NUMBERED_ITEM_PATTERN = re.compile(r'^[0-9]+\.\s*(.*)$', re.DOTALL)

BULLET_MARKER = "-"
HEADING_SUFFIX = ":"


@dataclass(frozen=True)
class ClassifiedLine:
    """A line together with its kind and the text that survives the marker."""
    kind: LineKind
    text: str = ""
    ordinal: Optional[ListKind] = None  # Set only for LIST_ITEM

    def __repr__(self):
        if self.kind is LineKind.LIST_ITEM:
            return f"<{self.ordinal.value} item: {self.text[:30]}>"
        return f"<{self.kind.value}: {self.text[:30]}>"


BLANK_LINE = ClassifiedLine(kind=LineKind.BLANK)


def classify(line: str) -> ClassifiedLine:
    """
    Classify an already-trimmed line.

    Args:
        line: Line with surrounding whitespace removed

    Returns:
        ClassifiedLine describing the line
    """
    if not line:
        return BLANK_LINE

    if line.endswith(HEADING_SUFFIX):
        return ClassifiedLine(kind=LineKind.HEADING, text=line)

    match = NUMBERED_ITEM_PATTERN.match(line)
    if match:
        return ClassifiedLine(
            kind=LineKind.LIST_ITEM,
            text=match.group(1),
            ordinal=ListKind.ORDERED,
        )

    if line.startswith(BULLET_MARKER):
        return ClassifiedLine(
            kind=LineKind.LIST_ITEM,
            text=line[len(BULLET_MARKER):].strip(),
            ordinal=ListKind.UNORDERED,
        )

    return ClassifiedLine(kind=LineKind.PARAGRAPH, text=line)


def split_lines(raw_text: Optional[str]) -> Iterator[str]:
    """Yield trimmed lines of raw text in their original order."""
    if not raw_text:
        return
    for line in raw_text.split("\n"):
        yield line.strip()


def classify_text(raw_text: Optional[str]) -> Iterator[ClassifiedLine]:
    """Classify every line of raw text."""
    for line in split_lines(raw_text):
        yield classify(line)
