#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Model - Format-neutral structure of a model response.

Stage 2 of the formatting pipeline:
- Consume classified lines in a single pass
- Merge consecutive list items of the same kind into one list block
- Produce an immutable StructuredDocument shared by every exporter
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple, Union, Dict, Any

from .line_classifier import LineKind, ListKind, ClassifiedLine, classify_text


# =============================================================================
# BLOCKS
# =============================================================================

@dataclass(frozen=True)
class HeadingBlock:
    """A line ending with a colon."""
    text: str


@dataclass(frozen=True)
class ListBlock:
    """A maximal run of list items sharing the same ordinal kind."""
    kind: ListKind
    items: Tuple[str, ...] = ()

    @property
    def ordered(self) -> bool:
        return self.kind is ListKind.ORDERED

    def __repr__(self):
        return f"<List {self.kind.value}: {len(self.items)} items>"


@dataclass(frozen=True)
class ParagraphBlock:
    """Any other non-blank line."""
    text: str


Block = Union[HeadingBlock, ListBlock, ParagraphBlock]


# =============================================================================
# DOCUMENT
# =============================================================================

@dataclass(frozen=True)
class StructuredDocument:
    """
    Ordered blocks of one model response plus the request it answers.

    Built once per request by StructureRenderer and read by exactly one
    exporter. Two renders of the same text compare equal.
    """
    blocks: Tuple[Block, ...] = ()
    agent_name: str = ""
    extra_context: str = ""

    @property
    def title(self) -> str:
        return f"{self.agent_name} - {self.extra_context}"

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    def to_dict(self) -> Dict[str, Any]:
        """Block statistics, used for logging."""
        lists = [b for b in self.blocks if isinstance(b, ListBlock)]
        return {
            "agent_name": self.agent_name,
            "blocks": len(self.blocks),
            "headings": sum(isinstance(b, HeadingBlock) for b in self.blocks),
            "paragraphs": sum(isinstance(b, ParagraphBlock) for b in self.blocks),
            "lists": len(lists),
            "list_items": sum(len(b.items) for b in lists),
        }


# =============================================================================
# RENDERER
# =============================================================================

@dataclass
class _OpenList:
    kind: ListKind
    items: List[str] = field(default_factory=list)

    def close(self) -> ListBlock:
        return ListBlock(kind=self.kind, items=tuple(self.items))


class StructureRenderer:
    """
    Build a StructuredDocument from raw model output.

    The only state is the list currently being collected. It is local to
    each render() call, so one renderer may be shared freely.

    Usage:
        doc = StructureRenderer().render(text, agent_name="SA")
    """

    def render(
        self,
        raw_text: Optional[str],
        agent_name: str = "",
        extra_context: str = "",
    ) -> StructuredDocument:
        """
        Render raw text into blocks.

        Args:
            raw_text: Model response; None is treated as empty
            agent_name: Requesting agent, used for titling
            extra_context: Caller context, used for titling

        Returns:
            StructuredDocument (possibly with no blocks)
        """
        blocks: List[Block] = []
        open_list: Optional[_OpenList] = None

        for line in classify_text(raw_text):
            if line.kind is LineKind.LIST_ITEM:
                if open_list is None or open_list.kind is not line.ordinal:
                    self._close(open_list, blocks)
                    open_list = _OpenList(kind=line.ordinal)
                open_list.items.append(line.text)
                continue

            # Any non-list line ends the open list first
            self._close(open_list, blocks)
            open_list = None

            block = self._to_block(line)
            if block is not None:
                blocks.append(block)

        self._close(open_list, blocks)

        return StructuredDocument(
            blocks=tuple(blocks),
            agent_name=agent_name,
            extra_context=extra_context,
        )

    @staticmethod
    def _close(open_list: Optional[_OpenList], blocks: List[Block]) -> None:
        if open_list is not None and open_list.items:
            blocks.append(open_list.close())

    @staticmethod
    def _to_block(line: ClassifiedLine) -> Optional[Block]:
        if line.kind is LineKind.HEADING:
            return HeadingBlock(text=line.text)
        if line.kind is LineKind.PARAGRAPH:
            return ParagraphBlock(text=line.text)
        return None


def render(
    raw_text: Optional[str],
    agent_name: str = "",
    extra_context: str = "",
) -> StructuredDocument:
    """Module-level shortcut for StructureRenderer().render()."""
    return StructureRenderer().render(raw_text, agent_name, extra_context)
