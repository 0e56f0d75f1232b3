"""
Core domain models for interlinear gloss blocks.

Defines typed structures for input lines and their roles, tagged cell
segments, and the output tree (line paragraphs, the aligned words block and
its columns) that renderers serialize.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class LineRole(str, Enum):
    """Positional role of an input line within a gloss block."""

    ORIGINAL = "original"
    ANALYSIS = "analysis"
    FREE_TRANSLATION = "free_translation"


class GlossLine(BaseModel):
    """One input row with its position and derived role."""

    index: int
    text: str
    role: LineRole = LineRole.ANALYSIS

    @property
    def is_analysis(self) -> bool:
        return self.role == LineRole.ANALYSIS


class Segment(BaseModel):
    """A piece of cell content: literal text or a tagged abbreviation."""

    text: str
    is_abbr: bool = False
    title: Optional[str] = None
    classes: List[str] = Field(default_factory=list)


class WordLine(BaseModel):
    """One analysis line's cell inside a column."""

    index: int
    classes: List[str] = Field(default_factory=list)
    segments: List[Segment] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


class Word(BaseModel):
    """An aligned column holding one cell per analysis line."""

    classes: List[str] = Field(default_factory=list)
    lines: List[WordLine] = Field(default_factory=list)


class WordsBlock(BaseModel):
    """The aligned columns block inserted before the first analysis line."""

    kind: Literal["words"] = "words"
    tag: str = "div"
    classes: List[str] = Field(default_factory=list)
    words: List[Word] = Field(default_factory=list)


class LineParagraph(BaseModel):
    """A verbatim input line carrying its positional role classes."""

    kind: Literal["line"] = "line"
    index: int
    role: LineRole
    text: str
    classes: List[str] = Field(default_factory=list)
    hidden: bool = False


Block = Union[LineParagraph, WordsBlock]


class GlossDocument(BaseModel):
    """An ordered sequence of block-level nodes for one gloss block."""

    blocks: List[Block] = Field(default_factory=list)
    classes: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def words_block(self) -> Optional[WordsBlock]:
        for block in self.blocks:
            if isinstance(block, WordsBlock):
                return block
        return None

    def paragraphs(self, role: Optional[LineRole] = None) -> List[LineParagraph]:
        """Return line paragraphs in order, optionally filtered by role."""
        return [
            block
            for block in self.blocks
            if isinstance(block, LineParagraph) and (role is None or block.role == role)
        ]
