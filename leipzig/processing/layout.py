"""
Layout stage: build the aligned words block and assemble the full gloss
document from classified lines.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from leipzig.core.config import GlossConfig
from leipzig.core.constants import WRAPPER_CLASS
from leipzig.core.models import (
    GlossDocument,
    GlossLine,
    LineParagraph,
    LineRole,
    Word,
    WordLine,
    WordsBlock,
)
from leipzig.processing.align import align
from leipzig.processing.ingest import classify_lines, lex_lines, split_lines
from leipzig.processing.tag import tag_cell

logger = logging.getLogger(__name__)


def format_columns(
    aligned: List[List[str]],
    config: GlossConfig,
    tag_name: str = "div",
    lines_offset: int = 0,
) -> WordsBlock:
    """
    Turn aligned columns into a words block.

    Each column becomes a `Word` with one `WordLine` per analysis line. Line
    number classes start at `lines_offset` so they match the position of the
    analysis lines in the whole block.

    Args:
        aligned: Columns as produced by `align`
        config: Gloss configuration
        tag_name: Element name for the block container
        lines_offset: Index of the first analysis line in the input

    Returns:
        The words block, one word per column
    """
    classes = config.classes
    words: List[Word] = []

    for column in aligned:
        word_lines = []
        for row, cell in enumerate(column):
            index = lines_offset + row
            word_lines.append(
                WordLine(
                    index=index,
                    classes=[classes.line, classes.line_number(index)],
                    segments=tag_cell(cell, config),
                )
            )

        word_classes = [classes.word]
        if not config.spacing and all(not cell.strip() for cell in column):
            word_classes.append(classes.spacer)
        words.append(Word(classes=word_classes, lines=word_lines))

    return WordsBlock(tag=tag_name, classes=[classes.words], words=words)


def _paragraph(line: GlossLine, config: GlossConfig, hidden: bool = False) -> LineParagraph:
    classes = config.classes
    line_classes = [classes.line, classes.line_number(line.index)]
    if line.role == LineRole.ORIGINAL:
        line_classes.append(classes.original)
    elif line.role == LineRole.FREE_TRANSLATION:
        line_classes.append(classes.free_translation)
    if hidden:
        line_classes.append(classes.hidden)
    return LineParagraph(
        index=line.index,
        role=line.role,
        text=line.text,
        classes=line_classes,
        hidden=hidden,
    )


def _wrapper_classes(config: GlossConfig) -> List[str]:
    wrapper = [WRAPPER_CLASS, config.classes.glossed]
    if not config.spacing:
        wrapper.append(config.classes.no_space)
    return wrapper


def gloss_block(text: str, config: Optional[GlossConfig] = None, tag_name: str = "div") -> GlossDocument:
    """
    Build the gloss document for one block of text.

    The original line (if any) and the free translation (if any) are kept
    verbatim. The aligned words block goes where the first analysis line
    stood, and every analysis line is also kept verbatim but marked hidden.

    Args:
        text: Raw multi-line gloss block
        config: Gloss configuration; defaults when omitted
        tag_name: Element name for the words block container

    Returns:
        The structured gloss document
    """
    config = config or GlossConfig()
    if not text or not text.strip():
        return GlossDocument()

    lines = classify_lines(split_lines(text), config)
    aligned = align(lex_lines(lines, config))
    wrapper = _wrapper_classes(config)

    if not aligned:
        logger.debug(f"No analysis tokens in {len(lines)} line(s); emitting plain paragraphs")
        return GlossDocument(blocks=[_paragraph(line, config) for line in lines], classes=wrapper)

    analysis = [line for line in lines if line.is_analysis]
    first_analysis = analysis[0].index
    words = format_columns(aligned, config, tag_name=tag_name, lines_offset=first_analysis)
    logger.debug(
        f"Aligned {len(analysis)} analysis line(s) into {len(words.words)} column(s) "
        f"starting at line {first_analysis}"
    )

    blocks = []
    for line in lines:
        if not line.is_analysis:
            blocks.append(_paragraph(line, config))
            continue
        if line.index == first_analysis:
            blocks.append(words)
        blocks.append(_paragraph(line, config, hidden=True))

    return GlossDocument(blocks=blocks, classes=wrapper)
