"""
Ingestion utilities: line splitting, positional role classification and
tokenization of analysis lines.
"""

from __future__ import annotations

import re
from typing import List, Union

from leipzig.core.config import GlossConfig
from leipzig.core.constants import DEFAULT_LEXER
from leipzig.core.models import GlossLine, LineRole


def split_lines(text: str) -> List[str]:
    """
    Split a block into lines on line feeds only, dropping one trailing carriage
    return per line.

    Other Unicode line separators stay inside their line. A final line feed
    does not start an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def classify_lines(lines: List[str], config: GlossConfig) -> List[GlossLine]:
    """
    Assign each line its role by position alone.

    Line 0 is the original when `first_line_orig` is set; the last line is the
    free translation when `last_line_free` is set and there are at least two
    lines. Everything else is an analysis line.
    """
    original_index = 0 if config.first_line_orig and lines else None
    free_index = len(lines) - 1 if config.last_line_free and len(lines) >= 2 else None

    result: List[GlossLine] = []
    for idx, raw in enumerate(lines):
        if idx == original_index:
            role = LineRole.ORIGINAL
        elif idx == free_index:
            role = LineRole.FREE_TRANSLATION
        else:
            role = LineRole.ANALYSIS
        result.append(GlossLine(index=idx, text=raw, role=role))
    return result


def lex(text: str, lexer: Union[str, "re.Pattern[str]"] = DEFAULT_LEXER) -> List[str]:
    """
    Split one analysis line into tokens.

    A token is the contents of a `{...}` group (spaces allowed) or a run of
    non-whitespace. With a custom grammar the first non-empty capture group
    is used, or the whole match if the grammar has no groups.
    """
    if text is None or not text.strip():
        return []
    pattern = lexer if isinstance(lexer, re.Pattern) else re.compile(lexer, re.DOTALL)

    tokens: List[str] = []
    for match in pattern.finditer(text):
        groups = match.groups()
        if not groups:
            if match.group(0):
                tokens.append(match.group(0))
            continue
        for group in groups:
            if group:
                tokens.append(group)
                break
    return tokens


def lex_lines(lines: List[GlossLine], config: GlossConfig) -> List[List[str]]:
    """Tokenize every analysis line, in order."""
    lexer = config.compiled_lexer
    return [lex(line.text, lexer) for line in lines if line.is_analysis]
