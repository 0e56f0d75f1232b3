"""
Alignment stage: transpose per-line token lists into columns.
"""

from __future__ import annotations

from typing import List, Sequence


def align(lines_tokens: Sequence[Sequence[str]]) -> List[List[str]]:
    """
    Transpose ragged token lists into equal-height columns.

    Column `i` holds token `i` of every line, in line order, with "" where a
    line is shorter. The column count is the longest line's token count.

    Args:
        lines_tokens: One token list per analysis line

    Returns:
        List of columns
    """
    if not lines_tokens:
        return []
    width = max(len(tokens) for tokens in lines_tokens)
    return [
        [tokens[i] if i < len(tokens) else "" for tokens in lines_tokens]
        for i in range(width)
    ]
