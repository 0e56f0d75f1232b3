"""
Abbreviation tagging: find Leipzig-style gloss abbreviations in a cell and
annotate them with their expanded meaning.

Resolution of a matched code goes through an ordered list of rules; the
first rule returning a description wins, and a code no rule resolves is
still marked as an abbreviation, just without a description.
"""

from __future__ import annotations

import re
from typing import Callable, List, Mapping, Optional

from leipzig.core.config import GlossConfig
from leipzig.core.constants import ABBREVIATION_PATTERN, DEFAULT_CLASSES
from leipzig.core.models import Segment

ABBREVIATION_RE = re.compile(ABBREVIATION_PATTERN)

Rule = Callable[[str, Mapping[str, str]], Optional[str]]


def lookup_verbatim(key: str, abbreviations: Mapping[str, str]) -> Optional[str]:
    """Describe `key` exactly as written."""
    return abbreviations.get(key)


def lookup_negated(key: str, abbreviations: Mapping[str, str]) -> Optional[str]:
    """Describe `NX` as "non-" plus the description of `X`."""
    if key.startswith("N") and len(key) > 1:
        plain = abbreviations.get(key[1:])
        if plain is not None:
            return f"non-{plain}"
    return None


RESOLUTION_RULES: List[Rule] = [lookup_verbatim, lookup_negated]


def describe(key: str, abbreviations: Mapping[str, str]) -> Optional[str]:
    """Return the description of an abbreviation code, or None if unknown."""
    for rule in RESOLUTION_RULES:
        title = rule(key, abbreviations)
        if title is not None:
            return title
    return None


def tag(
    token: str,
    abbreviations: Mapping[str, str],
    abbr_class: str = DEFAULT_CLASSES["abbr"],
) -> List[Segment]:
    """
    Split a token into literal and abbreviation segments.

    "3PL" gives two abbreviations, "3" and "PL"; "dog.NOM" gives the literal
    "dog." followed by the abbreviation "NOM".
    """
    if token is None:
        return []

    segments: List[Segment] = []
    pos = 0
    for match in ABBREVIATION_RE.finditer(token):
        if match.start() > pos:
            segments.append(Segment(text=token[pos : match.start()]))
        key = match.group(0)
        segments.append(
            Segment(
                text=key,
                is_abbr=True,
                title=describe(key, abbreviations),
                classes=[abbr_class],
            )
        )
        pos = match.end()
    if pos < len(token):
        segments.append(Segment(text=token[pos:]))
    return segments


def tag_cell(cell: str, config: GlossConfig) -> List[Segment]:
    """Tag a cell when auto-tagging is on and it has content, else keep it literal."""
    if config.auto_tag and cell.strip():
        return tag(cell, config.abbreviations, abbr_class=config.classes.abbr)
    if not cell:
        return []
    return [Segment(text=cell)]
