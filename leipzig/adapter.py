"""
Block-tag adapter: parse `key: value` option markup from a template tag
invocation and render the enclosed gloss block to wrapped HTML.

Usage in a template::

    {% gloss first_line_orig: true %}
    the dog sees the cat
    DET dog.NOM see.3SG DET cat.ACC
    the dog sees the cat
    {% endgloss %}
"""

from __future__ import annotations

import re
from typing import Any, Dict

from leipzig.core.config import GlossConfig, coerce_option
from leipzig.core.models import GlossDocument
from leipzig.processing.layout import gloss_block
from leipzig.rendering.html import render_html

OPTION_RE = re.compile(r"(\w+)\s*:\s*(\w+)")


def parse_options(markup: str) -> Dict[str, Any]:
    """Extract `key: value` pairs from tag markup, turning "true"/"false" into booleans."""
    if not markup:
        return {}
    return {key: coerce_option(value) for key, value in OPTION_RE.findall(markup)}


def build_document(content: str, markup: str = "") -> GlossDocument:
    """Build the gloss document for a tag's content and option markup."""
    config = GlossConfig.from_options(parse_options(markup))
    return gloss_block(content.strip(), config)


def render_gloss_tag(content: str, markup: str = "") -> str:
    """Render a whole gloss tag: options from `markup`, lines from `content`."""
    return render_html(build_document(content, markup), wrap=True)
