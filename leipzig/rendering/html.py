"""
HTML rendering for gloss documents using Jinja2 templates.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from leipzig.core.constants import WRAPPER_CLASS
from leipzig.core.models import GlossDocument

logger = logging.getLogger(__name__)


def _class_attr(classes) -> str:
    """Join class names into one attribute value, skipping empty names."""
    return " ".join(name for name in classes if name)


def _env(template_dir: Optional[str] = None) -> Environment:
    dir_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(dir_path)),
        autoescape=select_autoescape(["html", "html.j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["class_attr"] = _class_attr
    return env


def render_html(
    document: GlossDocument,
    template_name: str = "gloss.html.j2",
    template_dir: Optional[str] = None,
    wrap: bool = True,
) -> str:
    """
    Serialize a gloss document to HTML.

    Args:
        document: The gloss document to render
        template_name: Template file name inside `template_dir`
        template_dir: Directory holding templates; the packaged ones by default
        wrap: Enclose the fragment in the outer gloss container

    Returns:
        The rendered markup; "" for an empty unwrapped document
    """
    if document.is_empty and not wrap:
        return ""
    env = _env(template_dir)
    template = env.get_template(template_name)
    logger.debug(f"Rendering {len(document.blocks)} block(s) with {template_name}")
    return template.render(
        doc=document,
        wrap=wrap,
        wrapper_classes=document.classes or [WRAPPER_CLASS],
    )
