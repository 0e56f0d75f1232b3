"""
Command-line interface: parse, render, abbreviations.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from leipzig.adapter import parse_options
from leipzig.core.config import GlossConfig, GlossConfigError
from leipzig.core.constants import ABBREVIATIONS
from leipzig.core.models import LineRole
from leipzig.processing.layout import gloss_block
from leipzig.rendering.html import render_html

app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_config(
    options: Optional[str],
    first_line_orig: Optional[bool],
    last_line_free: Optional[bool],
    spacing: Optional[bool],
    auto_tag: Optional[bool],
) -> GlossConfig:
    # Flags given on the command line win over the option markup
    opts: Dict[str, Any] = parse_options(options or "")
    flags = {
        "first_line_orig": first_line_orig,
        "last_line_free": last_line_free,
        "spacing": spacing,
        "auto_tag": auto_tag,
    }
    opts.update({key: value for key, value in flags.items() if value is not None})
    try:
        return GlossConfig.from_options(opts)
    except GlossConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)


@app.command()
def parse(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    options: Optional[str] = typer.Option(None, "--options", help="Option markup, e.g. 'first_line_orig: true'"),
    first_line_orig: Optional[bool] = typer.Option(None, "--first-line-orig/--no-first-line-orig"),
    last_line_free: Optional[bool] = typer.Option(None, "--last-line-free/--no-last-line-free"),
) -> None:
    config = _load_config(options, first_line_orig, last_line_free, None, None)
    text = input_path.read_text(encoding="utf-8")
    doc = gloss_block(text.strip(), config)
    num_lines = len(doc.paragraphs())
    num_analysis = len(doc.paragraphs(LineRole.ANALYSIS))
    words = doc.words_block
    num_columns = len(words.words) if words else 0
    typer.echo(f"Lines: {num_lines}; Analysis lines: {num_analysis}; Columns: {num_columns}")


@app.command()
def render(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write HTML here instead of stdout"),
    options: Optional[str] = typer.Option(None, "--options", help="Option markup, e.g. 'first_line_orig: true'"),
    first_line_orig: Optional[bool] = typer.Option(None, "--first-line-orig/--no-first-line-orig"),
    last_line_free: Optional[bool] = typer.Option(None, "--last-line-free/--no-last-line-free"),
    spacing: Optional[bool] = typer.Option(None, "--spacing/--no-spacing"),
    auto_tag: Optional[bool] = typer.Option(None, "--auto-tag/--no-auto-tag"),
    wrap: bool = typer.Option(True, "--wrap/--no-wrap", help="Enclose output in the gloss container"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    _setup_logging(verbose)
    config = _load_config(options, first_line_orig, last_line_free, spacing, auto_tag)
    text = input_path.read_text(encoding="utf-8")
    doc = gloss_block(text.strip(), config)
    html = render_html(doc, wrap=wrap)
    if output is None:
        typer.echo(html, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    logger.info(f"Wrote {output}")


@app.command()
def abbreviations(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter codes and descriptions"),
) -> None:
    needle = search.lower() if search else None
    for code, description in ABBREVIATIONS.items():
        if needle and needle not in code.lower() and needle not in description.lower():
            continue
        typer.echo(f"{code}\t{description}")


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
