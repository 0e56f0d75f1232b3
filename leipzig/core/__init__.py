"""
Core Package.

This package provides configuration, constants and the document models
shared by the processing and rendering stages.
"""

from leipzig.core.config import (
    GlossClasses,
    GlossConfig,
    GlossConfigError,
    coerce_option,
    deep_merge,
    default_options,
)
from leipzig.core.models import (
    GlossDocument,
    GlossLine,
    LineParagraph,
    LineRole,
    Segment,
    Word,
    WordLine,
    WordsBlock,
)

__all__ = [
    # Configuration
    "GlossClasses",
    "GlossConfig",
    "GlossConfigError",
    "coerce_option",
    "deep_merge",
    "default_options",
    # Models
    "GlossDocument",
    "GlossLine",
    "LineParagraph",
    "LineRole",
    "Segment",
    "Word",
    "WordLine",
    "WordsBlock",
]
