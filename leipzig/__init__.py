"""
Leipzig: interlinear glossed text rendering.

This package turns plain multi-line gloss blocks (original line, morpheme
analysis lines, free translation) into aligned, abbreviation-annotated
structure that can be serialized to HTML.
"""

__version__ = "0.1.0"
