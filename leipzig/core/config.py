"""
Gloss configuration: defaults, option merging and validation.

A `GlossConfig` is built once per gloss block from the built-in defaults
overlaid with caller options, and is never mutated afterwards.
"""

from __future__ import annotations

import copy
import logging
import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from leipzig.core.constants import (
    ABBREVIATIONS,
    DEFAULT_CLASSES,
    DEFAULT_LEXER,
    DEFAULT_SELECTOR,
)

logger = logging.getLogger(__name__)


class GlossConfigError(ValueError):
    """Raised when gloss options cannot be turned into a valid configuration."""


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two mappings, recursing into nested mappings.

    Values from `override` win at the leaf. Neither input is modified.

    Args:
        base: Mapping providing default values
        override: Mapping whose values take precedence

    Returns:
        A new merged dictionary
    """
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def coerce_option(value: Any) -> Any:
    """Turn literal "true"/"false" strings into booleans; pass anything else through."""
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return value


def default_options() -> Dict[str, Any]:
    """Return a fresh copy of the built-in option defaults."""
    return {
        "selector": DEFAULT_SELECTOR,
        "last_line_free": True,
        "first_line_orig": False,
        "spacing": True,
        "auto_tag": True,
        "lexer": DEFAULT_LEXER,
        "classes": dict(DEFAULT_CLASSES),
        "abbreviations": copy.deepcopy(ABBREVIATIONS),
    }


class GlossClasses(BaseModel):
    """Class names keyed by semantic role."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    glossed: str = DEFAULT_CLASSES["glossed"]
    no_space: str = DEFAULT_CLASSES["no_space"]
    words: str = DEFAULT_CLASSES["words"]
    word: str = DEFAULT_CLASSES["word"]
    spacer: str = DEFAULT_CLASSES["spacer"]
    abbr: str = DEFAULT_CLASSES["abbr"]
    line: str = DEFAULT_CLASSES["line"]
    line_num_prefix: str = DEFAULT_CLASSES["line_num_prefix"]
    original: str = DEFAULT_CLASSES["original"]
    free_translation: str = DEFAULT_CLASSES["free_translation"]
    no_align: str = DEFAULT_CLASSES["no_align"]
    hidden: str = DEFAULT_CLASSES["hidden"]

    def line_number(self, index: int) -> str:
        return f"{self.line_num_prefix}{index}"


class GlossConfig(BaseModel):
    """Configuration for rendering one gloss block."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    selector: str = DEFAULT_SELECTOR
    last_line_free: StrictBool = True
    first_line_orig: StrictBool = False
    spacing: StrictBool = True
    auto_tag: StrictBool = True
    lexer: str = DEFAULT_LEXER
    classes: GlossClasses = Field(default_factory=GlossClasses)
    abbreviations: Dict[str, str] = Field(default_factory=lambda: dict(ABBREVIATIONS))

    @field_validator("lexer")
    @classmethod
    def _check_lexer(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid lexer pattern {value!r}: {exc}") from exc
        return value

    @property
    def compiled_lexer(self) -> "re.Pattern[str]":
        return re.compile(self.lexer, re.DOTALL)

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None) -> "GlossConfig":
        """
        Build a configuration from the defaults overlaid with `options`.

        Nested mappings (`classes`, `abbreviations`) are merged key by key, so
        callers may extend the abbreviation table without restating it.
        Unknown keys are ignored. Boolean options accept only booleans or the
        strings "true"/"false".

        Args:
            options: Partial option mapping, e.g. parsed from tag markup

        Returns:
            A validated, frozen configuration

        Raises:
            GlossConfigError: If the merged options fail validation
        """
        overrides = {str(key): coerce_option(value) for key, value in (options or {}).items()}
        unknown = sorted(set(overrides) - set(cls.model_fields))
        if unknown:
            logger.debug(f"Ignoring unknown gloss options: {', '.join(unknown)}")
        merged = deep_merge(default_options(), overrides)
        try:
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise GlossConfigError(f"Invalid gloss options: {exc}") from exc
