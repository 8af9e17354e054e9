"""
Models package for chatmarkup

Contains data structures and type definitions for the markup pipeline.
"""

from .tokens import (
    TokenKind,
    Token,
    MARKUP_CHARS,
    DEFAULT_CLASSES,
    MalformedTokenStreamError,
    kind_isMarkup,
)
from .state import MarkupState, pipeline

__all__ = [
    "TokenKind",
    "Token",
    "MARKUP_CHARS",
    "DEFAULT_CLASSES",
    "MalformedTokenStreamError",
    "kind_isMarkup",
    "MarkupState",
    "pipeline",
]
