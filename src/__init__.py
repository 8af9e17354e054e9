"""
chatmarkup - Inline chat markup to HTML

Renders *bold*, _italic_ and ~strikethrough~ markup in plain text as
styled <span> elements, leaving URLs and unmatched delimiters untouched.
"""

__version__ = "1.0.0"

from .lib import scan, render, markify, MarkupLexer, LOG, state_connectToLogger
from .models import Token, TokenKind, MARKUP_CHARS, DEFAULT_CLASSES, MalformedTokenStreamError

__all__ = [
    "scan",
    "render",
    "markify",
    "Token",
    "TokenKind",
    "MARKUP_CHARS",
    "DEFAULT_CLASSES",
    "MalformedTokenStreamError",
    "MarkupLexer",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
