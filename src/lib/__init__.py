"""
chatmarkup - Inline chat markup to HTML

Renders *bold*, _italic_ and ~strikethrough~ markup in plain text as
styled <span> elements.
"""

__version__ = "1.0.0"

from .scanner import Scanner, scan
from .renderer import Renderer, render
from .markup import markify
from .lexer import MarkupLexer, markup_highlight
from .log import LOG, state_connectToLogger

__all__ = [
    "Scanner",
    "scan",
    "Renderer",
    "render",
    "markify",
    "MarkupLexer",
    "markup_highlight",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
