"""
markify(): scanner and renderer chained into one call

The call is a two-stage pipeline over a MarkupState:

    text_scan      text   -> tokens
    tokens_render  tokens -> output
"""

from contextvars import copy_context
from typing import Dict, Optional

from ..models.state import MarkupState, pipeline
from ..models.tokens import TokenKind
from .log import state_connectToLogger
from .renderer import render
from .scanner import scan


def text_scan(inputstate: MarkupState) -> MarkupState:
    """Scan state.text into state.tokens."""
    state = inputstate.copy()
    state_connectToLogger(state)
    state.tokens = scan(state.text)
    return state


def tokens_render(inputstate: MarkupState) -> MarkupState:
    """Render state.tokens into state.output."""
    state = inputstate.copy()
    state_connectToLogger(state)
    state.output = render(state.tokens or [], state.classes)
    return state


def markify(
    text: str,
    classes: Optional[Dict[TokenKind, str]] = None,
    verbosity: Optional[int] = None,
) -> str:
    """
    Convert text with markup to HTML.

    Args:
        text: Plain text with *bold*, _italic_ and ~strikethrough~ markup
        classes: Optional mapping from markup kind to CSS class
        verbosity: Optional logging verbosity for this call only

    Returns:
        HTML string; content is not escaped

    Example:
        >>> markify("a *b* c")
        'a <span class="text-bold">b</span> c'
    """
    initial = MarkupState(text=text, classes=classes, verbosity=verbosity)
    # The connected state must not outlive this call
    final = copy_context().run(pipeline, initial, text_scan, tokens_render)
    return final.output
