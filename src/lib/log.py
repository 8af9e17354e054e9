"""
Verbosity-gated Loguru logging for the scanner and renderer.

chatmarkup is a library: it never adds or removes Loguru sinks. Messages go
to whatever handlers the application has configured (Loguru's stock stderr
handler if it has configured none), and only when the active verbosity
asks for them.

The active verbosity is taken from the MarkupState connected to the current
context, so markify(..., verbosity=3) can trace a single call. Bare scan()
and render() calls use appsettings.verbosity (CHATMARKUP_VERBOSITY), which
is 0 by default, so the library is silent unless asked.

Usage:
    from chatmarkup.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Rendered 12 tokens with 3 spans", level=2)
    LOG("Resolved asterisk span: 'bold'", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar

from ..config import appsettings

# MarkupState of the markify() call running in this context, if any
_markup_state: ContextVar[Optional[Any]] = ContextVar('markup_state', default=None)


def state_connectToLogger(state: Any) -> None:
    """
    Make a MarkupState's verbosity the active one for this context.

    markify() stages call this on entry; markify() itself runs them in a
    copied context, so the connection ends with the call.

    Args:
        state: MarkupState instance with verbosity attribute
    """
    _markup_state.set(state)


def verbosity_current() -> int:
    """Return the verbosity of the connected state, or the configured default."""
    state = _markup_state.get()
    if state is not None and getattr(state, 'verbosity', None) is not None:
        return state.verbosity
    return appsettings.verbosity


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Emit a debug record if the active verbosity is at least `level`.

    Args:
        message: Log message
        level: 1=normal, 2=per-call summaries, 3=per-span trace
        **kwargs: Extra Loguru arguments

    The record is attributed to the caller, so {function} and {name} in an
    application's format show e.g. Renderer.span_push in
    chatmarkup.lib.renderer.
    """
    if verbosity_current() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
