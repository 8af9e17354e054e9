"""
Markup state model and pipeline helper

Defines MarkupState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from typing import Callable, Dict, List, Optional, TypeVar
from dataclasses import dataclass, field

from .tokens import Token, TokenKind


MS = TypeVar("MS", bound="MarkupState")


@dataclass
class MarkupState:
    """
    State container for one markify() call (state bus pattern).

    Each stage receives the state, copies it, adds its own fields and
    returns the copy.

    Pipeline stages and their state additions:
        - Initial: text, classes, verbosity
        - text_scan: tokens
        - tokens_render: output

    Attributes:
        text: Source text containing inline markup
        classes: Optional mapping of markup kind to CSS class
        verbosity: Logging verbosity for this call (None = use settings)
        tokens: Scanner output
        output: Rendered string
    """

    text: str = field(default="")
    classes: Optional[Dict[TokenKind, str]] = field(default=None)
    verbosity: Optional[int] = field(default=None)

    # Pipeline state
    tokens: Optional[List[Token]] = field(default=None)
    output: str = field(default="")

    def copy(self: MS) -> MS:
        """
        Creates a shallow copy of the MarkupState instance.

        Returns:
            A new MarkupState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: MarkupState, *stages: Callable[[MarkupState], MarkupState]
) -> MarkupState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (MarkupState) -> MarkupState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting MarkupState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final MarkupState after all transformations

    Example:
        final_state = pipeline(initial_state, text_scan, tokens_render)

    This is equivalent to:
        tokens_render(text_scan(initial_state))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
