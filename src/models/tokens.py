"""
Token data model

Type-safe structures shared by the scanner and the renderer: the closed set
of token kinds, the token value itself, the literal characters and default
CSS classes for the three markup kinds, and the error raised for token
streams the scanner could never have produced.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional


class TokenKind(Enum):
    """
    Kinds of tokens produced by the scanner

    The set is closed: plain text, a line break, and one kind per markup
    delimiter character.
    """
    TEXT = "text"
    NEWLINE = "newline"
    ASTERISK = "asterisk"      # *bold*
    UNDERSCORE = "underscore"  # _italic_
    TILDE = "tilde"            # ~strikethrough~


@dataclass(frozen=True)
class Token:
    """
    A single scanner token

    Attributes:
        kind: Token kind
        value: Text payload. Only set for TokenKind.TEXT, where it is never
               empty; None for every other kind.

    Example:
        For source "hi *there*":
        [Token(TokenKind.TEXT, "hi "),
         Token(TokenKind.ASTERISK),
         Token(TokenKind.TEXT, "there"),
         Token(TokenKind.ASTERISK)]
    """
    kind: TokenKind
    value: Optional[str] = None


# Literal character for each markup kind
MARKUP_CHARS: Dict[TokenKind, str] = {
    TokenKind.ASTERISK: "*",
    TokenKind.UNDERSCORE: "_",
    TokenKind.TILDE: "~",
}

# CSS classes used when the caller supplies no mapping
DEFAULT_CLASSES: Dict[TokenKind, str] = {
    TokenKind.ASTERISK: "text-bold",
    TokenKind.UNDERSCORE: "text-italic",
    TokenKind.TILDE: "text-strike",
}


def kind_isMarkup(kind: TokenKind) -> bool:
    """Return whether the token kind is one of the three markup delimiters."""
    return kind in MARKUP_CHARS


class MalformedTokenStreamError(ValueError):
    """
    Raised when the renderer is handed a token stream that breaks the
    scanner's emission contract (empty stack on match, a newline left on
    the stack, an unknown token kind, or a text token without text).

    Never raised for anything produced by scan().
    """
