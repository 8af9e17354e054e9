"""
Renderer for scanned markup tokens

Turns the scanner's token list into HTML using a single left-to-right pass
over an explicit stack.

Algorithm:
- TEXT tokens are pushed as-is
- The first delimiter of a kind is pushed as an opener
- The next delimiter of the same kind pops the stack down to that opener;
  everything popped becomes the content of one <span>, which is pushed
  back as a single TEXT token. Other delimiters popped on the way degrade
  to their literal characters.
- An opener immediately followed by its closer (e.g. "**") is kept as the
  doubled literal, never as an empty span
- NEWLINE flushes the stack, so markup never spans lines

Presence flags record which kinds have an open delimiter on the stack, so
the stack is only searched when a match is certain to be found.

Example:
    >>> render(scan("hello *bold _and italic_*"))
    'hello <span class="text-bold">bold <span class="text-italic">and italic</span></span>'
"""

from typing import Dict, Iterable, List, Optional

from ..config import appsettings
from ..models.tokens import (
    MARKUP_CHARS,
    MalformedTokenStreamError,
    Token,
    TokenKind,
    kind_isMarkup,
)
from .log import LOG


class Renderer:
    """
    Stack-based matcher turning tokens into styled spans

    Handles:
    - Nested spans for well-formed input
    - Literal fallback for unmatched, crossed and doubled delimiters
    - Per-line reset of open markup

    One Renderer instance owns one stack; use render() for the common case.
    """

    def __init__(self, classes: Optional[Dict[TokenKind, str]] = None):
        """
        Initialize renderer with a CSS class mapping

        Args:
            classes: Mapping of markup kind to CSS class. Used as given (not
                     merged with the defaults); None uses the configured
                     defaults.

        Attributes:
            classes: Active kind -> CSS class mapping
            stack: Open delimiters and rendered text for the current line
            present: Presence flag per markup kind
            span_count: Number of spans produced so far
        """
        self.classes = classes if classes is not None else appsettings.classes_default()
        self.stack: List[Token] = []
        self.present: Dict[TokenKind, bool] = {kind: False for kind in MARKUP_CHARS}
        self.span_count = 0

    def presence_reset(self) -> None:
        for kind in self.present:
            self.present[kind] = False

    def stack_pop(self) -> Token:
        """Pop the stack, raising MalformedTokenStreamError if it's empty."""
        if not self.stack:
            raise MalformedTokenStreamError("Stack is empty")
        return self.stack.pop()

    def stack_consume(self) -> str:
        """
        Flatten the whole stack into a string and clear it

        TEXT tokens contribute their value, leftover delimiters their
        literal character.

        Raises:
            MalformedTokenStreamError: If a NEWLINE or unknown token is on
                                       the stack
        """
        parts = []
        for token in self.stack:
            if token.kind is TokenKind.TEXT:
                parts.append(token.value)
            elif kind_isMarkup(token.kind):
                parts.append(MARKUP_CHARS[token.kind])
            elif token.kind is TokenKind.NEWLINE:
                raise MalformedTokenStreamError("Unexpected newline token on stack")
            else:
                raise MalformedTokenStreamError(f"Unknown token on stack: {token!r}")
        self.stack.clear()
        return ''.join(parts)

    def span_push(self, text_parts: List[str], kind: TokenKind) -> None:
        """
        Wrap popped text parts in a span and push it as one TEXT token

        Args:
            text_parts: Content collected in pop order (last part first)
            kind: Markup kind selecting the CSS class
        """
        css_class = self.classes[kind]
        content = ''.join(reversed(text_parts))
        self.stack.append(Token(TokenKind.TEXT, f'<span class="{css_class}">{content}</span>'))
        self.span_count += 1
        LOG(f"Resolved {kind.value} span: {content!r}", level=3)

    def markup_close(self, kind: TokenKind) -> None:
        """
        Pop the stack down to the open delimiter of this kind

        Delimiters of other kinds found on the way lose their presence flag
        and become literal characters inside the span.
        """
        text_parts: List[str] = []
        while True:
            top = self.stack_pop()
            if top.kind is TokenKind.TEXT:
                text_parts.append(top.value)
            elif top.kind is kind:
                break
            elif kind_isMarkup(top.kind):
                text_parts.append(MARKUP_CHARS[top.kind])
                self.present[top.kind] = False
            else:
                raise MalformedTokenStreamError(f"Unknown token on stack: {top!r}")

        self.present[kind] = False
        if text_parts:
            self.span_push(text_parts, kind)
        else:
            # Opener and closer were adjacent (e.g. "**hello"), keep them as text
            LOG(f"Empty {kind.value} pair kept as literal", level=3)
            self.stack.append(Token(TokenKind.TEXT, MARKUP_CHARS[kind] * 2))

    def token_process(self, token: Token) -> None:
        """Apply one token to the stack."""
        kind = token.kind
        if kind is TokenKind.TEXT:
            if not isinstance(token.value, str):
                raise MalformedTokenStreamError(f"Text token without text: {token!r}")
            self.stack.append(token)
        elif kind_isMarkup(kind):
            if self.present[kind]:
                self.markup_close(kind)
            else:
                self.stack.append(token)
                self.present[kind] = True
        elif kind is TokenKind.NEWLINE:
            # Don't apply formatting across newlines
            self.stack.append(Token(TokenKind.TEXT, self.stack_consume() + '\n'))
            self.presence_reset()
        else:
            raise MalformedTokenStreamError(f"Invalid token kind: {kind!r}")

    def render(self, tokens: Iterable[Token]) -> str:
        """
        Render a token stream to HTML

        Args:
            tokens: Tokens in document order, normally from scan()

        Returns:
            Rendered string; unmatched delimiters appear literally

        Raises:
            MalformedTokenStreamError: For hand-built streams the scanner
                                       could never produce
            KeyError: If a span is resolved for a kind missing from classes
        """
        count = 0
        for token in tokens:
            self.token_process(token)
            count += 1
        output = self.stack_consume()
        self.presence_reset()
        LOG(f"Rendered {count} tokens with {self.span_count} spans", level=2)
        return output


def render(tokens: Iterable[Token], classes: Optional[Dict[TokenKind, str]] = None) -> str:
    """
    Convert a list of tokens to HTML.

    Optionally, a mapping from markup kinds to CSS class strings can be
    specified.
    """
    return Renderer(classes).render(tokens)
