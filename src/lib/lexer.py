"""
Pygments lexer for chatmarkup source

Highlights the raw markup source (before rendering), using the same
scanner that drives the renderer, so the highlighted delimiters are exactly
the ones markify() would act on.

Token types:
- Text: Plain text, including URLs and non-boundary delimiters
- Text.Whitespace: Line breaks
- Generic.Strong: * delimiters
- Generic.Emph: _ delimiters
- Generic.Deleted: ~ delimiters
"""

from typing import Dict, Iterator, Tuple

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.token import Generic, Text, _TokenType

from ..models.tokens import MARKUP_CHARS, TokenKind
from .scanner import scan


TOKEN_STYLES: Dict[TokenKind, _TokenType] = {
    TokenKind.TEXT: Text,
    TokenKind.NEWLINE: Text.Whitespace,
    TokenKind.ASTERISK: Generic.Strong,
    TokenKind.UNDERSCORE: Generic.Emph,
    TokenKind.TILDE: Generic.Deleted,
}


class MarkupLexer(Lexer):
    """
    Lexer for *bold*, _italic_ and ~strikethrough~ chat markup

    Example:
        hi *there*

    Tokens:
        hi  → Text
        *   → Generic.Strong
        there → Text
        *   → Generic.Strong
    """

    name = 'Chat markup'
    aliases = ['chatmarkup', 'cmu']
    filenames = ['*.cmu']

    def get_tokens_unprocessed(self, text: str) -> Iterator[Tuple[int, _TokenType, str]]:
        offset = 0
        for token in scan(text):
            if token.kind is TokenKind.TEXT:
                value = token.value
            elif token.kind is TokenKind.NEWLINE:
                value = '\n'
            else:
                value = MARKUP_CHARS[token.kind]
            yield offset, TOKEN_STYLES[token.kind], value
            offset += len(value)


def get_lexer() -> MarkupLexer:
    """
    Get the MarkupLexer instance

    Returns:
        MarkupLexer instance ready for use with Pygments
    """
    return MarkupLexer()


def markup_highlight(text: str, cssclass: str = "highlight") -> str:
    """
    Render markup source as highlighted HTML

    Args:
        text: Raw markup source
        cssclass: CSS class of the wrapping <div>

    Returns:
        HTML produced by Pygments' HtmlFormatter
    """
    return highlight(text, get_lexer(), HtmlFormatter(cssclass=cssclass))
