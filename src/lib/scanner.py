"""
Scanner for inline *bold*, _italic_ and ~strikethrough~ markup

Turns plain text into a flat list of tokens for the renderer.

Rules:
- A delimiter character is markup only if the character before it OR the
  character after it is a boundary (whitespace, common punctuation, quotes,
  brackets, another delimiter, or the start/end of the text)
- Anything that starts like scheme:// is copied verbatim up to the first
  character not allowed in a URL (RFC 3986), so delimiters inside links
  stay literal
- A newline always ends the current text run and becomes its own token

The token list is lossless: joining text values, newlines and delimiter
characters gives back the input.

Example:
    >>> scan("hello *there*!")
    [Token(TokenKind.TEXT, 'hello '), Token(TokenKind.ASTERISK),
     Token(TokenKind.TEXT, 'there'), Token(TokenKind.ASTERISK),
     Token(TokenKind.TEXT, '!')]
"""

import re
from typing import Dict, List, Optional

from ..models.tokens import Token, TokenKind
from .log import LOG


# Characters next to which a delimiter may act as markup. Whitespace is the
# ECMAScript \s set: U+FEFF is a boundary, U+001C-U+001F and U+0085 are not.
BOUNDARY_PATTERN = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
    r".,!?¡¿‽⸮;:&(){}\[\]⟨⟩‹›«»'\"‘’“”*~\-_…⋯᠁]"
)

# Characters that may appear in an URL according to RFC 3986:
# ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~:/?#[]@!$&'()*+,;=%
URL_CHAR_PATTERN = re.compile(r"[a-zA-Z0-9\-._~:/?#\[\]@!$&'()*+,;=%]")

URL_START_PATTERN = re.compile(r"[a-zA-Z]+://")

DELIMITER_KINDS: Dict[str, TokenKind] = {
    "*": TokenKind.ASTERISK,
    "_": TokenKind.UNDERSCORE,
    "~": TokenKind.TILDE,
}


def char_isBoundary(character: Optional[str]) -> bool:
    """
    Return whether the character is a boundary character.

    None (before the start or past the end of the text) counts as a boundary.
    """
    return character is None or BOUNDARY_PATTERN.match(character) is not None


def char_isUrlBoundary(character: Optional[str]) -> bool:
    """
    Return whether the character ends an URL.

    None (past the end of the text) counts as an URL boundary.
    """
    return character is None or URL_CHAR_PATTERN.match(character) is None


class Scanner:
    """
    Single-pass scanner over one text string

    Each instance owns its own buffer and token list, so one Scanner must
    not be shared between concurrent scans. Use scan() for the common case.
    """

    def __init__(self, text: str):
        """
        Initialize scanner with source text

        Attributes:
            text: Source text being scanned
            position: Current character position in text
            tokens: Tokens emitted so far
            text_buffer: Characters pending for the next TEXT token
            matching_url: True while copying an URL verbatim
        """
        self.text = text
        self.position = 0
        self.tokens: List[Token] = []
        self.text_buffer: List[str] = []
        self.matching_url = False

    def char_at(self, index: int) -> Optional[str]:
        """Return the character at index, or None outside the text."""
        if 0 <= index < len(self.text):
            return self.text[index]
        return None

    def textBuffer_flush(self) -> None:
        """Emit pending characters as one TEXT token, if there are any."""
        if self.text_buffer:
            self.tokens.append(Token(TokenKind.TEXT, ''.join(self.text_buffer)))
            self.text_buffer = []

    def token_emit(self, kind: TokenKind) -> None:
        """Flush pending text, then emit a payload-free token."""
        self.textBuffer_flush()
        self.tokens.append(Token(kind))

    def urlStart_possible(self) -> bool:
        """
        Return whether an URL may start at the current position

        Inside a run of ASCII letters the scheme match can only succeed where
        the run begins: a later position reaches the same end of run, and
        URL mode never ends mid-run since letters are URL characters.
        """
        previous = self.char_at(self.position - 1)
        return previous is None or not ('a' <= previous <= 'z' or 'A' <= previous <= 'Z')

    def url_step(self, character: str) -> None:
        """Copy one URL character and leave URL mode at the URL's last character."""
        self.text_buffer.append(character)
        if char_isUrlBoundary(self.char_at(self.position + 1)):
            self.textBuffer_flush()
            self.matching_url = False

    def markup_step(self, character: str) -> None:
        """Classify one character outside an URL."""
        kind = DELIMITER_KINDS.get(character)
        if kind is not None and (
            char_isBoundary(self.char_at(self.position - 1))
            or char_isBoundary(self.char_at(self.position + 1))
        ):
            self.token_emit(kind)
        elif character == '\n':
            self.token_emit(TokenKind.NEWLINE)
        else:
            self.text_buffer.append(character)

    def scan(self) -> List[Token]:
        """
        Scan the whole text into tokens

        Returns:
            List of tokens in document order. Empty text gives [].
        """
        self.position = 0
        while self.position < len(self.text):
            character = self.text[self.position]

            if not self.matching_url and self.urlStart_possible():
                self.matching_url = URL_START_PATTERN.match(self.text, self.position) is not None

            # URLs have their own, narrower set of boundary characters
            if self.matching_url:
                self.url_step(character)
            else:
                self.markup_step(character)
            self.position += 1

        self.textBuffer_flush()
        LOG(f"Scanned {len(self.text)} characters into {len(self.tokens)} tokens", level=2)
        return self.tokens


def scan(text: str) -> List[Token]:
    """
    Convert text to a list of markup tokens.

    Args:
        text: Plain text with inline markup

    Returns:
        Tokens in document order
    """
    return Scanner(text).scan()
