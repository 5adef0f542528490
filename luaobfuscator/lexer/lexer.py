"""
Lua Lexer - cuts Lua source into a lossless stream of tokens

Whitespace and comments come out as tokens like everything else, so the
obfuscator can rewrite identifiers and glue the stream back together
without disturbing anything it didn't touch.

The scanner is deliberately forgiving. Numbers are grabbed greedily and
never validated, unknown characters become one-character punctuation, and
the only failures are literals that run off the end of the input.

xwest
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Type

from .tokens import (
    Token, TokenKind, EOF_TOKEN, KEYWORDS, GROUP_PUNCTUATION,
    LONG_STRING_OPEN, LONG_COMMENT_OPEN, LONG_BRACKET_CLOSE, LINE_COMMENT_OPEN,
    QUOTES, ESCAPE,
)
from .errors import (
    LexerError, UnfinishedStringError, UnfinishedLongStringError,
    UnfinishedLongCommentError,
)

logger = logging.getLogger(__name__)

HEX_LETTERS = frozenset("abcdefABCDEF")

# File/group/record/unit separators; str.isspace() accepts them, Lua doesn't
SEPARATOR_CONTROLS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in SEPARATOR_CONTROLS


def is_name_start(char: str) -> bool:
    return char == "_" or char.isalpha()


def is_name_char(char: str) -> bool:
    """Letters, decimal digits and underscores can continue a name."""
    return char == "_" or char.isalpha() or char.isdecimal()


def is_number_char(char: str) -> bool:
    # Accepts hex letters and 'x' anywhere in the run; "10x" and "1e5"
    # are single tokens, "1e-5" is not.
    return char.isdecimal() or char in ".x" or char in HEX_LETTERS


def is_line_end(char: str) -> bool:
    return char in "\r\n"


@dataclass(frozen=True)
class LexResult:
    """
    Outcome of a single scan step: exactly one of ``token`` and ``error``.
    """
    token: Optional[Token] = None
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Token:
        """Return the token, or raise the error this step produced."""
        if self.error is not None:
            raise self.error
        return self.token


class Lexer:
    """
    Lua lexical analyzer.

    A cursor over an immutable source string. Each call to ``next_token``
    classifies the character under the cursor, consumes one token and
    returns it. Instances are single-owner and not thread-safe.
    """

    def __init__(self, source: str, source_name: str = "code"):
        """
        Initialize the lexer with source code.

        Args:
            source: Lua source code, already decoded
            source_name: Label used in error messages
        """
        self.source = source
        self.source_name = source_name
        self.offset = 0
        self.line = 1
        self.at_end = len(source) == 0

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns ``EOF_TOKEN`` once the input is exhausted, on every call.

        Raises:
            LexerError: If a string or long bracket literal is unfinished
        """
        if self.at_end:
            return EOF_TOKEN

        char = self.source[self.offset]

        if is_whitespace(char):
            return Token(TokenKind.WHITESPACE, self._consume_while(is_whitespace))

        if is_name_start(char):
            name = self._consume_while(is_name_char)
            kind = TokenKind.KEYWORD if name in KEYWORDS else TokenKind.IDENTIFIER
            return Token(kind, name)

        if char.isdecimal():
            return Token(TokenKind.NUMBER, self._consume_while(is_number_char))

        if char in QUOTES:
            return self._scan_short_string(char)

        if self._starts_with(LONG_STRING_OPEN):
            return self._scan_long_bracket(TokenKind.STRING, UnfinishedLongStringError)

        # Must be checked before the line comment, which shares its prefix
        if self._starts_with(LONG_COMMENT_OPEN):
            return self._scan_long_bracket(TokenKind.COMMENT, UnfinishedLongCommentError)

        if self._starts_with(LINE_COMMENT_OPEN):
            text = self._consume_while(lambda c: not is_line_end(c))
            return Token(TokenKind.COMMENT, text)

        return self._scan_punctuation()

    def scan(self) -> LexResult:
        """Like ``next_token``, but reports lexical errors as a result value."""
        try:
            return LexResult(token=self.next_token())
        except LexerError as error:
            return LexResult(error=error)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source.

        Returns:
            List of tokens ending with the EOF token

        Raises:
            LexerError: On the first unfinished literal
        """
        logger.debug("tokenizing %s (%d chars)", self.source_name, len(self.source))
        tokens = list(self)
        tokens.append(EOF_TOKEN)
        logger.debug("%s: %d tokens", self.source_name, len(tokens))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the EOF token."""
        while True:
            token = self.next_token()
            if token.is_eof:
                return
            yield token

    def _scan_short_string(self, delimiter: str) -> Token:
        """
        Scan a quoted string. Escapes are skipped, never interpreted.

        Every character is checked for a backslash, including the first one
        after the opening quote and the one right after an escape pair, so
        ``'\\''`` and ``"\\\\"`` are each a single string.
        """
        start = self.offset
        self._advance()  # Skip opening quote

        while True:
            if self.at_end:
                raise self._error(UnfinishedStringError)
            char = self.source[self.offset]
            if char == delimiter:
                break
            if char == ESCAPE:
                self._advance()  # The escaped character goes with it
            self._advance()

        self._advance()  # Skip closing quote
        return Token(TokenKind.STRING, self.source[start:self.offset])

    def _scan_long_bracket(self, kind: TokenKind, error_class: Type[LexerError]) -> Token:
        """Scan ``[[...]]`` or ``--[[...]]`` up to the first ``]]``."""
        end = self.source.find(LONG_BRACKET_CLOSE, self.offset)
        if end == -1:
            raise self._error(error_class)
        return Token(kind, self._advance_to(end + len(LONG_BRACKET_CLOSE)))

    def _scan_punctuation(self) -> Token:
        """Longest match over the group operators, else a single character."""
        end = self.offset + 1
        while (end < len(self.source) and
               self.source[self.offset:end + 1] in GROUP_PUNCTUATION):
            end += 1
        return Token(TokenKind.PUNCTUATION, self._advance_to(end))

    def _error(self, error_class: Type[LexerError]) -> LexerError:
        error = error_class(self.source_name, self.line)
        logger.debug("lexer error: %s", error)
        return error

    def _advance(self):
        """Advance one character, counting newlines as they are consumed."""
        if self.at_end:
            return
        if self.source[self.offset] == "\n":
            self.line += 1
        self.offset += 1
        if self.offset == len(self.source):
            self.at_end = True

    def _advance_to(self, index: int) -> str:
        """Advance up to ``index`` and return the text passed over."""
        start = self.offset
        while self.offset < index and not self.at_end:
            self._advance()
        return self.source[start:self.offset]

    def _consume_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.offset
        while not self.at_end and predicate(self.source[self.offset]):
            self._advance()
        return self.source[start:self.offset]

    def _starts_with(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.offset)


def tokenize_string(source: str, source_name: str = "code") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Lua source code
        source_name: Name used in error messages

    Returns:
        List of tokens, ending with the EOF token

    Raises:
        LexerError: If a literal is unfinished
    """
    return Lexer(source, source_name).tokenize()
