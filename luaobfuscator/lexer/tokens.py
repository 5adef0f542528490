"""
Token definitions for the Lua lexer.

Every token is a kind tag plus the exact slice of source it covers.
Whitespace and comments are tokens too, so a token stream can always be
joined back into the original source byte for byte.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenKind(Enum):
    """
    Enumeration of the token kinds produced by the Lua lexer.

    The set is closed: every slice of source belongs to exactly one kind.
    """

    KEYWORD = auto()                # local, function, end, ...
    IDENTIFIER = auto()             # x, _G, my_var2
    NUMBER = auto()                 # 10, 0xFF, 3.14 (not validated)
    STRING = auto()                 # "abc", 'a\'b', [[long]]
    PUNCTUATION = auto()            # = == ~= ... ( ) { } and anything unknown
    WHITESPACE = auto()             # spaces, tabs, newlines
    COMMENT = auto()                # -- line, --[[ block ]]
    EOF = auto()                    # End of input (empty text)

    @property
    def label(self) -> str:
        """Display name, e.g. ``Keyword`` for ``KEYWORD``."""
        if self is TokenKind.EOF:
            return "EOF"
        return self.name.capitalize()


@dataclass(frozen=True)
class Token:
    """
    A lexical token: a kind and the raw source text it was cut from.

    ``text`` is never empty except for the end-of-input token.
    """
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"[{self.kind.label}] '{self.text}'"

    @property
    def is_trivia(self) -> bool:
        """Whitespace and comments carry no syntax for a parser."""
        return self.kind in (TokenKind.WHITESPACE, TokenKind.COMMENT)

    @property
    def is_keyword(self) -> bool:
        return self.kind == TokenKind.KEYWORD

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF


# Shared end-of-input sentinel, returned on every call once input runs out
EOF_TOKEN = Token(TokenKind.EOF, "")


# Reserved words of Lua 5.1
KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false",
    "for", "function", "if", "in", "local", "nil", "not",
    "or", "repeat", "return", "then", "true", "until", "while",
})

# Multi-character operators; every other punctuation character is
# emitted on its own.
GROUP_PUNCTUATION = frozenset({
    "==", "~=", "<=", ">=", "..", "...",
})

# Opening markers for long brackets. Only the unleveled form is recognized.
LONG_STRING_OPEN = "[["
LONG_COMMENT_OPEN = "--[["
LONG_BRACKET_CLOSE = "]]"
LINE_COMMENT_OPEN = "--"

QUOTES = ('"', "'")
ESCAPE = "\\"
