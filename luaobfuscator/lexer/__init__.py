"""
Lua Lexer Package

Implements the lexical analyzer (tokenizer) used by the Lua obfuscator.
Produces a lossless token stream: joining the text of every token gives
back the original source exactly.

Key Features:
- Whitespace and comments kept as first-class tokens
- Longest-match operators (==, ~=, <=, >=, .., ...)
- Quoted strings with escape skipping, unleveled [[ ]] long brackets
- Greedy, non-validating number scanning
- Fatal, located errors for unfinished literals only

Author: xwest
"""

from .tokens import Token, TokenKind, EOF_TOKEN, KEYWORDS, GROUP_PUNCTUATION
from .lexer import Lexer, LexResult, tokenize_string
from .errors import (
    Diagnostic,
    LexerError,
    UnfinishedStringError,
    UnfinishedLongStringError,
    UnfinishedLongCommentError,
)

__all__ = [
    "Lexer",
    "LexResult",
    "Token",
    "TokenKind",
    "EOF_TOKEN",
    "KEYWORDS",
    "GROUP_PUNCTUATION",
    "tokenize_string",
    "Diagnostic",
    "LexerError",
    "UnfinishedStringError",
    "UnfinishedLongStringError",
    "UnfinishedLongCommentError",
]
