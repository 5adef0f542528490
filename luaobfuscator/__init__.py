"""
Lua Obfuscator Package

Front end of the Lua obfuscation toolchain. The lexer turns Lua source
into a lossless token stream that later stages rename and reassemble.

Architecture:
    luaobfuscator/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # luaobf-lex command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, LexerError, tokenize_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenKind",
    "LexerError",
    "tokenize_string",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
