"""
Error handling for the Lua lexer.

The lexer only ever fails on a literal that runs into the end of input.
Each failure carries the source name and the line where it was detected,
and renders as ``<source>:<line>: <reason>``.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unfinished string literal",
    "L002": "Unfinished multiline string literal",
    "L003": "Unfinished multiline comment",
}


@dataclass(frozen=True)
class Diagnostic:
    """Diagnostic record attached to every lexer error."""
    message: str
    source_name: str
    line: int
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def location(self) -> str:
        return f"{self.source_name}:{self.line}"

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"

    def render(self) -> str:
        """Long form used by the command line tool."""
        prefix = self.severity.upper()
        if self.code:
            prefix += f"[{self.code}]"
        result = f"{prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot finish a literal.

    Subclasses fix ``reason``, ``code`` and ``help_text``; the instance
    supplies where it happened.
    """

    reason = "lexical error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __init__(self, source_name: str, line: int):
        self.source_name = source_name
        self.line = line
        self.diagnostic = Diagnostic(
            message=self.reason,
            source_name=source_name,
            line=line,
            code=self.code,
            help_text=self.help_text,
        )
        super().__init__(str(self.diagnostic))

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __reduce__(self):
        return (type(self), (self.source_name, self.line))


class UnfinishedStringError(LexerError):
    """A quoted string reached end of input before its closing quote."""
    reason = "unfinished string"
    code = "L001"
    help_text = "Close the string with the same quote that opened it."


class UnfinishedLongStringError(LexerError):
    """A ``[[`` string has no matching ``]]``."""
    reason = "unfinished multiline string"
    code = "L002"
    help_text = "Multiline strings must be closed with ']]'."


class UnfinishedLongCommentError(LexerError):
    """A ``--[[`` comment has no matching ``]]``."""
    reason = "unfinished multiline comment"
    code = "L003"
    help_text = "Multiline comments must be closed with ']]'."
