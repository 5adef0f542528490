"""
Command line front end for the Lua lexer.

Reads a Lua file (or stdin), tokenizes it and prints the token stream.
Useful for checking what the obfuscator will see before it touches a file.

Author: xwest
"""

import argparse
import logging
import sys
from collections import Counter
from typing import List, Optional

from .lexer import Lexer, LexerError, Token, TokenKind

logger = logging.getLogger(__name__)


def read_source(path: str) -> str:
    """Load a Lua file as UTF-8 text; ``-`` reads stdin."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def format_summary(tokens: List[Token]) -> str:
    counts = Counter(token.kind for token in tokens)
    lines = [f"{kind.label:<12} {counts.get(kind, 0)}" for kind in TokenKind]
    lines.append(f"{'Total':<12} {len(tokens)}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luaobf-lex",
        description="Tokenize Lua source and print the token stream",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    luaobf-lex script.lua                  # One token per line
    luaobf-lex script.lua --skip-trivia    # Hide whitespace and comments
    luaobf-lex script.lua --summary        # Token counts per kind
    cat script.lua | luaobf-lex - --check  # Verify lossless round trip
        """
    )

    parser.add_argument('path',
                        help='Lua source file, or - for stdin')
    parser.add_argument('--name',
                        help='Source name used in error messages (default: the path)')
    parser.add_argument('--skip-trivia', action='store_true',
                        help='Omit whitespace and comment tokens')
    parser.add_argument('--summary', action='store_true',
                        help='Print token counts per kind instead of the tokens')
    parser.add_argument('--check', action='store_true',
                        help='Fail if the tokens do not reproduce the source exactly')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for luaobf-lex. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source_name = args.name or ("stdin" if args.path == "-" else args.path)

    try:
        source = read_source(args.path)
    except OSError as e:
        print(f"luaobf-lex: cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    try:
        tokens = Lexer(source, source_name).tokenize()
    except LexerError as e:
        print(e.diagnostic.render(), file=sys.stderr, end="")
        return 1

    if args.check:
        rebuilt = "".join(token.text for token in tokens)
        if rebuilt != source:
            logger.error("round trip mismatch for %s", source_name)
            return 1
        logger.debug("round trip ok for %s", source_name)

    if args.summary:
        print(format_summary(tokens))
        return 0

    for token in tokens:
        if args.skip_trivia and token.is_trivia:
            continue
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
