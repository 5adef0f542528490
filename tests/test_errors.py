"""
Tests for lexer error reporting.

Each unfinished literal must raise its own error class, carrying the
source name and the line where the problem was detected.

Author: xwest
"""

import unittest
import pickle
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from luaobfuscator.lexer import (
    Lexer, LexerError, UnfinishedStringError, UnfinishedLongStringError,
    UnfinishedLongCommentError, tokenize_string,
)
from luaobfuscator.lexer.errors import ERROR_CODES


class TestUnfinishedLiterals(unittest.TestCase):

    def assertLexError(self, source, error_class, message, source_name="code"):
        with self.assertRaises(error_class) as ctx:
            tokenize_string(source, source_name)
        self.assertIsInstance(ctx.exception, LexerError)
        self.assertEqual(str(ctx.exception), message)
        return ctx.exception

    def test_unfinished_string(self):
        error = self.assertLexError('"abc', UnfinishedStringError, "code:1: unfinished string")
        self.assertEqual(error.line, 1)
        self.assertEqual(error.source_name, "code")

    def test_lone_quote(self):
        self.assertLexError("'", UnfinishedStringError, "code:1: unfinished string")

    def test_escaped_closing_quote_leaves_string_open(self):
        self.assertLexError("'abc\\'", UnfinishedStringError, "code:1: unfinished string")

    def test_trailing_backslash(self):
        self.assertLexError("'abc\\", UnfinishedStringError, "code:1: unfinished string")

    def test_string_error_reports_line_at_detection(self):
        self.assertLexError('x = 1\ny = "abc\ndef', UnfinishedStringError,
                            "code:3: unfinished string")

    def test_mismatched_quotes(self):
        self.assertLexError("'abc\"", UnfinishedStringError, "code:1: unfinished string")

    def test_unfinished_long_string(self):
        self.assertLexError("[[abc", UnfinishedLongStringError,
                            "code:1: unfinished multiline string")

    def test_long_string_error_reports_opening_line(self):
        self.assertLexError("a\nb\n[[abc\ndef", UnfinishedLongStringError,
                            "code:3: unfinished multiline string")

    def test_single_close_bracket_is_not_enough(self):
        self.assertLexError("[[abc]", UnfinishedLongStringError,
                            "code:1: unfinished multiline string")

    def test_unfinished_long_comment(self):
        self.assertLexError("x\n--[[ never closed\n", UnfinishedLongCommentError,
                            "code:2: unfinished multiline comment")

    def test_custom_source_name(self):
        self.assertLexError("'x", UnfinishedStringError,
                            "main.lua:1: unfinished string", source_name="main.lua")

    def test_tokens_before_error_are_returned(self):
        lexer = Lexer("local s = 'oops")
        texts = [lexer.next_token().text for _ in range(6)]
        self.assertEqual(texts, ["local", " ", "s", " ", "=", " "])
        with self.assertRaises(UnfinishedStringError):
            lexer.next_token()

    def test_other_input_never_fails(self):
        tokens = tokenize_string("0x.x.x 9zz ]] @@ \\ `")
        self.assertTrue(tokens[-1].is_eof)


class TestErrorDetails(unittest.TestCase):

    def test_codes(self):
        self.assertEqual(UnfinishedStringError.code, "L001")
        self.assertEqual(UnfinishedLongStringError.code, "L002")
        self.assertEqual(UnfinishedLongCommentError.code, "L003")
        for cls in (UnfinishedStringError, UnfinishedLongStringError, UnfinishedLongCommentError):
            self.assertIn(cls.code, ERROR_CODES)

    def test_diagnostic(self):
        error = UnfinishedLongCommentError("init.lua", 7)
        self.assertEqual(error.diagnostic.message, "unfinished multiline comment")
        self.assertEqual(error.diagnostic.location, "init.lua:7")
        self.assertEqual(error.diagnostic.severity, "error")

    def test_render(self):
        rendered = UnfinishedStringError("a.lua", 2).diagnostic.render()
        self.assertTrue(rendered.startswith("ERROR[L001]: unfinished string\n"))
        self.assertIn("  --> a.lua:2\n", rendered)
        self.assertIn("help:", rendered)

    def test_args_message(self):
        error = UnfinishedStringError("code", 4)
        self.assertEqual(error.args, ("code:4: unfinished string",))

    def test_pickle(self):
        error = pickle.loads(pickle.dumps(UnfinishedLongStringError("x.lua", 5)))
        self.assertIsInstance(error, UnfinishedLongStringError)
        self.assertEqual(str(error), "x.lua:5: unfinished multiline string")


if __name__ == '__main__':
    unittest.main()
