"""
  Egg Reader: recursive-descent parser

- Works directly on the source string with a cursor; the scanner is the set of
  anchored regexes below, tried at the cursor after skipping separators.
- Emits frozen Expression nodes:

    - "text"       -> Value("text")   (no escapes, may span lines)
    - 123          -> Value(123.0)
    - name         -> Word("name")    (anything but whitespace ( ) , ")
    - f(a, b)      -> Apply(Word("f"), (Word("a"), Word("b")))
    - f(a)(b)      -> Apply(Apply(Word("f"), (Word("a"),)), (Word("b"),))

- Separators are whitespace and `#` comments running to the end of the line.
"""

from __future__ import annotations

import logging
import re

from egg.errors import EggIncompleteInput, EggSyntaxError
from egg.types.expression import Apply, Expression, Value, Word

logger = logging.getLogger(__name__)


SEPARATOR_RE = re.compile(r"(?:\s+|#[^\n]*)*")
STRING_RE = re.compile(r'"([^"]*)"')
# Digits followed by a word boundary: "12" is a number, "12ab" is a word
NUMBER_RE = re.compile(r"[0-9]+(?![0-9A-Za-z_])")
WORD_RE = re.compile(r'[^\s(),"]+')

_SNIPPET_LEN = 40


def _snippet(text: str) -> str:
    if len(text) <= _SNIPPET_LEN:
        return text
    return text[:_SNIPPET_LEN] + "..."


class Parser:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def skip_separators(self) -> None:
        self.pos = SEPARATOR_RE.match(self.source, self.pos).end()

    def peek(self) -> str:
        """Current character, or '' at end of input."""
        return self.source[self.pos:self.pos + 1]

    def rest(self) -> str:
        return self.source[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def parse_expression(self) -> Expression:
        self.skip_separators()
        expr: Expression
        if match := STRING_RE.match(self.source, self.pos):
            expr = Value(match.group(1))
        elif match := NUMBER_RE.match(self.source, self.pos):
            expr = Value(float(match.group()))
        elif match := WORD_RE.match(self.source, self.pos):
            expr = Word(match.group())
        elif self.at_end():
            raise EggIncompleteInput("Unexpected end of input")
        elif self.peek() == '"':
            raise EggIncompleteInput(f"Unterminated string: {_snippet(self.rest())}")
        else:
            raise EggSyntaxError(f"Unexpected syntax: {_snippet(self.rest())}")
        self.pos = match.end()
        return self.parse_apply(expr)

    def parse_apply(self, expr: Expression) -> Expression:
        """Wrap `expr` in an Apply for each argument list that follows it."""
        while True:
            self.skip_separators()
            if self.peek() != "(":
                return expr
            self.pos += 1
            self.skip_separators()
            args: list[Expression] = []
            while self.peek() != ")":
                args.append(self.parse_expression())
                self.skip_separators()
                ch = self.peek()
                if ch == ",":
                    self.pos += 1
                    self.skip_separators()
                elif ch != ")":
                    if not ch:
                        raise EggIncompleteInput("Expected ',' or ')' before end of input")
                    raise EggSyntaxError(f"Expected ',' or ')' at: {_snippet(self.rest())}")
            self.pos += 1  # consume ")"
            expr = Apply(expr, tuple(args))

    def parse_program(self) -> Expression:
        """Parse one expression that must span the whole source."""
        expr = self.parse_expression()
        self.skip_separators()
        if not self.at_end():
            raise EggSyntaxError(f"Unexpected text after program: {_snippet(self.rest())}")
        return expr


def parse(source: str) -> Expression:
    """Parse a complete Egg program into a single Expression."""
    expr = Parser(source).parse_program()
    logger.debug("parsed program: %s", expr)
    return expr
