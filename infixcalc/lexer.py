"""Turn expression source text into a list of positioned tokens.

>>> [str(t) for t in tokenize("(x + 3) / log(2, 16)")]
['(', 'x', '+', '3', ')', '/', 'log(2, 16)']
"""
import logging

from . import config
from .errors import (
    Expected,
    InvalidCharacter,
    InvalidExpression,
    InvalidNumber,
    UnexpectedEndOfInput,
)
from .tokens import (
    OPERATOR_CHARS,
    FunctionCall,
    Identifier,
    Number,
    NumberToken,
    OperatorToken,
    Position,
)

logger = logging.getLogger(__name__)

WHITESPACE = " \t\r\n"


class Cursor:
    """A character stream that tracks the line and column of the next character."""

    def __init__(self, text):
        self.text = text
        self.index = 0
        self.line = 1
        self.column = 1

    @property
    def position(self):
        return Position(self.line, self.column)

    def peek(self):
        return self.text[self.index] if self.index < len(self.text) else None

    def consume(self):
        c = self.peek()
        if c is not None:
            self.index += 1
            self.advance(c)
        return c

    def advance(self, c):
        self.column += 1
        if c == "\n":
            self.line += 1
            self.column = 1

    def skip_whitespace(self):
        while (c := self.peek()) is not None and c in WHITESPACE:
            self.consume()


def is_identifier_start(c):
    return c.isalpha() or c == "_"


def lex_number(cursor):
    pos = cursor.position
    literal = ""
    while (c := cursor.peek()) is not None and (c.isdecimal() or c == "."):
        if c == "." and "." in literal:
            raise InvalidNumber(literal, position=pos)
        literal += cursor.consume()
    try:
        value = float(literal)
    except ValueError:
        raise InvalidNumber(literal, position=pos) from None
    if value == float("inf"):
        raise InvalidNumber(literal, position=pos)
    return NumberToken(Number(value), pos)


def lex_arguments(cursor, allow_identifiers, depth):
    args = []
    while True:
        cursor.skip_whitespace()
        c = cursor.peek()
        if c is None:
            raise UnexpectedEndOfInput(position=cursor.position)
        if c == ")":
            cursor.consume()
            return tuple(args)
        args.append(next_token(cursor, allow_identifiers, depth))
        cursor.skip_whitespace()
        c = cursor.peek()
        if c == ",":
            cursor.consume()
        elif c is None:
            raise UnexpectedEndOfInput(position=cursor.position)
        elif c != ")":
            raise Expected(", or )", c, position=cursor.position)


def lex_identifier(cursor, allow_identifiers, depth=0):
    pos = cursor.position
    name = ""
    while (c := cursor.peek()) is not None and (c.isalnum() or c == "_"):
        name += cursor.consume()
    if cursor.peek() != "(":
        return Identifier(name, pos)
    if depth >= config.MAX_CALL_DEPTH:
        raise InvalidExpression(
            f"function calls nested deeper than {config.MAX_CALL_DEPTH}", position=pos
        )
    cursor.consume()
    return FunctionCall(name, lex_arguments(cursor, allow_identifiers, depth + 1), pos)


def next_token(cursor, allow_identifiers=True, depth=0):
    """Lex the token starting at the cursor."""
    c = cursor.peek()
    pos = cursor.position
    if c is None:
        raise UnexpectedEndOfInput(position=pos)
    if op := OPERATOR_CHARS.get(c):
        cursor.consume()
        return OperatorToken(op, pos)
    if allow_identifiers and is_identifier_start(c):
        return lex_identifier(cursor, allow_identifiers, depth)
    if c.isdecimal():
        return lex_number(cursor)
    raise InvalidCharacter(c, position=pos)


def tokenize(text, allow_identifiers=True):
    """Return the tokens of `text`; an empty or blank `text` gives [].

    If `allow_identifiers` is false, names (and hence function calls) are
    rejected as invalid characters.
    """
    cursor = Cursor(text)
    tokens = []
    while True:
        cursor.skip_whitespace()
        if cursor.peek() is None:
            break
        tokens.append(next_token(cursor, allow_identifiers))
    logger.debug("lexed %d tokens from %r", len(tokens), text)
    return tokens
