"""Shunting-yard conversion of infix tokens to a postfix sequence.

The postfix sequence is a plain list of tokens: `OperatorToken`s are the
operators, every other token is an operand.

>>> from infixcalc.lexer import tokenize
>>> render_postfix(to_postfix(tokenize("1 + 2 * 3 - 4")))
'1 2 3 * + 4 -'
"""
import logging

from .errors import (
    EmptyExpression,
    Expected,
    InvalidExpression,
    InvalidLeadingOperator,
    InvalidOperator,
    MismatchedParentheses,
    MissingOperator,
    TwoOperandsInARow,
)
from .tokens import (
    ASSIGN,
    LPAREN,
    MUL,
    RPAREN,
    SUB,
    OPERANDS,
    Number,
    NumberToken,
    OperatorToken,
)

logger = logging.getLogger(__name__)


def negated(pos):
    """Postfix suffix that negates the operand just emitted."""
    return [NumberToken(Number(-1.0), pos), OperatorToken(MUL, pos)]


def to_postfix(tokens):
    if not tokens:
        raise EmptyExpression()
    first = tokens[0]
    if isinstance(first, OperatorToken) and first.op not in (SUB, LPAREN):
        raise InvalidLeadingOperator(first.op.symbol, position=first.pos)

    postfix = []
    # Pending "(" entries remember whether their group is negated.
    ops = []
    negate = False
    last_was_operand = False
    last = None

    for tok in tokens:
        if isinstance(tok, OPERANDS):
            if last_was_operand:
                raise TwoOperandsInARow(position=tok.pos)
            if negate and isinstance(tok, NumberToken):
                postfix.append(tok._replace(value=-tok.value))
            else:
                postfix.append(tok)
                if negate:
                    postfix.extend(negated(tok.pos))
            negate = False
            last_was_operand = True
        elif tok.op is LPAREN:
            if last_was_operand:
                raise MissingOperator(position=tok.pos)
            ops.append((tok, negate))
            negate = False
        elif tok.op is RPAREN:
            if not last_was_operand:
                raise Expected("operand", ")", position=tok.pos)
            while ops and ops[-1][0].op is not LPAREN:
                postfix.append(ops.pop()[0])
            if not ops:
                raise MismatchedParentheses(")", "(", position=tok.pos)
            if ops.pop()[1]:
                postfix.extend(negated(tok.pos))
        elif tok.op is ASSIGN:
            raise InvalidOperator(tok.op.symbol, position=tok.pos)
        elif not last_was_operand:
            # Only minus may stand where an operand is expected; it negates.
            if tok.op is not SUB:
                raise InvalidOperator(tok.op.symbol, position=tok.pos)
            negate = not negate
        else:
            while ops and ops[-1][0].op.left_first(tok.op):
                postfix.append(ops.pop()[0])
            ops.append((tok, False))
            last_was_operand = False
        last = tok

    if not last_was_operand and last.op is not LPAREN:
        raise InvalidExpression(f"trailing operator {last.op.symbol!r}", position=last.pos)
    while ops:
        tok, _ = ops.pop()
        if tok.op is LPAREN:
            raise MismatchedParentheses("(", ")", position=tok.pos)
        postfix.append(tok)

    logger.debug("postfix: %s", render_postfix(postfix))
    return postfix


def render_postfix(postfix):
    return " ".join(map(str, postfix))
