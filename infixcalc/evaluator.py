"""Evaluate postfix sequences with an operand stack.

`evaluate_with_bindings` first rewrites identifiers and function calls in
place into numbers, using caller supplied tables, then evaluates.

>>> from infixcalc.lexer import tokenize
>>> from infixcalc.postfix import to_postfix
>>> evaluate_with_bindings(to_postfix(tokenize("(x + 4) / 5")), {"x": 16})
Number(4)
"""
import logging

import numpy as np

from . import config
from .errors import (
    ExpressionError,
    InvalidArgument,
    InvalidExpression,
    InvalidOperand,
    InvalidOperator,
    UndefinedFunction,
    UndefinedVariable,
)
from .tokens import FunctionCall, Identifier, Number, NumberToken, OperatorToken

logger = logging.getLogger(__name__)


def reduce_postfix(postfix, load):
    """Run the operand stack machine over `postfix`.

    `load` maps an operand item to its value; operators combine values with
    their kernels. Returns the single value left on the stack.
    """
    stack = []
    for item in postfix:
        if not isinstance(item, OperatorToken):
            stack.append(load(item))
            continue
        if not item.op.applicable:
            raise InvalidOperator(item.op.symbol, position=item.pos)
        if len(stack) < 2:
            raise InvalidExpression(
                f"not enough operands for {item.op.symbol!r}", position=item.pos
            )
        right = stack.pop()
        left = stack.pop()
        try:
            # inf - inf and the like are nan, not warnings.
            with np.errstate(all="ignore"):
                stack.append(item.op(left, right))
        except ExpressionError as err:
            raise err.at(item.pos)
    if len(stack) != 1:
        raise InvalidExpression(f"{len(stack)} values left after evaluation")
    return stack[0]


def load_number(item):
    if isinstance(item, NumberToken):
        return float(item.value)
    if isinstance(item, Identifier):
        raise UndefinedVariable(item.name, position=item.pos)
    if isinstance(item, FunctionCall):
        raise UndefinedFunction(item.name, position=item.pos)
    raise InvalidOperand(str(item), position=item.pos)


def evaluate(postfix):
    """Evaluate a postfix sequence whose operands are all numbers."""
    return Number(reduce_postfix(postfix, load_number))


def lookup_variable(ident, definitions):
    try:
        value = definitions[ident.name]
    except KeyError:
        raise UndefinedVariable(ident.name, position=ident.pos) from None
    if isinstance(value, (str, bytes)):
        raise InvalidOperand(f"{ident.name} = {value!r}", position=ident.pos)
    try:
        return Number(value)
    except (TypeError, ValueError):
        raise InvalidOperand(f"{ident.name} = {value!r}", position=ident.pos) from None


def resolve_identifiers(postfix, definitions):
    for i, item in enumerate(postfix):
        if isinstance(item, Identifier):
            postfix[i] = NumberToken(lookup_variable(item, definitions), item.pos)


def call_function(call, functions, definitions=None, depth=0):
    """Return the value of `call`, resolving nested calls in its arguments first."""
    fun = functions.get(call.name)
    if fun is None:
        raise UndefinedFunction(call.name, position=call.pos)
    if depth >= config.MAX_CALL_DEPTH:
        raise InvalidExpression(
            f"function calls nested deeper than {config.MAX_CALL_DEPTH}",
            position=call.pos,
        )

    args = []
    for arg in call.args:
        if isinstance(arg, NumberToken):
            args.append(arg.value)
        elif isinstance(arg, Identifier):
            if definitions is None:
                raise InvalidArgument(call.name, arg.name, position=arg.pos)
            args.append(lookup_variable(arg, definitions))
        elif isinstance(arg, FunctionCall):
            args.append(call_function(arg, functions, definitions, depth + 1))
        else:
            raise InvalidArgument(call.name, str(arg), position=arg.pos)

    try:
        value = Number(fun(args))
    except ExpressionError as err:
        raise err.at(call.pos)
    logger.debug("%s(%s) = %s", call.name, ", ".join(map(str, args)), value)
    return value


def resolve_calls(postfix, functions, definitions=None):
    for i, item in enumerate(postfix):
        if isinstance(item, FunctionCall):
            value = call_function(item, functions, definitions)
            postfix[i] = NumberToken(value, item.pos)


def evaluate_with_bindings(postfix, definitions=None, functions=None):
    """Substitute `definitions` and call `functions`, then evaluate.

    `postfix` is rewritten in place: resolved identifiers and function calls
    are replaced by number tokens.
    """
    if definitions is not None:
        resolve_identifiers(postfix, definitions)
    if functions is not None:
        resolve_calls(postfix, functions, definitions)
    return evaluate(postfix)
